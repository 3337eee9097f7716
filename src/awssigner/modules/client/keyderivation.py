from ..crypto.primitives import hmac_sha256
from ..signingcontext import V4_TERMINATOR


class KeyDerivationChain(object):
    """
    Derives the signing key scoped to a single day, region and service from the secret key.
    Each step's output is the HMAC key of the next step; all values stay raw bytes.
    """
    _KEY_PREFIX = b"AWS4"

    def derive_key(self, secret, datestamp, region, service):
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        k_date = hmac_sha256(self._KEY_PREFIX + secret, datestamp)
        k_region = hmac_sha256(k_date, region)
        k_service = hmac_sha256(k_region, service)
        return hmac_sha256(k_service, V4_TERMINATOR)
