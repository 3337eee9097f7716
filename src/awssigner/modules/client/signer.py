from ..crypto.primitives import hex_encode, hmac_sha256
from ..logger.logger import get_logger


class Signer(object):
    """
    The signer is responsible for creating the string to sign and the final v4 signature
    together with the value of the Authorization header.
    """
    _LOGGER = get_logger(__name__)
    ALGORITHM = "AWS4-HMAC-SHA256"

    def sign(self, canonical_request_hash, context, signing_key, access_key, signed_headers):
        """
        Returns a tuple of (Authorization header value, amz date, credential scope).
        """
        amz_date = context.amz_date
        credential_scope = context.credential_scope
        string_to_sign = self._build_string_to_sign(amz_date, credential_scope, canonical_request_hash)
        signature = self._build_signature(signing_key, string_to_sign)
        return self._build_authorization(access_key, credential_scope, signed_headers, signature), amz_date, credential_scope

    def _build_string_to_sign(self, amz_date, credential_scope, canonical_request_hash):
        """ Creates string required for deriving signature """
        string_to_sign = self.ALGORITHM + '\n' + amz_date + '\n' + credential_scope + '\n' + canonical_request_hash
        self._LOGGER.debug("String to sign:\n" + string_to_sign)
        return string_to_sign

    def _build_signature(self, signing_key, string_to_sign):
        return hex_encode(hmac_sha256(signing_key, string_to_sign))

    def _build_authorization(self, access_key, credential_scope, signed_headers, signature):
        return self.ALGORITHM + " Credential=" + access_key + "/" + credential_scope + ", SignedHeaders=" \
            + signed_headers + ", Signature=" + signature
