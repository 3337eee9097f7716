from ..awsutils import utc_now
from ..configuration.confighelper import ConfigHelper
from ..crypto.primitives import sha256_hex
from ..logger.logger import get_logger
from ..signingcontext import SigningContext
from .canonicalizer import Canonicalizer
from .keyderivation import KeyDerivationChain
from .signer import Signer


class RequestSigner(object):
    """
    The request signer wires the canonicalizer, the key derivation chain and the signer together
    to produce the headers of a single signed request. It keeps no state between calls, so one
    instance can be shared by any number of threads.

    Credentials and region are resolved once, when the signer is created, using the precedence
    defined by ConfigHelper (explicit values, environment variables, credentials file).

    Keyword arguments:
    region -- the AWS region used in the credential scope (default resolved from configuration)
    credentials -- the AWSCredentials used for signing (default resolved from configuration)
    config_helper -- an already resolved ConfigHelper, takes precedence over region and credentials
    clock -- a callable returning the current UTC datetime (default awsutils.utc_now)
    """

    _LOGGER = get_logger(__name__)
    AUTHORIZATION_HEADER = "Authorization"
    DATE_HEADER = "x-amz-date"
    HOST_HEADER = "host"
    SECURITY_TOKEN_HEADER = "x-amz-security-token"

    def __init__(self, region=None, credentials=None, config_helper=None, clock=None):
        config_helper = config_helper or ConfigHelper(region=region, credentials=credentials)
        self.region = config_helper.region
        self.credentials = config_helper.credentials
        self.clock = clock or utc_now
        self.canonicalizer = Canonicalizer()
        self.key_derivation = KeyDerivationChain()
        self.signer = Signer()

    def sign(self, service, request, timestamp=None):
        """ Returns a new RequestDescriptor carrying the signed headers, method and body are preserved """
        return request.replace_headers(self.sign_headers(service, request, timestamp))

    def sign_headers(self, service, request, timestamp=None):
        """
        Signs the request and returns the complete header set to be sent with it:
        the caller's headers plus x-amz-date, host, x-amz-security-token (when a session token is used)
        and Authorization.
        """
        context = SigningContext(self.region, service, timestamp or self.clock())
        headers = self._build_headers(request, context)
        canonical_request, _ = self.canonicalizer.canonicalize(request.method, request.path_segments, request.query,
                                                               headers, request.body)
        signing_key = self.key_derivation.derive_key(self.credentials.secret_key, context.datestamp,
                                                     context.region, context.service)
        authorization, _, _ = self.signer.sign(sha256_hex(canonical_request), context, signing_key,
                                               self.credentials.access_key,
                                               self.canonicalizer.get_signed_headers(headers))
        headers[self.AUTHORIZATION_HEADER] = authorization
        self._LOGGER.debug("Signed " + request.method + " request to " + request.host + " for service "
                           + service + " with scope " + context.credential_scope)
        return headers

    def _build_headers(self, request, context):
        """ Injects the headers which have to take part in signing, stale signing headers are dropped """
        headers = request.headers
        headers.pop(self.AUTHORIZATION_HEADER, None)
        headers.pop(self.SECURITY_TOKEN_HEADER, None)
        headers[self.DATE_HEADER] = context.amz_date
        headers[self.HOST_HEADER] = request.host
        if self.credentials.token:
            headers[self.SECURITY_TOKEN_HEADER] = self.credentials.token
        return headers
