"""
AWS Signature Version 4 request signing.

    from awssigner import AWSCredentials, RequestDescriptor, RequestSigner

    signer = RequestSigner("us-east-1", AWSCredentials("access_key", "secret_key"))
    request = RequestDescriptor.from_url("GET", "https://dynamodb.us-east-1.amazonaws.com/")
    headers = signer.sign_headers("dynamodb", request)
"""
from .modules.awscredentials import AWSCredentials
from .modules.client.canonicalizer import Canonicalizer
from .modules.client.keyderivation import KeyDerivationChain
from .modules.client.requestdescriptor import ParseError, RequestDescriptor
from .modules.client.requestsigner import RequestSigner
from .modules.client.signer import Signer
from .modules.client.sigv4auth import SigV4Auth
from .modules.configuration.confighelper import ConfigHelper
from .modules.configuration.configurationerror import ConfigurationError
from .modules.signingcontext import SigningContext

__version__ = "1.0.0"

__all__ = [
    "AWSCredentials",
    "Canonicalizer",
    "ConfigHelper",
    "ConfigurationError",
    "KeyDerivationChain",
    "ParseError",
    "RequestDescriptor",
    "RequestSigner",
    "Signer",
    "SigningContext",
    "SigV4Auth",
]
