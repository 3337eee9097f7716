from requests.auth import AuthBase
from requests.structures import CaseInsensitiveDict

from .requestdescriptor import RequestDescriptor
from .requestsigner import RequestSigner


class SigV4Auth(AuthBase):
    """
    Attaches AWS Signature Version 4 headers to a requests PreparedRequest:

    session.get(url, auth=SigV4Auth("dynamodb", region="us-east-1"))

    Keyword arguments:
    service -- the AWS service name used in the credential scope
    signer -- the RequestSigner to use (default a new RequestSigner built from region and credentials)
    region -- the region passed to the default signer
    credentials -- the AWSCredentials passed to the default signer
    """
    # rewritten or added by HTTP clients and proxies after signing
    UNSIGNED_HEADERS = ("expect", "transfer-encoding", "user-agent", "x-amzn-trace-id")

    def __init__(self, service, signer=None, region=None, credentials=None):
        self.service = service
        self.signer = signer or RequestSigner(region, credentials)

    def __call__(self, prepared_request):
        body = prepared_request.body
        if body is not None and not isinstance(body, (bytes, str)):
            raise ValueError("Streaming request bodies cannot be signed, read the body into memory first.")
        if isinstance(body, str):
            # http.client would send a str body as latin-1, the signed bytes have to be the sent ones
            body = body.encode("utf-8")
            prepared_request.body = body
            prepared_request.prepare_content_length(body)
        headers = CaseInsensitiveDict()
        unsigned_headers = CaseInsensitiveDict()
        for name, value in prepared_request.headers.items():
            target = unsigned_headers if name.lower() in self.UNSIGNED_HEADERS else headers
            target[name] = _to_str(value)
        request = RequestDescriptor.from_url(prepared_request.method, prepared_request.url, headers, body)
        signed_headers = self.signer.sign_headers(self.service, request)
        signed_headers.update(unsigned_headers)
        prepared_request.headers = signed_headers
        return prepared_request


def _to_str(value):
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return value
