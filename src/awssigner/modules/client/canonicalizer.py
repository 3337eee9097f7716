from ..crypto.primitives import sha256_hex
from ..logger.logger import get_logger
from .requestdescriptor import ParseError, split_path
from .uriencoder import encode_path, uri_encode


class Canonicalizer(object):
    """
    The canonicalizer is responsible for turning a request into the canonical request string
    described in the official documentation:
    http://docs.aws.amazon.com/general/latest/gr/sigv4-create-canonical-request.html
    """
    _LOGGER = get_logger(__name__)

    def canonicalize(self, method, path, query, headers, body=b""):
        """
        Returns a tuple of the canonical request and the hex encoded SHA-256 hash of the payload.
        """
        payload_hash = self.hash_payload(body)
        canonical_headers, signed_headers = self.build_canonical_headers(headers)
        canonical_request = method.upper() + '\n' + self.build_canonical_path(path) + '\n' \
            + self.build_canonical_querystring(query) + '\n' + canonical_headers + '\n' \
            + signed_headers + '\n' + payload_hash
        self._LOGGER.debug("Canonical request:\n" + canonical_request)
        return canonical_request, payload_hash

    def build_canonical_path(self, path):
        """
        Accepts either a decoded path string or a sequence of decoded segments,
        each segment is encoded on its own.
        """
        segments = split_path(path)
        if segments[0]:
            msg = "Request path '" + "/".join(segments) + "' must start with '/'."
            self._LOGGER.warning(msg)
            raise ParseError(msg)
        return encode_path(segments)

    def build_canonical_querystring(self, query):
        """
        Encodes every key and value on its own, then sorts by encoded key and encoded value.
        """
        if hasattr(query, "items"):
            query = query.items()
        encoded = sorted((uri_encode(key), uri_encode(value)) for key, value in query)
        return "&".join(key + "=" + value for key, value in encoded)

    def build_canonical_headers(self, headers):
        """
        Returns the canonical headers block (one 'name:value\\n' entry per header sorted by name)
        together with the matching semicolon separated list of signed headers.
        """
        header_map = {}
        for name, value in headers.items():
            header_map.setdefault(name.strip().lower(), []).append(self._normalize_value(value))
        names = sorted(header_map)
        canonical_headers = "".join(name + ":" + ",".join(header_map[name]) + "\n" for name in names)
        return canonical_headers, ";".join(names)

    def get_signed_headers(self, headers):
        return self.build_canonical_headers(headers)[1]

    def hash_payload(self, body):
        return sha256_hex(body or b"")

    def _normalize_value(self, value):
        # trim and collapse sequential whitespace into a single space
        return " ".join(str(value).split())
