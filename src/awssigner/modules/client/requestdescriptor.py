from collections import namedtuple
from urllib.parse import parse_qsl, unquote, urlsplit

from requests.structures import CaseInsensitiveDict

from ..logger.logger import get_logger

_LOGGER = get_logger(__name__)
_DEFAULT_PORTS = {"http": 80, "https": 443}


class ParseError(ValueError):
    pass


class RequestDescriptor(namedtuple("RequestDescriptor", ["method", "host", "path_segments", "query", "header_items", "body"])):
    """
    The request descriptor is an immutable description of the request to be signed.

    Keyword arguments:
    method -- the HTTP method, upper-cased on construction
    host -- the host name (with port when it is not the default one for the scheme)
    path -- either the decoded URI path with '/' separating segments, e.g. /my bucket/key,
            or a sequence of decoded segments when a segment itself contains '/'
    query -- a sequence of (key, value) pairs, duplicate keys are allowed
    headers -- a mapping of header names to values, names are treated case-insensitively
    body -- the exact bytes to be transmitted (default empty)
    """
    __slots__ = ()

    def __new__(cls, method, host, path="/", query=(), headers=None, body=None):
        header_items = tuple(CaseInsensitiveDict(headers or {}).items())
        return super(RequestDescriptor, cls).__new__(cls, method.upper(), host, split_path(path), tuple(query or ()),
                                                     header_items, _to_bytes(body))

    @classmethod
    def from_url(cls, method, url, headers=None, body=None):
        """ Creates a descriptor from an absolute URL, raising ParseError if the URL cannot be used for signing """
        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError as e:
            raise _parse_error("Cannot parse URL '" + str(url) + "'. Cause: " + str(e))
        if not parts.scheme or not parts.hostname:
            raise _parse_error("URL '" + str(url) + "' must be absolute and contain a host.")
        # segments are decoded one by one so an encoded '/' stays inside its segment
        segments = [unquote(segment) for segment in split_path(parts.path)]
        return cls(method, _build_host(parts.scheme, parts.hostname, port), segments,
                   parse_qsl(parts.query, keep_blank_values=True), headers, body)

    @property
    def path(self):
        return "/".join(self.path_segments)

    @property
    def headers(self):
        """ Returns a copy of the request headers, changes to it do not affect this descriptor """
        return CaseInsensitiveDict(self.header_items)

    def with_headers(self, headers):
        """ Returns a new descriptor with the given headers merged over the current ones """
        merged = self.headers
        merged.update(headers)
        return self.replace_headers(merged)

    def replace_headers(self, headers):
        """ Returns a new descriptor carrying exactly the given headers """
        return self._replace(header_items=tuple(CaseInsensitiveDict(headers).items()))


def split_path(path):
    """ Splits a path into its segments, an empty path is the root path ('', '') """
    if isinstance(path, str):
        return tuple((path or "/").split("/"))
    segments = tuple(path)
    if segments in ((), ("",)):
        return ("", "")
    return segments


def _build_host(scheme, hostname, port):
    if ":" in hostname:
        hostname = "[" + hostname + "]"
    if port is None or _DEFAULT_PORTS.get(scheme) == port:
        return hostname
    return hostname + ":" + str(port)


def _to_bytes(body):
    if body is None:
        return b""
    if isinstance(body, str):
        return body.encode("utf-8")
    return bytes(body)


def _parse_error(msg):
    _LOGGER.warning(msg)
    return ParseError(msg)
