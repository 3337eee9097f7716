from urllib.parse import quote

# quote() always keeps letters, digits and "_.-~" literal
_PATH_SAFE_CHARACTERS = "/"
_QUERY_SAFE_CHARACTERS = ""


def uri_encode(value, encode_slash=True):
    """
    Percent-encodes a value as required by the canonical request:
    unreserved characters (A-Z a-z 0-9 - _ . ~) stay literal, every other character
    is UTF-8 encoded and written as %XX with uppercase hex digits.
    The forward slash is kept literal only when encode_slash is False.
    """
    safe = _QUERY_SAFE_CHARACTERS if encode_slash else _PATH_SAFE_CHARACTERS
    return quote(str(value), safe=safe)


def encode_path(segments):
    """ Encodes every path segment on its own, a '/' inside a segment is encoded as %2F """
    return "/".join(uri_encode(segment) for segment in segments)
