"""
The narrow digest interface consumed by the signing code. Anything satisfying
sha256(bytes) -> digest, hmac_sha256(key, msg) -> mac and hex_encode(bytes) -> str
can be substituted here without touching the canonicalizer or the signer.
"""
import binascii
import hmac

from hashlib import sha256 as _sha256


def _to_bytes(data):
    if isinstance(data, str):
        return data.encode("utf-8")
    return data


def sha256(data):
    return _sha256(_to_bytes(data)).digest()


def sha256_hex(data):
    return hex_encode(sha256(data))


def hmac_sha256(key, msg):
    return hmac.new(_to_bytes(key), _to_bytes(msg), _sha256).digest()


def hex_encode(data):
    return binascii.hexlify(data).decode("ascii")
