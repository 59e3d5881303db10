"""Service layer public exports."""

from .codec import (  # noqa: F401
    CharsetClass,
    resolve_charset,
    supported_encodings,
    encode,
    decode,
    url_encode,
    url_decode,
)

__all__ = [
    'CharsetClass',
    'resolve_charset',
    'supported_encodings',
    'encode',
    'decode',
    'url_encode',
    'url_decode',
]
