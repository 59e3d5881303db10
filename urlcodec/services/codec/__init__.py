"""按指定字符集（UTF-8 / GB18030 系）做 URL 百分号编码与解码。"""

from .charset import CharsetClass, resolve_charset, supported_encodings  # noqa: F401
from .errors import (  # noqa: F401
    CodecError,
    DecodeError,
    InvalidByteSequence,
    InvalidEscapeSequence,
    UnmappableCharacter,
    UnrecognizedEncoding,
)
from .escaper import UNRESERVED, decode, encode, escape, unescape  # noqa: F401
from .params import url_decode, url_encode  # noqa: F401

__all__ = [
    'CharsetClass',
    'resolve_charset',
    'supported_encodings',
    'CodecError',
    'DecodeError',
    'InvalidByteSequence',
    'InvalidEscapeSequence',
    'UnmappableCharacter',
    'UnrecognizedEncoding',
    'UNRESERVED',
    'escape',
    'unescape',
    'encode',
    'decode',
    'url_encode',
    'url_decode',
]
