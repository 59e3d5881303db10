"""编解码异常定义

所有异常均继承 ValueError，API 层统一按参数错误 (400) 处理。
"""

from __future__ import annotations

from typing import Optional


class CodecError(ValueError):
    """编解码错误基类"""

    code = 'CODEC_ERROR'


class UnrecognizedEncoding(CodecError):
    code = 'UNRECOGNIZED_ENCODING'

    def __init__(self, encoding):
        self.encoding = encoding
        super().__init__(f"Unrecognized encoding: {encoding!r}")


class InvalidEscapeSequence(CodecError):
    """`%` 后面没有紧跟两位十六进制字符（包括输入被截断）"""

    code = 'INVALID_ESCAPE_SEQUENCE'

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        token = text[position:position + 3]
        super().__init__(f"invalid escape sequence {token!r} at position {position}")


class UnmappableCharacter(CodecError):
    """字符在目标字符集中没有对应的字节表示"""

    code = 'UNMAPPABLE_CHARACTER'

    def __init__(self, char: str, position: int, encoding: str):
        self.char = char
        self.position = position
        self.encoding = encoding
        super().__init__(
            f"character U+{ord(char):04X} at position {position} cannot be encoded as {encoding}"
        )


class InvalidByteSequence(CodecError):
    """还原出的字节序列在目标字符集中不合法"""

    code = 'INVALID_BYTE_SEQUENCE'

    def __init__(self, encoding: str, reason: str):
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"decoded bytes are not valid {encoding}: {reason}")


class DecodeError(CodecError):
    """url_decode 中某个字段解码失败

    Attributes:
        field: 'key' 或 'value'
        index: 参数段在 `&` 分割后的序号
        segment: 原始参数段
    """

    code = 'DECODE_ERROR'

    def __init__(self, field: str, index: int, segment: str, reason: Optional[str] = None):
        self.field = field
        self.index = index
        self.segment = segment
        message = f"failed to decode {field} of parameter #{index} ({segment!r})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


__all__ = [
    'CodecError',
    'UnrecognizedEncoding',
    'InvalidEscapeSequence',
    'UnmappableCharacter',
    'InvalidByteSequence',
    'DecodeError',
]
