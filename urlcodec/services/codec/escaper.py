"""百分号编码 / 解码

编码时逐个码点处理：非保留字符（字母、数字、`-`、`_`、`.`）原样输出，
其余字符先按目标字符集转成字节，再把每个字节写成 `%xx`。

解码时先把整个字符串还原成字节缓冲区，最后一次性按目标字符集解码。
GB18030 的多字节序列只有连续转码才正确，所以不能逐个 `%xx` 解码。
"""

from __future__ import annotations

import logging

from .charset import CharsetClass, resolve_charset
from .errors import InvalidByteSequence, InvalidEscapeSequence, UnmappableCharacter

logger = logging.getLogger(__name__)

UNRESERVED = frozenset('0123456789'
                       'abcdefghijklmnopqrstuvwxyz'
                       'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
                       '-_.')
_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')
_DECODE_ERROR_MODES = ('strict', 'replace')


def _char_bytes(char: str, position: int, charset: CharsetClass) -> bytes:
    try:
        return char.encode(charset.codec)
    except UnicodeEncodeError:
        raise UnmappableCharacter(char, position, charset.codec) from None


def escape(text: str, charset: CharsetClass) -> str:
    """按已解析的字符集对字符串做百分号编码

    Args:
        text: 原始字符串
        charset: 目标字符集类别

    Returns:
        编码后的字符串，十六进制为小写

    Raises:
        UnmappableCharacter: 字符无法在目标字符集中表示（如孤立代理码点）
    """
    parts = []
    for position, char in enumerate(text):
        if char in UNRESERVED:
            parts.append(char)
            continue
        for byte in _char_bytes(char, position, charset):
            parts.append(f"%{byte:02x}")
    result = ''.join(parts)
    logger.debug(f"escape[{charset.name}]: {text!r} -> {result!r}")
    return result


def unescape(text: str, charset: CharsetClass, errors: str = 'replace') -> str:
    """还原百分号编码的字符串

    Args:
        text: 编码后的字符串，十六进制大小写均可
        charset: 字节缓冲区最终使用的字符集
        errors: 'replace'（默认）用 U+FFFD 替换非法字节；'strict' 抛异常

    Returns:
        解码后的字符串

    Raises:
        InvalidEscapeSequence: `%` 后不是两位十六进制字符
        InvalidByteSequence: strict 模式下字节序列在目标字符集中不合法
    """
    if errors not in _DECODE_ERROR_MODES:
        raise ValueError(f"errors 必须是 {'/'.join(_DECODE_ERROR_MODES)} 之一，当前值: {errors!r}")

    buffer = bytearray()
    length = len(text)
    i = 0
    while i < length:
        char = text[i]
        if char != '%':
            # 非转义字符按目标字符集写入缓冲区，最终解码后保持不变
            buffer += _char_bytes(char, i, charset)
            i += 1
            continue
        high = text[i + 1] if i + 1 < length else ''
        low = text[i + 2] if i + 2 < length else ''
        if high not in _HEX_DIGITS or low not in _HEX_DIGITS:
            raise InvalidEscapeSequence(text, i)
        buffer.append(int(high + low, 16))
        i += 3

    try:
        result = bytes(buffer).decode(charset.codec, errors=errors)
    except UnicodeDecodeError as e:
        raise InvalidByteSequence(charset.codec, e.reason) from e
    logger.debug(f"unescape[{charset.name}]: {text!r} -> {result!r}")
    return result


def encode(text: str, encoding) -> str:
    """对单个字符串做百分号编码

    >>> encode('a b', 'utf-8')
    'a%20b'
    >>> encode('你好', 'gbk')
    '%c4%e3%ba%c3'
    """
    return escape(text, resolve_charset(encoding))


def decode(text: str, encoding, errors: str = 'replace') -> str:
    """解码单个百分号编码的字符串

    >>> decode('a%2Cb', 'utf-8')
    'a,b'
    """
    return unescape(text, resolve_charset(encoding), errors=errors)


__all__ = ['UNRESERVED', 'escape', 'unescape', 'encode', 'decode']
