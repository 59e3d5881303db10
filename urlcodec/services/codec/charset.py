"""字符集识别

把调用方传入的编码名称归类为 UTF8 或 CHINESE 两类。
GB2312 / GBK / GB18030 统一按 GB18030 转码（GB18030 向下兼容前两者）。
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List

from .errors import UnrecognizedEncoding

logger = logging.getLogger(__name__)


class CharsetClass(Enum):
    UTF8 = 'utf-8'
    CHINESE = 'gb18030'

    @property
    def codec(self) -> str:
        """转码时使用的 Python codec 名称"""
        return self.value


# 归一化（去空白、casefold）后的编码名称 -> 字符集类别
_LABELS: Dict[str, CharsetClass] = {
    'utf-8': CharsetClass.UTF8,
    'utf8': CharsetClass.UTF8,
    'gb2312': CharsetClass.CHINESE,
    'gbk': CharsetClass.CHINESE,
    'gb18030': CharsetClass.CHINESE,
}


def resolve_charset(encoding) -> CharsetClass:
    """解析编码名称

    Args:
        encoding: 编码名称，例如 'utf-8'、'UTF8'、'GBK'、'gb18030'，大小写不敏感

    Returns:
        对应的 CharsetClass

    Raises:
        UnrecognizedEncoding: 名称不属于支持的编码
    """
    if isinstance(encoding, CharsetClass):
        return encoding
    if not isinstance(encoding, str):
        raise UnrecognizedEncoding(encoding)
    charset = _LABELS.get(encoding.strip().casefold())
    if charset is None:
        logger.debug(f"不支持的编码: {encoding!r}")
        raise UnrecognizedEncoding(encoding)
    return charset


def supported_encodings() -> List[str]:
    """返回支持的编码名称（小写规范形式）"""
    return list(_LABELS)


__all__ = ['CharsetClass', 'resolve_charset', 'supported_encodings']
