"""请求参数集合的编码 / 解码

url_encode 按 key 升序输出 `k1=v1&k2=v2`，保证结果可复现；
url_decode 按 `&` 分割，每段只在第一个 `=` 处分割，值里的 `=` 保持原样。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Dict, Iterable, Optional, Tuple, Union

from .charset import resolve_charset
from .errors import CodecError, DecodeError
from .escaper import escape, unescape

logger = logging.getLogger(__name__)

Params = Union[Mapping, Iterable[Tuple[str, str]]]


def _as_mapping(params: Params) -> Mapping:
    if isinstance(params, Mapping):
        return params
    # 键值对序列：重复 key 以最后一次出现为准
    return dict(params)


def url_encode(params: Optional[Params], encoding) -> str:
    """把请求参数按指定编码做 UrlEncode

    Args:
        params: 参数字典（或键值对序列），None 视为空
        encoding: 支持 utf-8 / utf8 / gb2312 / gbk / gb18030，大小写不敏感

    Returns:
        `k1=v1&k2=v2` 形式的字符串，key 升序；空参数返回 ''

    Raises:
        UnrecognizedEncoding: 编码不支持
        UnmappableCharacter: 字符无法在目标字符集中表示
        TypeError: key 或 value 不是字符串
    """
    charset = resolve_charset(encoding)
    if not params:
        return ''
    mapping = _as_mapping(params)
    pairs = []
    for key in sorted(mapping):
        value = mapping[key]
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(f"参数 key/value 必须是字符串，当前: {key!r}={value!r}")
        pairs.append(f"{escape(key, charset)}={escape(value, charset)}")
    logger.debug(f"url_encode[{charset.name}]: {len(pairs)} 个参数")
    return '&'.join(pairs)


def url_decode(encoded: str, encoding, errors: str = 'replace') -> Dict[str, str]:
    """解码 UrlEncode 编码的参数字符串

    Args:
        encoded: `k1=v1&k2=v2` 形式的字符串
        encoding: 支持 utf-8 / utf8 / gb2312 / gbk / gb18030，大小写不敏感
        errors: 透传给 unescape，'strict' 或 'replace'

    Returns:
        参数字典；没有 `=` 的段值为 ''，重复 key 以最后一次为准

    Raises:
        UnrecognizedEncoding: 编码不支持
        DecodeError: 某个 key 或 value 解码失败，__cause__ 为具体原因
    """
    if not encoded:
        return {}
    charset = resolve_charset(encoding)

    result: Dict[str, str] = {}
    for index, segment in enumerate(encoded.split('&')):
        raw_key, _, raw_value = segment.partition('=')
        try:
            key = unescape(raw_key, charset, errors=errors)
        except CodecError as e:
            raise DecodeError('key', index, segment, str(e)) from e
        try:
            value = unescape(raw_value, charset, errors=errors)
        except CodecError as e:
            raise DecodeError('value', index, segment, str(e)) from e
        result[key] = value
    logger.debug(f"url_decode[{charset.name}]: {len(result)} 个参数")
    return result


__all__ = ['url_encode', 'url_decode']
