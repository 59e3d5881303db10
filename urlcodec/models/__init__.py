"""Request models for the codec API."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from urlcodec.services.codec import resolve_charset

_ERROR_MODES = ['strict', 'replace']


@dataclass
class TextRequest:
    """encode / decode 单个字符串的请求参数"""
    text: str = ""
    encoding: str = "utf-8"
    errors: str = "replace"

    def validate(self):
        errors = []
        if not isinstance(self.text, str):
            errors.append(f"text 必须是字符串，当前类型: {type(self.text).__name__}")
        errors.extend(_check_encoding(self.encoding))
        if self.errors not in _ERROR_MODES:
            errors.append(f"errors 必须是 {'/'.join(_ERROR_MODES)} 之一，当前值: {self.errors}")
        if errors:
            raise ValueError("参数验证失败: " + "; ".join(errors))

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_encoding: str, default_errors: str = "replace") -> 'TextRequest':
        return cls(
            text=data.get('text', ''),
            encoding=data.get('encoding') or default_encoding,
            errors=data.get('errors') or default_errors,
        )


@dataclass
class ParamsEncodeRequest:
    params: Optional[Dict[str, str]] = field(default_factory=dict)
    encoding: str = "utf-8"

    def validate(self):
        errors = []
        if self.params is not None:
            if not isinstance(self.params, dict):
                errors.append(f"params 必须是对象，当前类型: {type(self.params).__name__}")
            else:
                bad = [k for k, v in self.params.items() if not isinstance(v, str)]
                if bad:
                    errors.append(f"params 的值必须是字符串: {', '.join(bad)}")
        errors.extend(_check_encoding(self.encoding))
        if errors:
            raise ValueError("参数验证失败: " + "; ".join(errors))

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_encoding: str) -> 'ParamsEncodeRequest':
        return cls(
            params=data.get('params'),
            encoding=data.get('encoding') or default_encoding,
        )


@dataclass
class ParamsDecodeRequest:
    query: str = ""
    encoding: str = "utf-8"
    errors: str = "replace"

    def validate(self):
        errors = []
        if not isinstance(self.query, str):
            errors.append(f"query 必须是字符串，当前类型: {type(self.query).__name__}")
        errors.extend(_check_encoding(self.encoding))
        if self.errors not in _ERROR_MODES:
            errors.append(f"errors 必须是 {'/'.join(_ERROR_MODES)} 之一，当前值: {self.errors}")
        if errors:
            raise ValueError("参数验证失败: " + "; ".join(errors))

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_encoding: str, default_errors: str = "replace") -> 'ParamsDecodeRequest':
        return cls(
            query=data.get('query', ''),
            encoding=data.get('encoding') or default_encoding,
            errors=data.get('errors') or default_errors,
        )


def _check_encoding(encoding) -> list:
    if not isinstance(encoding, str):
        return [f"encoding 必须是字符串，当前类型: {type(encoding).__name__}"]
    # 不支持的编码直接抛 UnrecognizedEncoding，API 返回对应错误码
    resolve_charset(encoding)
    return []


__all__ = ['TextRequest', 'ParamsEncodeRequest', 'ParamsDecodeRequest']
