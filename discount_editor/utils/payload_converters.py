"""表单/JSON 数据类型转换工具.

提供稳定的转换函数,将表单字段值映射为具体的 str/bool/int/float 类型,
便于校验与 payload 构建书写类型安全的逻辑.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from discount_editor.types import PayloadValue

_STRING_LIKE_TYPES = (str, bytes, bytearray)


def _unwrap_sequence(value: PayloadValue | None) -> PayloadValue | None:
    if isinstance(value, Sequence) and not isinstance(value, _STRING_LIKE_TYPES):
        if not value:
            return None
        return value[-1]
    return value


def as_str(value: PayloadValue | None, *, default: str = "") -> str:
    """转换为字符串.

    Args:
        value: 待转换的原始值.
        default: 当值为空或 None 时的默认字符串.

    Returns:
        转换后的字符串.

    """
    base = _unwrap_sequence(value)
    if base is None:
        return default
    if isinstance(base, str):
        return base
    if isinstance(base, (bytes, bytearray)):
        return base.decode()
    return str(base)


def as_optional_str(value: PayloadValue | None) -> str | None:
    """转换为可选字符串,空白返回 None."""
    cleaned = as_str(value, default="").strip()
    return cleaned or None


def as_int(value: PayloadValue | None, *, default: int | None = None) -> int | None:
    """转换为整数.

    布尔值与带小数部分的浮点数不视为合法整数.

    Args:
        value: 待转换的值.
        default: 无法转换时返回的默认值.

    Returns:
        int 或 None.

    """
    base = _unwrap_sequence(value)
    if base is None or isinstance(base, bool):
        return default

    result = default
    if isinstance(base, int):
        result = base
    elif isinstance(base, float):
        if math.isfinite(base) and base.is_integer():
            result = int(base)
    elif isinstance(base, str):
        stripped = base.strip()
        if stripped:
            try:
                result = int(stripped, 10)
            except ValueError:
                result = default
    return result


def as_float(value: PayloadValue | None, *, default: float | None = None) -> float | None:
    """转换为有限浮点数, NaN/Infinity 返回默认值."""
    base = _unwrap_sequence(value)
    if base is None or isinstance(base, bool):
        return default

    result = default
    if isinstance(base, (int, float)):
        result = float(base)
    elif isinstance(base, str):
        stripped = base.strip()
        if stripped:
            try:
                result = float(stripped)
            except ValueError:
                result = default
    if result is not None and not math.isfinite(result):
        return default
    return result


def as_bool(value: PayloadValue | None, *, default: bool = False) -> bool:
    """转换为布尔值."""
    base = _unwrap_sequence(value)
    if base is None:
        return default

    result = default
    if isinstance(base, bool):
        result = base
    elif isinstance(base, (int, float)):
        result = bool(base)
    elif isinstance(base, str):
        normalized = base.strip().lower()
        if normalized in {"true", "1", "yes", "on"}:
            result = True
        elif normalized in {"false", "0", "no", "off"}:
            result = False
    return result


__all__ = ["as_bool", "as_float", "as_int", "as_optional_str", "as_str"]
