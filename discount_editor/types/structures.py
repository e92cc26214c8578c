"""通用结构化数据类型别名.

统一 JSON/Mapping 风格的类型,方便在表单、服务、客户端等模块中共享定义,避免重复声明.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import TypeAlias

ScalarValue: TypeAlias = str | int | float | bool | None
PayloadValue: TypeAlias = ScalarValue | Sequence[ScalarValue] | Mapping[str, ScalarValue]
JsonValue: TypeAlias = ScalarValue | Sequence["JsonValue"] | Mapping[str, "JsonValue"]
ContextDict: TypeAlias = dict[str, JsonValue]
StructlogEventDict: TypeAlias = MutableMapping[str, JsonValue]
LoggerExtra: TypeAlias = Mapping[str, JsonValue]
FieldErrorMapping: TypeAlias = Mapping[str, Sequence[str]]

__all__ = [
    "ContextDict",
    "FieldErrorMapping",
    "JsonValue",
    "LoggerExtra",
    "PayloadValue",
    "ScalarValue",
    "StructlogEventDict",
]
