"""类型别名包."""

from .structures import (
    ContextDict,
    FieldErrorMapping,
    JsonValue,
    LoggerExtra,
    PayloadValue,
    ScalarValue,
    StructlogEventDict,
)

__all__ = [
    "ContextDict",
    "FieldErrorMapping",
    "JsonValue",
    "LoggerExtra",
    "PayloadValue",
    "ScalarValue",
    "StructlogEventDict",
]
