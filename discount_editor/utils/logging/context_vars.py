"""结构化日志模块共享的上下文变量."""

from contextvars import ContextVar

discount_id_var: ContextVar[str | None] = ContextVar("discount_id", default=None)
discount_method_var: ContextVar[str | None] = ContextVar("discount_method", default=None)

__all__ = ["discount_id_var", "discount_method_var"]
