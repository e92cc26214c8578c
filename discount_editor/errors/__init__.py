"""折扣编辑器 - 统一异常定义.

说明:
- 本模块只负责定义异常类型与语义字段,不包含传输层细节.
- 异常在提交/删除流程边界被转换为用户可见的错误列表,不会终止进程.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from discount_editor.constants.system_constants import ErrorCategory, ErrorMessages, ErrorSeverity

if TYPE_CHECKING:
    from discount_editor.types.structures import LoggerExtra


@dataclass(frozen=True, slots=True)
class ExceptionMetadata:
    """异常的元信息."""

    category: ErrorCategory
    severity: ErrorSeverity
    default_message_key: str


class AppError(Exception):
    """统一的基础业务异常.

    Args:
        message: 自定义错误文案,若为空则根据 ``message_key`` 推导.
        message_key: 自定义消息键.
        extra: 结构化日志附加字段.
        severity: 错误严重度.
        category: 错误分类.
    """

    metadata = ExceptionMetadata(
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        default_message_key="INTERNAL_ERROR",
    )

    def __init__(
        self,
        message: str | None = None,
        *,
        message_key: str | None = None,
        extra: LoggerExtra | None = None,
        severity: ErrorSeverity | None = None,
        category: ErrorCategory | None = None,
    ) -> None:
        """初始化基础业务异常."""
        self.message_key = message_key or self.metadata.default_message_key
        self.message = message or getattr(ErrorMessages, self.message_key, ErrorMessages.INTERNAL_ERROR)
        self.extra = dict(extra or {})
        self.severity = severity or self.metadata.severity
        self.category = category or self.metadata.category
        super().__init__(self.message)


class ValidationError(AppError):
    """表示表单字段或请求体验证失败."""

    metadata = ExceptionMetadata(
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.LOW,
        default_message_key="VALIDATION_ERROR",
    )


class ConflictError(AppError):
    """表示资源状态冲突."""

    metadata = ExceptionMetadata(
        category=ErrorCategory.BUSINESS,
        severity=ErrorSeverity.MEDIUM,
        default_message_key="CONSTRAINT_VIOLATION",
    )


class FormLockedError(ConflictError):
    """表示在提交进行中尝试修改表单字段."""

    metadata = ExceptionMetadata(
        category=ErrorCategory.BUSINESS,
        severity=ErrorSeverity.LOW,
        default_message_key="FORM_LOCKED",
    )


class ExternalServiceError(AppError):
    """表示远程折扣服务不可用、超时或返回了无法解析的响应."""

    metadata = ExceptionMetadata(
        category=ErrorCategory.EXTERNAL,
        severity=ErrorSeverity.MEDIUM,
        default_message_key="REMOTE_UNAVAILABLE",
    )


__all__ = [
    "AppError",
    "ConflictError",
    "ExceptionMetadata",
    "ExternalServiceError",
    "FormLockedError",
    "ValidationError",
]
