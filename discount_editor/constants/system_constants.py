"""折扣编辑器 - 系统常量定义模块

统一管理错误分类、严重度与提示文案.
"""

from enum import Enum


class LogLevel(Enum):
    """日志级别枚举."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    BUSINESS = "business"
    EXTERNAL = "external"
    SYSTEM = "system"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# 错误消息常量
class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "服务器内部错误"
    VALIDATION_ERROR = "数据验证失败"
    CONSTRAINT_VIOLATION = "数据约束错误"

    # 表单错误
    FORM_LOCKED = "表单正在提交,暂不允许修改"
    FORM_NOT_READY = "折扣数据尚未加载完成"

    # 远程服务错误
    REMOTE_UNAVAILABLE = "远程服务无响应或返回了无法解析的结果,请稍后重试"
    REMOTE_REJECTED = "远程服务拒绝了本次请求"

    # 字段校验
    START_DATE_REQUIRED = "开始时间不能为空"
    DATE_INVALID = "时间格式无效"
    DATE_RANGE_INVERTED = "结束时间不能早于开始时间"
    USAGE_LIMIT_INVALID = "使用次数上限必须为正整数"
    PERCENTAGE_INVALID = "折扣百分比必须为 0-100 之间的数字"
    CODE_REQUIRED = "折扣码不能为空"
    TITLE_REQUIRED = "折扣标题不能为空"


# 成功消息常量
class SuccessMessages:
    """成功消息常量."""

    DISCOUNT_SAVED = "折扣保存成功"
    DISCOUNT_DELETED = "折扣删除成功"


__all__ = [
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "LogLevel",
    "SuccessMessages",
]
