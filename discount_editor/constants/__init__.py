"""常量模块。

集中管理系统常量与折扣领域常量。

主要常量：
- ErrorMessages: 错误消息常量
- DiscountMethod: 折扣方式
- DeletionState / SubmissionState: 流程状态
"""

from .discount_types import (
    ADMIN_SECTION_ACTION,
    DISCOUNT_RESOURCE_TYPE,
    UPDATE_MUTATION_KEYS,
    DeletionState,
    DiscountMethod,
    DiscountStatus,
    RequirementType,
    SubmissionState,
    SubmissionStatus,
)
from .system_constants import (
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
    LogLevel,
    SuccessMessages,
)

__all__ = [
    "ADMIN_SECTION_ACTION",
    "DISCOUNT_RESOURCE_TYPE",
    "UPDATE_MUTATION_KEYS",
    "DeletionState",
    "DiscountMethod",
    "DiscountStatus",
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "LogLevel",
    "RequirementType",
    "SubmissionState",
    "SubmissionStatus",
    "SuccessMessages",
]
