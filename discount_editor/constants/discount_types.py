"""折扣领域常量.

定义折扣方式、最低要求类型以及提交/删除流程的状态值,避免魔法字符串.
"""

from enum import Enum


class DiscountMethod(str, Enum):
    """折扣方式.

    Code 表示需要输入折扣码兑换, Automatic 表示结账时自动应用.
    """

    CODE = "Code"
    AUTOMATIC = "Automatic"

    @property
    def path_segment(self) -> str:
        """远程接口路径中的分支片段."""
        return "code" if self is DiscountMethod.CODE else "automatic"


class RequirementType(str, Enum):
    """最低购买要求类型(仅在表单内使用,不会提交)."""

    NONE = "None"
    SUBTOTAL = "Subtotal"
    QUANTITY = "Quantity"


class DiscountStatus(str, Enum):
    """折扣展示状态."""

    ACTIVE = "Active"
    EXPIRED = "Expired"
    SCHEDULED = "Scheduled"


class DeletionState(str, Enum):
    """删除确认状态机."""

    IDLE = "idle"
    CONFIRM_PENDING = "confirm_pending"


class SubmissionState(str, Enum):
    """提交流程状态."""

    IDLE = "idle"
    SUBMITTING = "submitting"


class SubmissionStatus:
    """提交结果状态值."""

    SUCCESS = "success"
    FAIL = "fail"


# 远程接口中标识折扣更新结果的 mutation 名称,按优先级排列
UPDATE_MUTATION_KEYS: tuple[str, ...] = (
    "discountUpdate",
    "discountCodeAppUpdate",
    "discountAutomaticAppUpdate",
)

# 主机导航的资源类型
ADMIN_SECTION_ACTION = "ADMIN_SECTION"
DISCOUNT_RESOURCE_TYPE = "discount"
