"""折扣表单服务.

主要服务:
- DiscountEditController: 单条折扣的编辑会话
- DiscountSubmissionService: 保存流程
- DiscountDeletionFlow: 删除确认流程
"""

from .controller import DiscountEditController, DiscountSummary
from .deletion_flow import DiscountDeletionFlow
from .payload_builder import build_discount_payload
from .results import SubmissionError, SubmissionResult, extract_remote_errors
from .submission_service import DiscountSubmissionService
from .validation import validate_discount_form

__all__ = [
    "DiscountDeletionFlow",
    "DiscountEditController",
    "DiscountSubmissionService",
    "DiscountSummary",
    "SubmissionError",
    "SubmissionResult",
    "build_discount_payload",
    "extract_remote_errors",
    "validate_discount_form",
]
