"""折扣记录与更新 payload 的 schema 定义."""

from .discount_payloads import (
    AutomaticDiscountUpdate,
    CodeDiscountUpdate,
    CombinesWithPayload,
    DiscountUpdateBase,
    DiscountUpdatePayload,
    MetafieldEntry,
)
from .discount_record import CombinesWith, DiscountConfiguration, DiscountRecord, RecordLoadState

__all__ = [
    "AutomaticDiscountUpdate",
    "CodeDiscountUpdate",
    "CombinesWith",
    "CombinesWithPayload",
    "DiscountConfiguration",
    "DiscountRecord",
    "DiscountUpdateBase",
    "DiscountUpdatePayload",
    "MetafieldEntry",
    "RecordLoadState",
]
