"""折扣更新写路径 payload.

按折扣方式拆分为两个独立的记录类型, 互不包含对方特有的字段:
- CodeDiscountUpdate: 携带 code / usageLimit / appliesOncePerCustomer, title 与 code 相同.
- AutomaticDiscountUpdate: 仅携带 title, 不会出现 usageLimit / appliesOncePerCustomer 键.
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, TypeAlias

from discount_editor.constants import DiscountMethod
from discount_editor.schemas.base import PayloadSchema


class CombinesWithPayload(PayloadSchema):
    """折扣叠加设置."""

    order_discounts: bool = False
    product_discounts: bool = False
    shipping_discounts: bool = False


class MetafieldEntry(PayloadSchema):
    """配置 metafield 条目, 更新时必须携带已有 metafield 的 id."""

    id: str | None
    value: str


class DiscountUpdateBase(PayloadSchema):
    """两种折扣方式共享的字段."""

    method: ClassVar[DiscountMethod]

    combines_with: CombinesWithPayload
    starts_at: datetime
    ends_at: datetime | None = None
    metafields: list[MetafieldEntry]


class CodeDiscountUpdate(DiscountUpdateBase):
    """折扣码方式的更新 payload."""

    method: ClassVar[DiscountMethod] = DiscountMethod.CODE

    title: str
    code: str
    usage_limit: int | None
    applies_once_per_customer: bool


class AutomaticDiscountUpdate(DiscountUpdateBase):
    """自动折扣方式的更新 payload."""

    method: ClassVar[DiscountMethod] = DiscountMethod.AUTOMATIC

    title: str


DiscountUpdatePayload: TypeAlias = CodeDiscountUpdate | AutomaticDiscountUpdate

__all__ = [
    "AutomaticDiscountUpdate",
    "CodeDiscountUpdate",
    "CombinesWithPayload",
    "DiscountUpdateBase",
    "DiscountUpdatePayload",
    "MetafieldEntry",
]
