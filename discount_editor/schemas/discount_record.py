"""折扣记录读路径 schema.

描述记录加载方返回的折扣快照, 由表单水合器独占消费, 读取后不可变.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from discount_editor.constants import DiscountMethod
from discount_editor.schemas.base import RecordSchema
from discount_editor.utils.payload_converters import as_bool, as_int
from discount_editor.utils.time_utils import time_utils


class CombinesWith(RecordSchema):
    """折扣叠加设置."""

    order_discounts: bool = False
    product_discounts: bool = False
    shipping_discounts: bool = False


class DiscountConfiguration(RecordSchema):
    """折扣函数的自定义配置(存放于 metafield)."""

    customer_tag: str | None = None
    percentage: float | str | None = None
    collections: list[Any] | None = None


class DiscountRecord(RecordSchema):
    """远程折扣记录快照."""

    id: str
    title: str | None = None
    method: DiscountMethod | None = None
    code: str | None = None
    combines_with: CombinesWith | None = None
    usage_limit: int | None = Field(default=None, gt=0)
    applies_once_per_customer: bool | None = None
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    configuration_id: str | None = None
    configuration: DiscountConfiguration | None = None

    @field_validator("id", "configuration_id", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("method", mode="before")
    @classmethod
    def _parse_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in DiscountMethod:
                if member.value.lower() == normalized:
                    return member
        return value

    @field_validator("usage_limit", mode="before")
    @classmethod
    def _parse_usage_limit(cls, value: Any) -> Any:
        # 远程服务以 0 / 空字符串表示"不限制", 非正数同样按不限制处理
        if value in (None, "", 0):
            return None
        parsed = as_int(value)
        if parsed is not None and parsed <= 0:
            return None
        return value

    @field_validator("applies_once_per_customer", mode="before")
    @classmethod
    def _parse_once_per_customer(cls, value: Any) -> Any:
        if value is None:
            return None
        return as_bool(value, default=False)

    @field_validator("starts_at", "ends_at", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> Any:
        if value in (None, ""):
            return None
        parsed = time_utils.to_utc(value)
        if parsed is None:
            raise ValueError(f"无法解析的时间: {value}")
        return parsed

    @property
    def is_code_discount(self) -> bool:
        """记录是否为折扣码方式(缺省视为折扣码)."""
        return self.method in (None, DiscountMethod.CODE)


@dataclass(frozen=True, slots=True)
class RecordLoadState:
    """记录加载方的当前状态.

    Attributes:
        record: 已加载的折扣记录,新建或仍在加载时为 None.
        is_loading: 是否仍在加载.

    """

    record: DiscountRecord | None = None
    is_loading: bool = True

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> RecordLoadState:
        """从加载方返回的 ``{discount, isLoading}`` 结构构造状态."""
        raw_record = payload.get("discount")
        record = DiscountRecord.model_validate(raw_record) if isinstance(raw_record, Mapping) else None
        is_loading = as_bool(payload.get("isLoading", payload.get("is_loading")), default=False)
        return cls(record=record, is_loading=is_loading)


__all__ = ["CombinesWith", "DiscountConfiguration", "DiscountRecord", "RecordLoadState"]
