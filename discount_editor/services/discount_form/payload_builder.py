"""折扣更新 payload 构建.

纯函数: 只读取表单字段, 按折扣方式构造互不相同的 payload 记录类型, 从不修改表单状态.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from discount_editor.constants import DiscountMethod, ErrorMessages
from discount_editor.errors import ValidationError
from discount_editor.forms.form_store import DiscountFormFields
from discount_editor.schemas import (
    AutomaticDiscountUpdate,
    CodeDiscountUpdate,
    CombinesWithPayload,
    DiscountUpdatePayload,
    MetafieldEntry,
)
from discount_editor.utils.payload_converters import as_bool, as_float, as_int
from discount_editor.utils.time_utils import time_utils


def parse_usage_limit(value: object) -> int | None:
    """解析总使用次数上限.

    None 表示不限制; 其余值必须是正整数.

    Raises:
        ValidationError: 空字符串、无法解析或非正数时抛出.

    """
    if value is None:
        return None
    parsed = as_int(value)  # type: ignore[arg-type]
    if parsed is None or parsed <= 0:
        raise ValidationError(ErrorMessages.USAGE_LIMIT_INVALID, extra={"field": "usage_total_limit"})
    return parsed


def parse_percentage(value: object) -> float:
    """解析折扣百分比为浮点数.

    Raises:
        ValidationError: 无法解析时抛出.

    """
    parsed = as_float(value)  # type: ignore[arg-type]
    if parsed is None:
        raise ValidationError(ErrorMessages.PERCENTAGE_INVALID, extra={"field": "configuration.percentage"})
    return parsed


def serialize_configuration(form_fields: DiscountFormFields) -> str:
    """序列化 metafield 中存放的折扣函数配置."""
    configuration = form_fields.configuration
    blob = {
        "customerTag": configuration.customer_tag.read(),
        "percentage": parse_percentage(configuration.percentage.read()),
        "collections": list(configuration.collections.read() or []),
    }
    return json.dumps(blob, ensure_ascii=False, separators=(",", ":"))


def _combines_with(raw: Any) -> CombinesWithPayload:
    mapping = raw if isinstance(raw, dict) else {}
    return CombinesWithPayload(
        order_discounts=as_bool(mapping.get("order_discounts"), default=False),
        product_discounts=as_bool(mapping.get("product_discounts"), default=False),
        shipping_discounts=as_bool(mapping.get("shipping_discounts"), default=False),
    )


def build_discount_payload(
    form_fields: DiscountFormFields,
    *,
    configuration_id: str | None,
) -> DiscountUpdatePayload:
    """根据当前表单字段构建提交 payload.

    Args:
        form_fields: 表单字段.
        configuration_id: 已存在的配置 metafield id, 更新时必须携带.

    Returns:
        CodeDiscountUpdate 或 AutomaticDiscountUpdate.

    Raises:
        ValidationError: 字段值无法转换为远程接口要求的类型时抛出.

    """
    method = DiscountMethod(form_fields.discount_method.read())
    common: dict[str, Any] = {
        "combines_with": _combines_with(form_fields.combines_with.read()),
        "starts_at": time_utils.to_utc(form_fields.start_date.read()),
        "ends_at": time_utils.to_utc(form_fields.end_date.read()),
        "metafields": [
            MetafieldEntry(id=configuration_id, value=serialize_configuration(form_fields)),
        ],
    }

    try:
        if method is DiscountMethod.CODE:
            code = form_fields.discount_code.read()
            return CodeDiscountUpdate(
                **common,
                title=code,
                code=code,
                usage_limit=parse_usage_limit(form_fields.usage_total_limit.read()),
                applies_once_per_customer=as_bool(form_fields.usage_once_per_customer.read(), default=False),
            )
        return AutomaticDiscountUpdate(**common, title=form_fields.discount_title.read())
    except PydanticValidationError as exc:
        raise ValidationError(extra={"errors": str(exc)}) from exc


__all__ = ["build_discount_payload", "parse_percentage", "parse_usage_limit", "serialize_configuration"]
