"""折扣表单水合器.

根据已加载的折扣记录(或缺省值)生成表单字段. 水合是纯函数:
同一条记录在没有用户修改的情况下重复水合得到完全相同的字段值,且全部字段处于干净状态.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from discount_editor.forms.definitions import DISCOUNT_FORM_DEFINITION, ResourceFormDefinition
from discount_editor.forms.form_store import DiscountFormFields
from discount_editor.schemas import DiscountRecord
from discount_editor.utils.structlog_config import log_debug
from discount_editor.utils.time_utils import time_utils


def _number_text(value: float | int | str | None) -> str | None:
    """数字字段在表单中以文本形式编辑, 整数值不带小数部分."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class DiscountFormHydrator:
    """从折扣记录派生表单初始值."""

    def __init__(
        self,
        definition: ResourceFormDefinition = DISCOUNT_FORM_DEFINITION,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._definition = definition
        # 缺省开始时间在每个水合器上只取一次, 保证重复水合结果一致
        self._today = (clock or time_utils.now)()

    @property
    def definition(self) -> ResourceFormDefinition:
        return self._definition

    def initial_values(
        self,
        record: DiscountRecord | None,
        *,
        is_loading: bool = False,
        today: datetime | None = None,
    ) -> dict[str, Any]:
        """计算各字段的初始值(按字段路径).

        Args:
            record: 已加载的折扣记录,新建时为 None.
            is_loading: 记录是否仍在加载,加载中一律使用缺省值.
            today: 缺省开始时间,未提供时取水合器创建时记录的时间.

        Returns:
            字段路径到初始值的映射.

        """
        values = self._definition.defaults()
        values["start_date"] = today if today is not None else self._today

        if record is None or is_loading:
            return values

        if record.title:
            values["discount_title"] = record.title
        if record.method is not None:
            values["discount_method"] = record.method
        if record.code:
            values["discount_code"] = record.code
        if record.combines_with is not None:
            values["combines_with"] = record.combines_with.model_dump()
        if record.usage_limit is not None:
            values["usage_total_limit"] = _number_text(record.usage_limit)
        if record.applies_once_per_customer is not None:
            values["usage_once_per_customer"] = record.applies_once_per_customer
        if record.starts_at is not None:
            values["start_date"] = record.starts_at
        if record.ends_at is not None:
            values["end_date"] = record.ends_at

        configuration = record.configuration
        if configuration is not None:
            if configuration.customer_tag:
                values["configuration.customer_tag"] = configuration.customer_tag
            percentage = _number_text(configuration.percentage)
            if percentage:
                values["configuration.percentage"] = percentage
            if configuration.collections:
                values["configuration.collections"] = list(configuration.collections)
        return values

    def hydrate(
        self,
        record: DiscountRecord | None,
        *,
        is_loading: bool = False,
        today: datetime | None = None,
    ) -> DiscountFormFields:
        """生成全部处于干净状态的表单字段."""
        values = self.initial_values(record, is_loading=is_loading, today=today)
        log_debug(
            "水合折扣表单",
            module="discount_form",
            discount_id=record.id if record is not None else None,
            from_defaults=record is None or is_loading,
        )
        return DiscountFormFields.from_values(values)


__all__ = ["DiscountFormHydrator"]
