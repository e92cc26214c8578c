"""折扣表单状态聚合.

DiscountFormFields 汇总所有字段单元, DiscountFormStore 在其上提供聚合的
脏检查、重置、提交锁与错误映射. 一个编辑会话只拥有一个 store.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

from discount_editor.constants import DiscountMethod, RequirementType
from discount_editor.forms.field_state import FieldState


@dataclass(slots=True)
class ConfigurationFields:
    """折扣函数配置字段组."""

    customer_tag: FieldState[str]
    percentage: FieldState[str]
    collections: FieldState[list[Any]]


@dataclass(slots=True)
class DiscountFormFields:
    """折扣表单全部字段."""

    discount_title: FieldState[str]
    discount_method: FieldState[DiscountMethod]
    discount_code: FieldState[str]
    combines_with: FieldState[dict[str, bool]]
    requirement_type: FieldState[RequirementType]
    requirement_subtotal: FieldState[str]
    requirement_quantity: FieldState[str]
    usage_total_limit: FieldState[str | None]
    usage_once_per_customer: FieldState[bool]
    start_date: FieldState[datetime | None]
    end_date: FieldState[datetime | None]
    configuration: ConfigurationFields

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> DiscountFormFields:
        """按字段路径构造全部字段单元(基线即传入值)."""
        configuration = ConfigurationFields(
            customer_tag=FieldState("configuration.customer_tag", values["configuration.customer_tag"]),
            percentage=FieldState("configuration.percentage", values["configuration.percentage"]),
            collections=FieldState("configuration.collections", values["configuration.collections"]),
        )
        top_level = {
            item.name: FieldState(item.name, values[item.name])
            for item in fields(cls)
            if item.name != "configuration"
        }
        return cls(configuration=configuration, **top_level)

    def __iter__(self) -> Iterator[tuple[str, FieldState[Any]]]:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, ConfigurationFields):
                for nested in fields(value):
                    cell = getattr(value, nested.name)
                    yield cell.name, cell
            else:
                yield value.name, value


class DiscountFormStore:
    """折扣表单字段存储."""

    def __init__(self, form_fields: DiscountFormFields) -> None:
        self._fields = form_fields
        self._index: dict[str, FieldState[Any]] = dict(form_fields)
        self._locked = False

    @property
    def fields(self) -> DiscountFormFields:
        return self._fields

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def method(self) -> DiscountMethod:
        """当前选择的折扣方式."""
        return DiscountMethod(self._fields.discount_method.read())

    def field(self, path: str) -> FieldState[Any]:
        """按字段路径获取字段单元.

        Raises:
            KeyError: 字段不存在时抛出.

        """
        return self._index[path]

    def __iter__(self) -> Iterator[tuple[str, FieldState[Any]]]:
        return iter(self._index.items())

    def read(self, path: str) -> Any:
        return self.field(path).read()

    def write(self, path: str, value: Any) -> None:
        self.field(path).write(value)

    def is_dirty(self) -> bool:
        """任一字段偏离基线即为脏."""
        return any(cell.dirty for cell in self._index.values())

    def dirty_fields(self) -> list[str]:
        return [path for path, cell in self._index.items() if cell.dirty]

    def values(self) -> dict[str, Any]:
        """返回当前值快照(按字段路径)."""
        return {path: cell.read() for path, cell in self._index.items()}

    def baselines(self) -> dict[str, Any]:
        return {path: cell.baseline for path, cell in self._index.items()}

    def errors(self) -> dict[str, list[str]]:
        """返回存在错误的字段及其错误列表."""
        return {path: cell.error() for path, cell in self._index.items() if cell.error()}

    def has_errors(self) -> bool:
        return any(cell.error() for cell in self._index.values())

    def clear_errors(self) -> None:
        for cell in self._index.values():
            cell.clear_errors()

    def reset(self) -> None:
        """丢弃所有未保存的修改."""
        for cell in self._index.values():
            cell.reset()

    def make_clean(self) -> None:
        """以当前值作为新的基线(成功提交后调用)."""
        for cell in self._index.values():
            cell.make_clean()

    def lock(self) -> None:
        self._locked = True
        for cell in self._index.values():
            cell.lock()

    def unlock(self) -> None:
        self._locked = False
        for cell in self._index.values():
            cell.unlock()


__all__ = ["ConfigurationFields", "DiscountFormFields", "DiscountFormStore"]
