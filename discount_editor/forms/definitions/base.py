"""基础的资源表单定义模型.

这些定义会被水合器、校验与会话控制器共享,确保字段名称、标签与默认值只有唯一来源.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum

from discount_editor.types import JsonValue


class FieldComponent(str, Enum):
    """表单控件类型."""

    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    CHECKBOX = "checkbox"
    CHOICE_LIST = "choice-list"
    DATE = "date"
    RESOURCE_PICKER = "resource-picker"


@dataclass(slots=True)
class FieldOption:
    """下拉或单选项描述."""

    value: object
    label: str


@dataclass(slots=True)
class ResourceFormField:
    """单个字段的元数据.

    ``default_factory`` 用于每次水合都需要重新计算的默认值(例如当前时间).
    """

    name: str
    label: str
    component: FieldComponent = FieldComponent.TEXT
    required: bool = False
    help_text: str | None = None
    default: object | None = None
    default_factory: Callable[[], object] | None = None
    options: list[FieldOption] = field(default_factory=list)
    props: dict[str, JsonValue] = field(default_factory=dict)

    def initial_value(self) -> object:
        """返回一份独立的默认值副本."""
        if self.default_factory is not None:
            return self.default_factory()
        return deepcopy(self.default)


@dataclass(slots=True)
class ResourceFormDefinition:
    """描述某个资源表单的基础配置.

    Attributes:
        name: 资源英文名(如 discount)
        fields: 字段定义列表

    """

    name: str
    fields: list[ResourceFormField] = field(default_factory=list)

    def __iter__(self) -> Iterator[ResourceFormField]:
        return iter(self.fields)

    def get_field(self, name: str) -> ResourceFormField:
        """按字段路径查找定义.

        Raises:
            KeyError: 字段不存在时抛出.

        """
        for item in self.fields:
            if item.name == name:
                return item
        raise KeyError(name)

    def defaults(self) -> dict[str, object]:
        """返回所有字段的默认值(按字段路径)."""
        return {item.name: item.initial_value() for item in self.fields}
