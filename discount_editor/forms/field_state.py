"""单个表单字段的状态单元.

每个可编辑属性对应一个 FieldState: 当前值、水合基线、校验错误列表与提交锁.
字段是否"脏"由当前值与基线的 ``==`` 比较得出, 写回基线值即恢复为干净状态.
"""

from __future__ import annotations

from collections.abc import Iterable
from copy import deepcopy
from typing import Generic, TypeVar

from discount_editor.errors import FormLockedError

T = TypeVar("T")


class FieldState(Generic[T]):
    """可读写的字段单元.

    Attributes:
        name: 字段路径,例如 ``discount_title`` 或 ``configuration.percentage``.

    """

    __slots__ = ("_baseline", "_errors", "_locked", "_value", "name")

    def __init__(self, name: str, value: T) -> None:
        self.name = name
        self._value = value
        self._baseline = deepcopy(value)
        self._errors: list[str] = []
        self._locked = False

    def __repr__(self) -> str:
        return f"FieldState(name={self.name!r}, value={self._value!r}, dirty={self.dirty})"

    def read(self) -> T:
        """返回当前值."""
        return self._value

    def write(self, value: T) -> None:
        """写入新值并清除该字段的校验错误.

        Raises:
            FormLockedError: 提交进行中时禁止修改.

        """
        if self._locked:
            raise FormLockedError(extra={"field": self.name})
        self._value = value
        self._errors = []

    def error(self) -> list[str]:
        """返回该字段当前的校验错误列表."""
        return list(self._errors)

    @property
    def baseline(self) -> T:
        """最近一次水合或成功提交时的值."""
        return self._baseline

    @property
    def dirty(self) -> bool:
        """当前值是否偏离基线."""
        return self._value != self._baseline

    @property
    def locked(self) -> bool:
        return self._locked

    def set_errors(self, messages: Iterable[str]) -> None:
        """覆盖该字段的错误列表(本地或远程校验结果)."""
        self._errors = [message for message in messages if message]

    def add_error(self, message: str) -> None:
        if message and message not in self._errors:
            self._errors.append(message)

    def clear_errors(self) -> None:
        self._errors = []

    def reset(self) -> None:
        """丢弃修改,恢复为基线值."""
        self._value = deepcopy(self._baseline)
        self._errors = []

    def make_clean(self) -> None:
        """以当前值作为新的基线."""
        self._baseline = deepcopy(self._value)

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False


__all__ = ["FieldState"]
