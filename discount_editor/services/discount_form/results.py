"""提交/删除流程的统一结果结构与远程错误解析."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from discount_editor.constants import UPDATE_MUTATION_KEYS, ErrorMessages, SubmissionStatus


@dataclass(frozen=True, slots=True)
class SubmissionError:
    """单条提交错误.

    Attributes:
        message: 面向用户的错误文案,原样展示.
        field: 远程服务或本地校验给出的字段路径,可能为空.

    """

    message: str
    field: tuple[str, ...] | None = None

    @classmethod
    def from_payload(cls, raw: object) -> SubmissionError:
        """从远程错误条目构造,兼容字符串与 ``{message, field}`` 结构."""
        if isinstance(raw, Mapping):
            message = raw.get("message")
            raw_field = raw.get("field")
            path: tuple[str, ...] | None = None
            if isinstance(raw_field, str) and raw_field:
                path = (raw_field,)
            elif isinstance(raw_field, Sequence) and not isinstance(raw_field, str):
                path = tuple(str(part) for part in raw_field) or None
            text = str(message) if message not in (None, "") else ErrorMessages.REMOTE_REJECTED
            return cls(message=text, field=path)
        if isinstance(raw, str) and raw:
            return cls(message=raw)
        return cls(message=ErrorMessages.REMOTE_REJECTED)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": self.message}
        if self.field:
            payload["field"] = list(self.field)
        return payload


@dataclass(slots=True)
class SubmissionResult:
    """一次提交(或删除)尝试的结果,不做持久化.

    Attributes:
        status: success 或 fail.
        errors: 按原始顺序排列的错误列表.
        data: 成功时远程服务返回的 data 字段.

    """

    status: str
    errors: list[SubmissionError] = field(default_factory=list)
    data: Any = None

    @classmethod
    def ok(cls, data: Any = None) -> SubmissionResult:
        """创建成功结果."""
        return cls(status=SubmissionStatus.SUCCESS, data=data)

    @classmethod
    def fail(cls, errors: Sequence[SubmissionError]) -> SubmissionResult:
        """创建失败结果,错误列表保持原始顺序."""
        return cls(status=SubmissionStatus.FAIL, errors=list(errors))

    @property
    def success(self) -> bool:
        return self.status == SubmissionStatus.SUCCESS

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"status": self.status}
        if self.errors:
            payload["errors"] = [error.to_dict() for error in self.errors]
        return payload


def _normalize_errors(raw_errors: object) -> list[SubmissionError]:
    if isinstance(raw_errors, (str, Mapping)):
        return [SubmissionError.from_payload(raw_errors)]
    if isinstance(raw_errors, Sequence):
        return [SubmissionError.from_payload(item) for item in raw_errors]
    return [SubmissionError.from_payload(raw_errors)]


def extract_remote_errors(body: Mapping[str, Any]) -> list[SubmissionError]:
    """解析远程响应中的错误.

    优先使用顶层 ``errors``(例如缺少权限范围),否则读取 mutation 结果里的 ``userErrors``.

    Args:
        body: 远程服务返回的 JSON 对象.

    Returns:
        按原始顺序排列的错误列表,无错误时为空列表.

    """
    top_level = body.get("errors")
    if top_level:
        return _normalize_errors(top_level)

    data = body.get("data")
    if not isinstance(data, Mapping):
        return []

    for key in UPDATE_MUTATION_KEYS:
        entry = data.get(key)
        if isinstance(entry, Mapping) and entry.get("userErrors"):
            return _normalize_errors(entry["userErrors"])

    for entry in data.values():
        if isinstance(entry, Mapping) and entry.get("userErrors"):
            return _normalize_errors(entry["userErrors"])
    return []


__all__ = ["SubmissionError", "SubmissionResult", "extract_remote_errors"]
