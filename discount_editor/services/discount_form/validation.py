"""折扣表单本地校验.

在构建 payload 之前执行, 校验失败会阻止提交并把错误挂到对应字段上, 不清除脏状态.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from discount_editor.constants import DiscountMethod, ErrorMessages
from discount_editor.errors import ValidationError
from discount_editor.forms.form_store import DiscountFormFields, DiscountFormStore
from discount_editor.services.discount_form.payload_builder import parse_percentage, parse_usage_limit
from discount_editor.utils.payload_converters import as_optional_str
from discount_editor.utils.time_utils import time_utils

if TYPE_CHECKING:
    from discount_editor.types import FieldErrorMapping

PERCENTAGE_MIN = 0.0
PERCENTAGE_MAX = 100.0


def _to_datetime(value: object) -> datetime | None:
    if isinstance(value, (str, date, datetime)):
        return time_utils.to_utc(value)
    return None


def _validate_dates(form_fields: DiscountFormFields, errors: dict[str, list[str]]) -> None:
    raw_start = form_fields.start_date.read()
    raw_end = form_fields.end_date.read()

    start = _to_datetime(raw_start)
    if raw_start in (None, ""):
        errors.setdefault("start_date", []).append(ErrorMessages.START_DATE_REQUIRED)
    elif start is None:
        errors.setdefault("start_date", []).append(ErrorMessages.DATE_INVALID)

    if raw_end in (None, ""):
        return
    end = _to_datetime(raw_end)
    if end is None:
        errors.setdefault("end_date", []).append(ErrorMessages.DATE_INVALID)
    elif start is not None and end < start:
        errors.setdefault("end_date", []).append(ErrorMessages.DATE_RANGE_INVERTED)


def _validate_percentage(form_fields: DiscountFormFields, errors: dict[str, list[str]]) -> None:
    try:
        percentage = parse_percentage(form_fields.configuration.percentage.read())
    except ValidationError as exc:
        errors.setdefault("configuration.percentage", []).append(exc.message)
        return
    if not PERCENTAGE_MIN <= percentage <= PERCENTAGE_MAX:
        errors.setdefault("configuration.percentage", []).append(ErrorMessages.PERCENTAGE_INVALID)


def validate_discount_form(form_fields: DiscountFormFields) -> dict[str, list[str]]:
    """执行本地校验.

    Args:
        form_fields: 表单字段.

    Returns:
        字段路径到错误列表的映射,全部通过时为空字典.

    """
    errors: dict[str, list[str]] = {}
    method = DiscountMethod(form_fields.discount_method.read())

    if method is DiscountMethod.CODE:
        if as_optional_str(form_fields.discount_code.read()) is None:
            errors.setdefault("discount_code", []).append(ErrorMessages.CODE_REQUIRED)
        try:
            parse_usage_limit(form_fields.usage_total_limit.read())
        except ValidationError as exc:
            errors.setdefault("usage_total_limit", []).append(exc.message)
    elif as_optional_str(form_fields.discount_title.read()) is None:
        errors.setdefault("discount_title", []).append(ErrorMessages.TITLE_REQUIRED)

    _validate_percentage(form_fields, errors)
    _validate_dates(form_fields, errors)
    return errors


def apply_field_errors(store: DiscountFormStore, errors: FieldErrorMapping) -> None:
    """把校验错误挂到对应字段上, 未知字段路径被忽略."""
    for path, messages in errors.items():
        try:
            cell = store.field(path)
        except KeyError:
            continue
        for message in messages:
            cell.add_error(message)


__all__ = ["PERCENTAGE_MAX", "PERCENTAGE_MIN", "apply_field_errors", "validate_discount_form"]
