from datetime import UTC, datetime

import pytest

from discount_editor.constants import DiscountMethod, ErrorMessages
from discount_editor.forms.form_store import DiscountFormStore
from discount_editor.forms.hydrator import DiscountFormHydrator
from discount_editor.services.discount_form.validation import apply_field_errors, validate_discount_form

FIXED_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


def _store() -> DiscountFormStore:
    store = DiscountFormStore(DiscountFormHydrator(clock=lambda: FIXED_NOW).hydrate(None))
    store.write("discount_code", "SAVE10")
    return store


@pytest.mark.unit
def test_valid_code_form_has_no_errors() -> None:
    assert validate_discount_form(_store().fields) == {}


@pytest.mark.unit
def test_code_method_requires_code() -> None:
    store = _store()
    store.write("discount_code", "   ")

    errors = validate_discount_form(store.fields)

    assert errors == {"discount_code": [ErrorMessages.CODE_REQUIRED]}


@pytest.mark.unit
def test_automatic_method_requires_title_and_ignores_usage_limit() -> None:
    store = _store()
    store.write("discount_method", DiscountMethod.AUTOMATIC)
    store.write("usage_total_limit", "abc")

    errors = validate_discount_form(store.fields)

    assert errors == {"discount_title": [ErrorMessages.TITLE_REQUIRED]}


@pytest.mark.unit
def test_unparseable_usage_limit_is_reported() -> None:
    store = _store()
    store.write("usage_total_limit", "")

    errors = validate_discount_form(store.fields)

    assert errors == {"usage_total_limit": [ErrorMessages.USAGE_LIMIT_INVALID]}


@pytest.mark.unit
@pytest.mark.parametrize("percentage", ["abc", "-1", "100.5"])
def test_percentage_must_be_between_zero_and_hundred(percentage) -> None:
    store = _store()
    store.write("configuration.percentage", percentage)

    errors = validate_discount_form(store.fields)

    assert errors == {"configuration.percentage": [ErrorMessages.PERCENTAGE_INVALID]}


@pytest.mark.unit
def test_inverted_date_range_is_reported_on_end_date() -> None:
    store = _store()
    store.write("end_date", datetime(2024, 12, 31, tzinfo=UTC))

    errors = validate_discount_form(store.fields)

    assert errors == {"end_date": [ErrorMessages.DATE_RANGE_INVERTED]}


@pytest.mark.unit
def test_equal_start_and_end_dates_are_allowed() -> None:
    store = _store()
    store.write("end_date", FIXED_NOW)

    assert validate_discount_form(store.fields) == {}


@pytest.mark.unit
def test_missing_and_invalid_dates_are_reported() -> None:
    store = _store()
    store.write("start_date", None)
    store.write("end_date", "31/12/2025")

    errors = validate_discount_form(store.fields)

    assert errors == {
        "start_date": [ErrorMessages.START_DATE_REQUIRED],
        "end_date": [ErrorMessages.DATE_INVALID],
    }


@pytest.mark.unit
def test_apply_field_errors_ignores_unknown_paths() -> None:
    store = _store()

    apply_field_errors(store, {"end_date": ["bad"], "unknown": ["ignored"]})

    assert store.errors() == {"end_date": ["bad"]}
