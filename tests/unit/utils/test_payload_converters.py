import math

import pytest

from discount_editor.utils.payload_converters import as_bool, as_float, as_int, as_optional_str, as_str


@pytest.mark.unit
def test_as_int_is_strict() -> None:
    assert as_int("10") == 10
    assert as_int(["1", "2"]) == 2
    assert as_int(4.0) == 4
    assert as_int(4.5) is None
    assert as_int(True) is None
    assert as_int("", default=0) == 0
    assert as_int("1e3") is None


@pytest.mark.unit
def test_as_float_rejects_non_finite_values() -> None:
    assert as_float("12.5") == 12.5
    assert as_float(3) == 3.0
    assert as_float("nan") is None
    assert as_float(math.inf, default=0.0) == 0.0
    assert as_float(False) is None


@pytest.mark.unit
def test_as_bool_and_strings() -> None:
    assert as_bool("on") is True
    assert as_bool("No") is False
    assert as_bool("maybe", default=True) is True
    assert as_str(None, default="x") == "x"
    assert as_str(b"abc") == "abc"
    assert as_optional_str("  ") is None
