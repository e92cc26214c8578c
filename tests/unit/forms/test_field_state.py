import pytest

from discount_editor.errors import FormLockedError
from discount_editor.forms.field_state import FieldState


@pytest.mark.unit
def test_field_state_is_clean_after_construction() -> None:
    cell = FieldState("discount_code", "SAVE10")

    assert cell.read() == "SAVE10"
    assert cell.baseline == "SAVE10"
    assert cell.dirty is False
    assert cell.error() == []


@pytest.mark.unit
def test_field_state_write_back_baseline_clears_dirty() -> None:
    cell = FieldState("discount_code", "SAVE10")

    cell.write("SAVE20")
    assert cell.dirty is True

    cell.write("SAVE10")
    assert cell.dirty is False


@pytest.mark.unit
def test_field_state_write_clears_errors() -> None:
    cell = FieldState("discount_code", "")
    cell.add_error("折扣码不能为空")
    cell.add_error("折扣码不能为空")

    assert cell.error() == ["折扣码不能为空"]

    cell.write("SAVE10")

    assert cell.error() == []


@pytest.mark.unit
def test_field_state_baseline_is_isolated_from_mutable_value() -> None:
    collections = ["gid://shopify/Collection/1"]
    cell = FieldState("configuration.collections", collections)

    collections.append("gid://shopify/Collection/2")

    assert cell.dirty is True
    cell.reset()
    assert cell.read() == ["gid://shopify/Collection/1"]
    assert cell.dirty is False


@pytest.mark.unit
def test_field_state_rejects_write_while_locked() -> None:
    cell = FieldState("discount_title", "Spring sale")
    cell.lock()

    with pytest.raises(FormLockedError) as exc:
        cell.write("Summer sale")

    assert exc.value.message_key == "FORM_LOCKED"
    assert exc.value.extra == {"field": "discount_title"}
    assert cell.read() == "Spring sale"

    cell.unlock()
    cell.write("Summer sale")
    assert cell.read() == "Summer sale"


@pytest.mark.unit
def test_field_state_make_clean_moves_baseline() -> None:
    cell = FieldState("usage_total_limit", "5")
    cell.write("10")

    cell.make_clean()

    assert cell.baseline == "10"
    assert cell.dirty is False
