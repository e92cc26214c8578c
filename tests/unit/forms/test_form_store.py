from datetime import UTC, datetime

import pytest

from discount_editor.constants import DiscountMethod
from discount_editor.errors import FormLockedError
from discount_editor.forms.form_store import DiscountFormStore
from discount_editor.forms.hydrator import DiscountFormHydrator

FIXED_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


def _build_store() -> DiscountFormStore:
    hydrator = DiscountFormHydrator(clock=lambda: FIXED_NOW)
    return DiscountFormStore(hydrator.hydrate(None))


@pytest.mark.unit
def test_store_indexes_every_field_including_configuration() -> None:
    store = _build_store()

    paths = [path for path, _cell in store]

    assert "discount_title" in paths
    assert "configuration.percentage" in paths
    assert "configuration.collections" in paths
    assert len(paths) == len(set(paths)) == 14


@pytest.mark.unit
def test_store_field_raises_key_error_for_unknown_path() -> None:
    store = _build_store()

    with pytest.raises(KeyError):
        store.field("configuration.unknown")


@pytest.mark.unit
@pytest.mark.parametrize(
    ("path", "new_value"),
    [
        ("discount_title", "Spring sale"),
        ("discount_method", DiscountMethod.AUTOMATIC),
        ("combines_with", {"order_discounts": True, "product_discounts": False, "shipping_discounts": False}),
        ("usage_total_limit", "3"),
        ("end_date", datetime(2025, 2, 1, tzinfo=UTC)),
        ("configuration.collections", ["gid://shopify/Collection/1"]),
    ],
)
def test_store_dirty_tracks_baseline_equality(path, new_value) -> None:
    store = _build_store()
    baseline = store.read(path)

    store.write(path, new_value)
    assert store.is_dirty() is True
    assert store.dirty_fields() == [path]

    store.write(path, baseline)
    assert store.is_dirty() is False


@pytest.mark.unit
def test_store_reset_reverts_all_fields() -> None:
    store = _build_store()
    store.write("discount_code", "SAVE10")
    store.write("configuration.percentage", "20")
    store.field("discount_code").add_error("invalid")

    store.reset()

    assert store.is_dirty() is False
    assert store.read("discount_code") == ""
    assert store.read("configuration.percentage") == "0"
    assert store.has_errors() is False


@pytest.mark.unit
def test_store_lock_blocks_every_field() -> None:
    store = _build_store()
    store.lock()

    assert store.locked is True
    with pytest.raises(FormLockedError):
        store.write("configuration.customer_tag", "vip")

    store.unlock()
    store.write("configuration.customer_tag", "vip")
    assert store.read("configuration.customer_tag") == "vip"


@pytest.mark.unit
def test_store_errors_only_lists_fields_with_messages() -> None:
    store = _build_store()
    store.field("end_date").set_errors(["结束时间不能早于开始时间"])

    assert store.errors() == {"end_date": ["结束时间不能早于开始时间"]}

    store.clear_errors()

    assert store.errors() == {}


@pytest.mark.unit
def test_store_method_reflects_current_value() -> None:
    store = _build_store()
    assert store.method is DiscountMethod.CODE

    store.write("discount_method", "Automatic")

    assert store.method is DiscountMethod.AUTOMATIC
