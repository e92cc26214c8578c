from datetime import UTC, datetime

import pytest

from discount_editor.constants import DeletionState, DiscountMethod, DiscountStatus
from discount_editor.errors import ValidationError
from discount_editor.forms.hydrator import DiscountFormHydrator
from discount_editor.schemas import RecordLoadState
from discount_editor.services.discount_form.controller import DiscountEditController

FIXED_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


def _controller(client, navigator, settings) -> DiscountEditController:
    return DiscountEditController(
        "42",
        client,
        navigator,
        hydrator=DiscountFormHydrator(clock=lambda: FIXED_NOW),
        settings=settings,
    )


@pytest.mark.unit
def test_controller_is_inert_while_loading(dummy_client, dummy_navigator, settings) -> None:
    controller = _controller(dummy_client, dummy_navigator, settings)

    assert controller.sync(RecordLoadState.from_payload({"isLoading": True})) is False
    assert controller.is_interactive is False
    assert controller.save_enabled is False
    assert controller.save() is None
    assert controller.toggle_delete() is None
    assert controller.confirm_delete() is None
    assert controller.deletion_state is None
    with pytest.raises(ValidationError):
        controller.field("discount_code")
    assert dummy_client.update_calls == []


@pytest.mark.unit
def test_controller_hydrates_exactly_once(code_record_payload, dummy_client, dummy_navigator, settings) -> None:
    controller = _controller(dummy_client, dummy_navigator, settings)
    controller.sync(RecordLoadState.from_payload({"isLoading": True}))

    assert controller.sync(RecordLoadState.from_payload({"discount": code_record_payload, "isLoading": False}))
    controller.field("discount_code").write("SAVE15")

    reloaded = dict(code_record_payload, code="OTHER")
    assert controller.sync(RecordLoadState.from_payload({"discount": reloaded, "isLoading": False})) is False
    assert controller.field("discount_code").read() == "SAVE15"
    assert controller.is_interactive is True
    assert controller.page_title == "编辑 SAVE10"
    assert controller.deletion_state is DeletionState.IDLE


@pytest.mark.unit
def test_controller_save_end_to_end(code_record_payload, dummy_client, dummy_navigator, settings) -> None:
    controller = _controller(dummy_client, dummy_navigator, settings)
    controller.sync(RecordLoadState.from_payload({"discount": code_record_payload, "isLoading": False}))
    assert controller.save_enabled is False

    controller.field("usage_total_limit").write("10")
    assert controller.save_enabled is True

    result = controller.save()

    assert result is not None
    assert result.success is True
    method, discount_id, payload = dummy_client.update_calls[0]
    assert method is DiscountMethod.CODE
    assert discount_id == "42"
    assert {key: payload[key] for key in ("code", "usageLimit", "appliesOncePerCustomer", "title")} == {
        "code": "SAVE10",
        "usageLimit": 10,
        "appliesOncePerCustomer": True,
        "title": "SAVE10",
    }
    assert dummy_navigator.calls == 1
    assert controller.store.is_dirty() is False
    assert controller.error_banner() is None


@pytest.mark.unit
def test_controller_failed_save_shows_banner(automatic_record_payload, dummy_client, dummy_navigator, settings) -> None:
    controller = _controller(dummy_client, dummy_navigator, settings)
    controller.sync(RecordLoadState.from_payload({"discount": automatic_record_payload, "isLoading": False}))
    controller.field("discount_title").write("Spring sale 2")
    dummy_client.update_response = {"errors": [{"message": "Title required"}]}

    controller.save()

    assert controller.error_banner() == ["Title required"]
    assert controller.save_enabled is True
    assert dummy_navigator.calls == 0


@pytest.mark.unit
def test_controller_delete_uses_record_identity(code_record_payload, dummy_client, dummy_navigator, settings) -> None:
    controller = _controller(dummy_client, dummy_navigator, settings)
    controller.sync(RecordLoadState.from_payload({"discount": code_record_payload, "isLoading": False}))

    assert controller.toggle_delete() is DeletionState.CONFIRM_PENDING
    assert controller.toggle_delete() is DeletionState.IDLE
    assert dummy_client.delete_calls == []

    controller.toggle_delete()
    result = controller.confirm_delete()

    assert result is not None
    assert result.success is True
    assert dummy_client.delete_calls == [(DiscountMethod.CODE, "gid://shopify/DiscountCodeNode/42")]
    assert dummy_navigator.calls == 1
    assert controller.deletion_state is DeletionState.IDLE


@pytest.mark.unit
def test_controller_discard_and_cancel(code_record_payload, dummy_client, dummy_navigator, settings) -> None:
    controller = _controller(dummy_client, dummy_navigator, settings)
    controller.sync(RecordLoadState.from_payload({"discount": code_record_payload, "isLoading": False}))
    controller.field("discount_code").write("SAVE99")

    controller.discard()

    assert controller.field("discount_code").read() == "SAVE10"
    assert controller.store.is_dirty() is False

    controller.cancel()

    assert dummy_navigator.calls == 1
    assert dummy_client.update_calls == []


@pytest.mark.unit
def test_controller_summary_for_code_discount(code_record_payload, dummy_client, dummy_navigator, settings) -> None:
    controller = _controller(dummy_client, dummy_navigator, settings)
    controller.sync(RecordLoadState.from_payload({"discount": code_record_payload, "isLoading": False}))

    summary = controller.summary(now=FIXED_NOW)

    assert summary.discount_method == "Code"
    assert summary.discount_descriptor == "SAVE10"
    assert summary.status == DiscountStatus.ACTIVE.value
    assert summary.total_usage_limit == "5"
    assert summary.once_per_customer is True
    assert summary.currency_code == "USD"
    assert summary.to_dict()["timezone_abbreviation"] == "EST"


@pytest.mark.unit
def test_controller_summary_status_follows_dates(automatic_record_payload, dummy_client, dummy_navigator, settings) -> None:
    controller = _controller(dummy_client, dummy_navigator, settings)
    controller.sync(RecordLoadState.from_payload({"discount": automatic_record_payload, "isLoading": False}))

    assert controller.discount_descriptor == "Spring sale"
    assert controller.summary(now=FIXED_NOW).status == DiscountStatus.SCHEDULED.value
    assert controller.summary(now=datetime(2025, 4, 1, tzinfo=UTC)).status == DiscountStatus.EXPIRED.value


@pytest.mark.unit
def test_controller_new_record_uses_route_identity(dummy_client, dummy_navigator, settings) -> None:
    controller = _controller(dummy_client, dummy_navigator, settings)
    controller.sync(RecordLoadState(record=None, is_loading=False))

    assert controller.field("start_date").read() == FIXED_NOW
    controller.toggle_delete()
    controller.confirm_delete()

    assert dummy_client.delete_calls == [(DiscountMethod.CODE, "42")]


@pytest.mark.unit
def test_controller_exposes_field_definitions(dummy_client, dummy_navigator, settings) -> None:
    controller = _controller(dummy_client, dummy_navigator, settings)

    definition = controller.field_definition("configuration.percentage")

    assert definition.label == "折扣百分比"
    assert definition.props["max"] == 100
    with pytest.raises(KeyError):
        controller.field_definition("unknown")
