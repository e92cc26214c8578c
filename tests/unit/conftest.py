# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供隔离的配置、替身远程客户端与导航桥.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from discount_editor.settings import Settings, get_settings

FIXED_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


class DummyDiscountClient:
    """记录调用参数的远程折扣服务替身."""

    def __init__(self) -> None:
        self.update_calls: list[tuple[Any, str, dict[str, Any]]] = []
        self.delete_calls: list[tuple[Any, str]] = []
        self.update_response: dict[str, Any] = {"data": {"discountUpdate": {"userErrors": []}}}
        self.delete_response: dict[str, Any] = {}
        self.update_error: Exception | None = None
        self.delete_error: Exception | None = None
        self.on_update = None

    def update(self, method, discount_id, payload):
        self.update_calls.append((method, discount_id, dict(payload)))
        if self.on_update is not None:
            self.on_update()
        if self.update_error is not None:
            raise self.update_error
        return self.update_response

    def delete(self, method, discount_id):
        self.delete_calls.append((method, discount_id))
        if self.delete_error is not None:
            raise self.delete_error
        return self.delete_response


class DummyNavigator:
    def __init__(self) -> None:
        self.calls = 0

    def go_to_record_list(self) -> None:
        self.calls += 1


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    避免开发者本机环境变量或 `.env` 影响测试稳定性.
    """
    monkeypatch.setenv("ENVIRONMENT", "testing")
    monkeypatch.setenv("DISCOUNT_API_BASE_URL", "http://discounts.test")
    monkeypatch.setenv("DISCOUNT_API_ACCESS_TOKEN", "")
    monkeypatch.setenv("ENABLE_DEBUG_LOG", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def dummy_client() -> DummyDiscountClient:
    return DummyDiscountClient()


@pytest.fixture
def dummy_navigator() -> DummyNavigator:
    return DummyNavigator()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def code_record_payload() -> dict[str, Any]:
    return {
        "id": "gid://shopify/DiscountCodeNode/42",
        "title": "SAVE10",
        "method": "Code",
        "code": "SAVE10",
        "combinesWith": {"orderDiscounts": True, "productDiscounts": False, "shippingDiscounts": False},
        "usageLimit": 5,
        "appliesOncePerCustomer": True,
        "startsAt": "2025-01-01T00:00:00Z",
        "endsAt": None,
        "configurationId": "gid://shopify/Metafield/7",
        "configuration": {"customerTag": "vip", "percentage": 15, "collections": ["gid://shopify/Collection/1"]},
    }


@pytest.fixture
def automatic_record_payload() -> dict[str, Any]:
    return {
        "id": "99",
        "title": "Spring sale",
        "method": "Automatic",
        "startsAt": "2025-03-01T00:00:00Z",
        "endsAt": "2025-03-31T00:00:00Z",
        "configurationId": "gid://shopify/Metafield/8",
        "configuration": {"customerTag": "", "percentage": 12.5, "collections": []},
    }
