"""远程折扣服务客户端.

两个逻辑端点按折扣方式区分路径:
- ``POST   {base}/api/discounts/{code|automatic}/{id}``  body: ``{"discount": payload}``
- ``DELETE {base}/api/discounts/{code|automatic}/{id}``  仅携带请求头

不做重试与退避: 每次调用只发出一个请求, 失败立即以 ExternalServiceError 暴露给调用方.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol
from urllib.parse import quote

import requests

from discount_editor.constants import DiscountMethod
from discount_editor.errors import ExternalServiceError
from discount_editor.settings import Settings, get_settings
from discount_editor.utils.structlog_config import log_debug

if TYPE_CHECKING:
    from collections.abc import Mapping

DISCOUNT_PATH_TEMPLATE = "/api/discounts/{segment}/{resource_id}"
JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class DiscountServiceClient(Protocol):
    """远程折扣服务协议, 提交与删除流程只依赖这两个操作."""

    def update(
        self,
        method: DiscountMethod,
        discount_id: str | int,
        payload: Mapping[str, Any],
    ) -> dict[str, Any]: ...

    def delete(self, method: DiscountMethod, discount_id: str | int) -> dict[str, Any]: ...


def resolve_resource_id(discount_id: str | int) -> str:
    """把折扣标识转换为路径片段.

    ``gid://shopify/DiscountCodeNode/123`` 这类全局 id 只保留末尾的数字部分.
    """
    text = str(discount_id).strip()
    if text.startswith("gid://"):
        text = text.rsplit("/", 1)[-1]
    return quote(text, safe="")


class DiscountApiClient:
    """基于 requests 的折扣服务客户端."""

    def __init__(self, settings: Settings | None = None, *, session: requests.Session | None = None) -> None:
        self._settings = settings or get_settings()
        self._session = session or requests.Session()

    def build_url(self, method: DiscountMethod, discount_id: str | int) -> str:
        path = DISCOUNT_PATH_TEMPLATE.format(
            segment=DiscountMethod(method).path_segment,
            resource_id=resolve_resource_id(discount_id),
        )
        return f"{self._settings.api_base_url}{path}"

    def update(self, method: DiscountMethod, discount_id: str | int, payload: Mapping[str, Any]) -> dict[str, Any]:
        """提交折扣更新.

        Returns:
            远程服务返回的 JSON 对象,可能包含 ``errors`` 或 ``data.<mutation>.userErrors``.

        Raises:
            ExternalServiceError: 网络异常、超时或响应无法解析时抛出.

        """
        return self._request("POST", method, discount_id, body={"discount": dict(payload)})

    def delete(self, method: DiscountMethod, discount_id: str | int) -> dict[str, Any]:
        """删除折扣.

        Returns:
            远程服务返回的 JSON 对象,响应体为空时返回空字典.

        Raises:
            ExternalServiceError: 网络异常、超时或响应无法解析时抛出.

        """
        return self._request("DELETE", method, discount_id)

    def _headers(self) -> dict[str, str]:
        headers = dict(JSON_HEADERS)
        if self._settings.api_access_token:
            headers["Authorization"] = f"Bearer {self._settings.api_access_token}"
        return headers

    def _request(
        self,
        http_method: str,
        method: DiscountMethod,
        discount_id: str | int,
        *,
        body: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = self.build_url(method, discount_id)
        context = {"http_method": http_method, "url": url}
        log_debug("请求远程折扣服务", module="discount_api", **context)
        try:
            response = self._session.request(
                http_method,
                url,
                json=body,
                headers=self._headers(),
                timeout=self._settings.api_timeout_seconds,
            )
        except requests.RequestException as exc:
            raise ExternalServiceError(extra={**context, "exception": str(exc)}) from exc
        return self._decode(response, context)

    @staticmethod
    def _decode(response: requests.Response, context: dict[str, Any]) -> dict[str, Any]:
        status_context = {**context, "status_code": response.status_code}
        if not response.content:
            if response.ok:
                return {}
            raise ExternalServiceError(extra=status_context)

        try:
            body = response.json()
        except ValueError as exc:
            raise ExternalServiceError(extra=status_context) from exc

        if not isinstance(body, dict):
            raise ExternalServiceError(extra=status_context)
        # 非 2xx 且没有给出错误列表时无法向用户解释失败原因
        if not response.ok and not body.get("errors"):
            raise ExternalServiceError(extra=status_context)
        return body


__all__ = ["DISCOUNT_PATH_TEMPLATE", "DiscountApiClient", "DiscountServiceClient", "resolve_resource_id"]
