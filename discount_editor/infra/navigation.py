"""主机导航桥.

保存或删除成功后返回折扣列表. 导航桥以依赖注入方式传入提交与删除流程,
不存在全局单例.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Protocol

from discount_editor.constants import ADMIN_SECTION_ACTION, DISCOUNT_RESOURCE_TYPE
from discount_editor.utils.structlog_config import log_info

RedirectDispatch = Callable[[str, Mapping[str, str]], None]


class NavigationBridge(Protocol):
    """导航桥协议."""

    def go_to_record_list(self) -> None:
        """跳转到记录列表,不关心返回值."""
        ...


class AdminSectionNavigator:
    """通过主机的重定向动作跳转到后台折扣列表."""

    def __init__(self, dispatch: RedirectDispatch, *, resource: str = DISCOUNT_RESOURCE_TYPE) -> None:
        self._dispatch = dispatch
        self._resource = resource

    def go_to_record_list(self) -> None:
        log_info("跳转到折扣列表", module="navigation", resource=self._resource)
        self._dispatch(ADMIN_SECTION_ACTION, {"name": self._resource})


__all__ = ["AdminSectionNavigator", "NavigationBridge", "RedirectDispatch"]
