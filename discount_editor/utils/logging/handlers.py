"""结构化日志处理器:按配置过滤调试事件."""

from __future__ import annotations

from typing import Any

import structlog


class DebugFilter:
    """根据配置决定是否丢弃 DEBUG 日志的处理器.

    Attributes:
        enabled: 是否启用 DEBUG 日志.

    """

    def __init__(self, *, enabled: bool = False) -> None:
        """初始化 DEBUG 过滤器.

        Args:
            enabled: 是否启用 DEBUG 日志,默认为 False.

        """
        self.enabled = enabled

    def set_enabled(self, *, enabled: bool) -> None:
        """设置是否启用 DEBUG 日志."""
        self.enabled = enabled

    def __call__(self, logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """处理日志事件,根据配置决定是否丢弃 DEBUG 日志.

        Args:
            logger: structlog 绑定的日志记录器.
            method_name: 日志方法名称.
            event_dict: 日志事件字典.

        Returns:
            处理后的事件字典.

        Raises:
            structlog.DropEvent: 当 DEBUG 日志未启用时抛出,丢弃该日志.

        """
        level = str(event_dict.get("level", method_name or "INFO")).upper()
        if level == "DEBUG" and not self.enabled:
            raise structlog.DropEvent
        return event_dict
