"""折扣编辑器的结构化日志配置与辅助函数."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Literal, cast

import structlog

from discount_editor.settings import APP_NAME, APP_VERSION
from discount_editor.utils.logging.context_vars import discount_id_var, discount_method_var
from discount_editor.utils.logging.handlers import DebugFilter

if TYPE_CHECKING:
    from structlog.typing import BindableLogger, Processor

    from discount_editor.settings import Settings
    from discount_editor.types import ContextDict, JsonValue, LoggerExtra, StructlogEventDict

LogLevelName = Literal["debug", "info", "warning", "error", "critical"]


class StructlogConfig:
    """structlog 配置核心类.

    负责配置和管理 structlog 日志系统,包括处理器链、调试过滤与全局上下文.

    Attributes:
        debug_filter: 调试日志过滤器.
        configured: 是否已配置标志.
        app_name: 写入每条日志的应用名称.

    Example:
        >>> config = StructlogConfig()
        >>> config.configure(settings)
        >>> logger = get_logger('discount_form')

    """

    def __init__(self) -> None:
        self.debug_filter = DebugFilter(enabled=False)
        self.configured = False
        self.app_name = APP_NAME
        self.app_version = APP_VERSION

    def configure(self, settings: Settings | None = None) -> None:
        """初始化 structlog 处理器(幂等).

        可以多次调用,处理器链只会配置一次;传入 settings 时会刷新日志级别与调试开关.

        Args:
            settings: 运行时配置,可选.

        Returns:
            None.

        """
        if not self.configured:
            processors = [
                structlog.stdlib.add_log_level,
                self.debug_filter,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                self._add_session_context,
                self._add_global_context,
                self._get_console_renderer(),
            ]
            structlog.configure(
                processors=cast("list[Processor]", processors),
                context_class=dict,
                logger_factory=structlog.stdlib.LoggerFactory(),
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            )
            self.configured = True

        if settings is not None:
            self._attach_settings(settings)

    def _attach_settings(self, settings: Settings) -> None:
        """根据配置调整日志级别与调试过滤.

        Args:
            settings: 当前运行时配置.

        Returns:
            None.

        """
        logging.basicConfig(level=settings.log_level, format="%(message)s")
        logging.getLogger().setLevel(settings.log_level)
        self.debug_filter.set_enabled(enabled=settings.enable_debug_log)
        self.app_name = settings.app_name
        self.app_version = settings.app_version

    @staticmethod
    def _add_session_context(
        _logger: BindableLogger,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """向事件字典写入当前表单会话上下文.

        Args:
            logger: 当前 logger 实例.
            method_name: 调用的方法名.
            event_dict: structlog 事件字典.

        Returns:
            包含 discount_id/discount_method 的事件字典.

        """
        discount_id = discount_id_var.get()
        if discount_id is not None:
            event_dict.setdefault("discount_id", discount_id)
        discount_method = discount_method_var.get()
        if discount_method is not None:
            event_dict.setdefault("discount_method", discount_method)
        return event_dict

    def _add_global_context(
        self,
        _logger: BindableLogger,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """附加应用名称、版本等全局上下文."""
        event_dict["app_name"] = self.app_name
        event_dict["app_version"] = self.app_version
        event_dict["logger_name"] = getattr(_logger, "name", "unknown")
        return event_dict

    @staticmethod
    def _get_console_renderer() -> Processor:
        """根据终端能力返回渲染器.

        Returns:
            structlog renderer,用于控制台输出.

        """
        if sys.stdout.isatty():
            return structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=True, max_frames=10),
            )
        return structlog.dev.ConsoleRenderer(colors=False)


structlog_config = StructlogConfig()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """获取结构化日志记录器.

    Args:
        name: 日志记录器名称,通常使用模块名.

    Returns:
        绑定的 structlog 日志记录器实例.

    """
    structlog_config.configure()
    return structlog.get_logger(name)


def configure_structlog(settings: Settings) -> None:
    """按运行时配置初始化 structlog."""
    structlog_config.configure(settings)


def should_log_debug() -> bool:
    """检查是否应该记录调试日志."""
    return structlog_config.debug_filter.enabled


def log_info(message: str, module: str = "app", **kwargs: JsonValue) -> None:
    """记录信息级别日志.

    Example:
        >>> log_info('折扣保存成功', module='discount_form', discount_id='1')

    """
    logger = get_logger("app")
    logger.info(message, module=module, **kwargs)


def log_warning(
    message: str,
    module: str = "app",
    exception: Exception | None = None,
    **kwargs: JsonValue,
) -> None:
    """记录警告级别日志."""
    logger = get_logger("app")
    if exception:
        logger.warning(message, module=module, exception=str(exception), **kwargs)
    else:
        logger.warning(message, module=module, **kwargs)


def log_error(
    message: str,
    module: str = "app",
    exception: Exception | None = None,
    **kwargs: JsonValue,
) -> None:
    """记录错误级别日志.

    Args:
        message: 日志消息.
        module: 模块名称,默认为 'app'.
        exception: 可选的异常对象,会记录堆栈信息.
        **kwargs: 额外的上下文信息.

    Returns:
        None.

    """
    logger = get_logger("app")
    if exception:
        logger.error(message, module=module, error=str(exception), exc_info=exception, **kwargs)
    else:
        logger.error(message, module=module, **kwargs)


def log_debug(message: str, module: str = "app", **kwargs: JsonValue) -> None:
    """记录调试级别日志,仅在启用调试日志时记录."""
    if not should_log_debug():
        return
    logger = get_logger("app")
    logger.debug(message, module=module, **kwargs)


def log_with_context(
    level: LogLevelName,
    event: str,
    *,
    module: str,
    action: str,
    context: ContextDict | None = None,
    extra: LoggerExtra | None = None,
) -> None:
    """记录带有统一上下文字段的结构化日志.

    Args:
        level: 日志级别,使用 structlog 的方法名,例如 "info"、"error".
        event: 日志事件描述.
        module: 所属模块或领域,用于快速过滤.
        action: 当前操作名称,例如 submit_discount.
        context: 业务上下文字段.
        extra: 额外调试字段.

    """
    logger = get_logger("app")
    payload: ContextDict = {"module": module, "action": action}
    if context:
        payload.update(context)
    if extra:
        payload.update(extra)

    log_method = getattr(logger, level, logger.error)
    log_method(event, **payload)


__all__ = [
    "StructlogConfig",
    "configure_structlog",
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
    "log_with_context",
    "should_log_debug",
    "structlog_config",
]
