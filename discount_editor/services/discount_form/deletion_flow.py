"""折扣删除确认流程.

两态状态机: IDLE --toggle--> CONFIRM_PENDING --toggle--> IDLE;
CONFIRM_PENDING --confirm--> 发起一次删除请求 --完成--> IDLE.
删除只依赖折扣标识与折扣方式, 与表单是否有未保存修改无关.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from discount_editor.constants import DeletionState, DiscountMethod, ErrorMessages, SuccessMessages
from discount_editor.errors import ExternalServiceError
from discount_editor.services.discount_form.results import (
    SubmissionError,
    SubmissionResult,
    extract_remote_errors,
)
from discount_editor.utils.structlog_config import log_debug, log_error, log_info, log_warning

if TYPE_CHECKING:
    from discount_editor.infra.discount_api_client import DiscountServiceClient
    from discount_editor.infra.navigation import NavigationBridge

MODULE = "discount_form"


class DiscountDeletionFlow:
    """删除确认与执行."""

    def __init__(
        self,
        client: DiscountServiceClient,
        navigator: NavigationBridge,
        *,
        discount_id: str,
        method_provider: Callable[[], DiscountMethod],
    ) -> None:
        self._client = client
        self._navigator = navigator
        self._discount_id = discount_id
        self._method_provider = method_provider
        self._state = DeletionState.IDLE
        self._deleting = False
        self.last_result: SubmissionResult | None = None

    @property
    def state(self) -> DeletionState:
        return self._state

    @property
    def confirm_pending(self) -> bool:
        return self._state is DeletionState.CONFIRM_PENDING

    @property
    def deleting(self) -> bool:
        return self._deleting

    def toggle(self) -> DeletionState:
        """打开或关闭删除确认, 删除请求在途时保持不变."""
        if self._deleting:
            return self._state
        if self._state is DeletionState.IDLE:
            self._state = DeletionState.CONFIRM_PENDING
        else:
            self._state = DeletionState.IDLE
        return self._state

    def confirm(self) -> SubmissionResult | None:
        """执行删除.

        只有处于 CONFIRM_PENDING 且没有在途删除时才会发起请求.
        删除成功后跳转到折扣列表; 失败时记录日志并留在当前页面.

        Returns:
            删除结果; 未发起请求时返回 None.

        """
        if self._state is not DeletionState.CONFIRM_PENDING or self._deleting:
            log_debug("忽略删除确认", module=MODULE, discount_id=self._discount_id, state=self._state.value)
            return None

        self._deleting = True
        method = DiscountMethod(self._method_provider())
        try:
            body = self._client.delete(method, self._discount_id)
        except ExternalServiceError as exc:
            log_error(
                "删除折扣失败,远程服务不可用",
                module=MODULE,
                exception=exc,
                discount_id=self._discount_id,
                method=method.value,
            )
            result = SubmissionResult.fail([SubmissionError(message=ErrorMessages.REMOTE_UNAVAILABLE)])
        else:
            remote_errors = extract_remote_errors(body)
            result = SubmissionResult.fail(remote_errors) if remote_errors else SubmissionResult.ok()
        finally:
            self._deleting = False
            self._state = DeletionState.IDLE

        self.last_result = result
        if result.success:
            log_info(SuccessMessages.DISCOUNT_DELETED, module=MODULE, discount_id=self._discount_id, method=method.value)
            self._navigator.go_to_record_list()
        else:
            log_warning(
                "折扣删除未完成",
                module=MODULE,
                discount_id=self._discount_id,
                errors=result.messages,
            )
        return result


__all__ = ["DiscountDeletionFlow"]
