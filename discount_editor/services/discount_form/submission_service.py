"""折扣提交协调器.

职责:
- 以 IDLE/SUBMITTING 状态保证同一时刻最多一个提交在途, 重复调用直接忽略而不排队
- 表单未修改时不发起请求(与保存按钮禁用一致)
- 锁定表单 -> 本地校验 -> 构建 payload -> 发起一次更新请求 -> 解析结果
- 成功: 解锁、清除脏状态、跳转列表; 失败: 解锁、保留脏状态、原样暴露错误
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from discount_editor.constants import DiscountMethod, ErrorMessages, SubmissionState, SuccessMessages
from discount_editor.errors import ExternalServiceError, ValidationError
from discount_editor.services.discount_form.payload_builder import build_discount_payload
from discount_editor.services.discount_form.results import (
    SubmissionError,
    SubmissionResult,
    extract_remote_errors,
)
from discount_editor.services.discount_form.validation import apply_field_errors, validate_discount_form
from discount_editor.utils.structlog_config import log_debug, log_error, log_info, log_with_context

if TYPE_CHECKING:
    from discount_editor.forms.form_store import DiscountFormStore
    from discount_editor.infra.discount_api_client import DiscountServiceClient
    from discount_editor.infra.navigation import NavigationBridge

MODULE = "discount_form"

# 远程 userErrors 的字段名到表单字段路径的映射
REMOTE_FIELD_PATHS: dict[str, str] = {
    "code": "discount_code",
    "usageLimit": "usage_total_limit",
    "appliesOncePerCustomer": "usage_once_per_customer",
    "combinesWith": "combines_with",
    "startsAt": "start_date",
    "endsAt": "end_date",
}


class DiscountSubmissionService:
    """折扣保存流程."""

    def __init__(
        self,
        store: DiscountFormStore,
        client: DiscountServiceClient,
        navigator: NavigationBridge,
        *,
        discount_id: str,
        configuration_id: str | None,
    ) -> None:
        self._store = store
        self._client = client
        self._navigator = navigator
        self._discount_id = discount_id
        self._configuration_id = configuration_id
        self._state = SubmissionState.IDLE
        self.submit_errors: list[SubmissionError] = []
        self.last_result: SubmissionResult | None = None

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def submitting(self) -> bool:
        return self._state is SubmissionState.SUBMITTING

    def submit(self) -> SubmissionResult | None:
        """提交当前表单.

        Returns:
            本次提交的结果; 提交进行中或表单未修改时返回 None 且不发起请求.

        """
        if self.submitting:
            log_debug("提交进行中,忽略重复提交", module=MODULE, discount_id=self._discount_id)
            return None
        if not self._store.is_dirty():
            log_debug("表单未修改,忽略提交", module=MODULE, discount_id=self._discount_id)
            return None

        self._state = SubmissionState.SUBMITTING
        self._store.lock()
        try:
            result = self._perform()
        finally:
            self._store.unlock()
            self._state = SubmissionState.IDLE

        self.last_result = result
        if result.success:
            self.submit_errors = []
            self._store.make_clean()
            self._navigator.go_to_record_list()
        else:
            self.submit_errors = list(result.errors)
        return result

    def _perform(self) -> SubmissionResult:
        self._store.clear_errors()
        self.submit_errors = []

        field_errors = validate_discount_form(self._store.fields)
        if field_errors:
            apply_field_errors(self._store, field_errors)
            log_with_context(
                "info",
                "折扣表单本地校验未通过",
                module=MODULE,
                action="submit_discount",
                context={"discount_id": self._discount_id},
                extra={"fields": sorted(field_errors)},
            )
            return SubmissionResult.fail(
                [
                    SubmissionError(message=message, field=(path,))
                    for path, messages in field_errors.items()
                    for message in messages
                ]
            )

        try:
            payload = build_discount_payload(self._store.fields, configuration_id=self._configuration_id)
        except ValidationError as exc:
            return SubmissionResult.fail([SubmissionError(message=exc.message)])

        try:
            body = self._client.update(payload.method, self._discount_id, payload.to_wire())
        except ExternalServiceError as exc:
            log_error(
                "提交折扣失败,远程服务不可用",
                module=MODULE,
                exception=exc,
                discount_id=self._discount_id,
                method=payload.method.value,
            )
            return SubmissionResult.fail([SubmissionError(message=ErrorMessages.REMOTE_UNAVAILABLE)])

        remote_errors = extract_remote_errors(body)
        if remote_errors:
            self._attach_remote_errors(remote_errors, payload.method)
            log_with_context(
                "warning",
                "远程服务拒绝了折扣更新",
                module=MODULE,
                action="submit_discount",
                context={"discount_id": self._discount_id, "method": payload.method.value},
                extra={"errors": [error.message for error in remote_errors]},
            )
            return SubmissionResult.fail(remote_errors)

        log_info(
            SuccessMessages.DISCOUNT_SAVED,
            module=MODULE,
            discount_id=self._discount_id,
            method=payload.method.value,
        )
        return SubmissionResult.ok(data=body.get("data"))

    def _attach_remote_errors(self, errors: list[SubmissionError], method: DiscountMethod) -> None:
        """把带字段路径的远程错误同步挂到对应字段上."""
        for error in errors:
            if not error.field:
                continue
            path = self._resolve_field_path(error.field[-1], method)
            if path is not None:
                self._store.field(path).add_error(error.message)

    @staticmethod
    def _resolve_field_path(remote_name: str, method: DiscountMethod) -> str | None:
        if remote_name == "title":
            # 折扣码方式下 title 即 code
            return "discount_code" if method is DiscountMethod.CODE else "discount_title"
        return REMOTE_FIELD_PATHS.get(remote_name)


__all__ = ["REMOTE_FIELD_PATHS", "DiscountSubmissionService"]
