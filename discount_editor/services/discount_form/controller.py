"""折扣编辑会话控制器.

把一条折扣记录的水合、字段存储、保存、删除与离开页面串成一个会话:
- 记录加载期间不提供任何可交互操作, 首次进入非加载状态时水合且只水合一次
- 保存/删除/离开三个终结动作最终都通过注入的导航桥返回折扣列表
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from discount_editor.constants import DiscountMethod, DiscountStatus, RequirementType
from discount_editor.errors import ValidationError
from discount_editor.forms.form_store import DiscountFormStore
from discount_editor.forms.hydrator import DiscountFormHydrator
from discount_editor.services.discount_form.deletion_flow import DiscountDeletionFlow
from discount_editor.services.discount_form.submission_service import DiscountSubmissionService
from discount_editor.settings import Settings, get_settings
from discount_editor.utils.logging.context_vars import discount_id_var, discount_method_var
from discount_editor.utils.structlog_config import configure_structlog, log_info
from discount_editor.utils.time_utils import time_utils

if TYPE_CHECKING:
    from discount_editor.constants import DeletionState
    from discount_editor.forms.definitions import ResourceFormField
    from discount_editor.forms.field_state import FieldState
    from discount_editor.infra.discount_api_client import DiscountServiceClient
    from discount_editor.infra.navigation import NavigationBridge
    from discount_editor.schemas import DiscountRecord, RecordLoadState
    from discount_editor.services.discount_form.results import SubmissionResult

MODULE = "discount_form"
APP_DISCOUNT_TYPE = "自定义折扣"


@dataclass(frozen=True, slots=True)
class DiscountSummary:
    """侧栏摘要卡片所需的数据."""

    discount_method: str
    discount_descriptor: str
    app_discount_type: str
    status: str
    usage_count: int
    requirement_type: str
    requirement_subtotal: str
    requirement_quantity: str
    currency_code: str
    once_per_customer: bool
    total_usage_limit: str | None
    start_date: datetime | None
    end_date: datetime | None
    timezone_abbreviation: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class DiscountEditController:
    """单条折扣的编辑会话."""

    def __init__(
        self,
        discount_id: str,
        client: DiscountServiceClient,
        navigator: NavigationBridge,
        *,
        hydrator: DiscountFormHydrator | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.discount_id = str(discount_id)
        self._client = client
        self._navigator = navigator
        self._hydrator = hydrator or DiscountFormHydrator()
        self._settings = settings or get_settings()
        configure_structlog(self._settings)
        self._record: DiscountRecord | None = None
        self._store: DiscountFormStore | None = None
        self._submission: DiscountSubmissionService | None = None
        self._deletion: DiscountDeletionFlow | None = None
        self._is_loading = True

    # ------------------------------------------------------------------ #
    # 生命周期
    # ------------------------------------------------------------------ #
    def sync(self, load_state: RecordLoadState) -> bool:
        """接收记录加载方的最新状态.

        Args:
            load_state: ``{record, is_loading}``.

        Returns:
            本次调用是否完成了水合.

        """
        self._is_loading = load_state.is_loading
        if self._store is not None or load_state.is_loading:
            return False

        self._record = load_state.record
        self._store = DiscountFormStore(self._hydrator.hydrate(self._record, is_loading=False))
        record_id = self._record.id if self._record is not None else self.discount_id
        configuration_id = self._record.configuration_id if self._record is not None else None
        self._submission = DiscountSubmissionService(
            self._store,
            self._client,
            self._navigator,
            discount_id=self.discount_id,
            configuration_id=configuration_id,
        )
        self._deletion = DiscountDeletionFlow(
            self._client,
            self._navigator,
            discount_id=record_id,
            method_provider=lambda: self.store.method,
        )
        discount_id_var.set(self.discount_id)
        discount_method_var.set(self._store.method.value)
        log_info(
            "折扣编辑表单已就绪",
            module=MODULE,
            discount_id=self.discount_id,
            has_record=self._record is not None,
        )
        return True

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_interactive(self) -> bool:
        """记录加载完成且表单已水合."""
        return self._store is not None

    @property
    def record(self) -> DiscountRecord | None:
        return self._record

    @property
    def store(self) -> DiscountFormStore:
        """当前会话的字段存储.

        Raises:
            ValidationError: 表单尚未水合时抛出.

        """
        if self._store is None:
            raise ValidationError(message_key="FORM_NOT_READY", extra={"discount_id": self.discount_id})
        return self._store

    def field(self, path: str) -> FieldState[Any]:
        return self.store.field(path)

    def field_definition(self, path: str) -> ResourceFormField:
        """字段的展示元数据(标签、控件类型、选项)."""
        return self._hydrator.definition.get_field(path)

    # ------------------------------------------------------------------ #
    # 展示
    # ------------------------------------------------------------------ #
    @property
    def page_title(self) -> str:
        title = self._store.fields.discount_title.read() if self._store is not None else ""
        return f"编辑 {title}".rstrip()

    @property
    def discount_descriptor(self) -> str:
        """自动折扣展示标题, 折扣码方式展示折扣码."""
        if self._store is None:
            return ""
        form_fields = self._store.fields
        if self._store.method is DiscountMethod.AUTOMATIC:
            return form_fields.discount_title.read()
        return form_fields.discount_code.read()

    @property
    def submitting(self) -> bool:
        return self._submission is not None and self._submission.submitting

    @property
    def save_enabled(self) -> bool:
        """保存按钮仅在表单有修改且没有在途提交时可用."""
        return self._store is not None and self._store.is_dirty() and not self.submitting

    @property
    def deletion_state(self) -> DeletionState | None:
        return self._deletion.state if self._deletion is not None else None

    def error_banner(self) -> list[str] | None:
        """最近一次失败提交的错误文案,没有错误时返回 None."""
        if self._submission is None or not self._submission.submit_errors:
            return None
        return [error.message for error in self._submission.submit_errors]

    def summary(self, *, now: datetime | None = None) -> DiscountSummary:
        """生成摘要卡片数据."""
        form_fields = self.store.fields
        start_date = form_fields.start_date.read()
        end_date = form_fields.end_date.read()
        return DiscountSummary(
            discount_method=self.store.method.value,
            discount_descriptor=self.discount_descriptor,
            app_discount_type=APP_DISCOUNT_TYPE,
            status=self._resolve_status(start_date, end_date, now=now).value,
            usage_count=0,
            requirement_type=RequirementType(form_fields.requirement_type.read()).value,
            requirement_subtotal=form_fields.requirement_subtotal.read(),
            requirement_quantity=form_fields.requirement_quantity.read(),
            currency_code=self._settings.currency_code,
            once_per_customer=bool(form_fields.usage_once_per_customer.read()),
            total_usage_limit=form_fields.usage_total_limit.read(),
            start_date=start_date,
            end_date=end_date,
            timezone_abbreviation=self._settings.timezone_abbreviation,
        )

    @staticmethod
    def _resolve_status(
        start_date: datetime | None,
        end_date: datetime | None,
        *,
        now: datetime | None,
    ) -> DiscountStatus:
        current = now or time_utils.now()
        start = time_utils.to_utc(start_date)
        end = time_utils.to_utc(end_date)
        if end is not None and end < current:
            return DiscountStatus.EXPIRED
        if start is not None and start > current:
            return DiscountStatus.SCHEDULED
        return DiscountStatus.ACTIVE

    # ------------------------------------------------------------------ #
    # 终结动作
    # ------------------------------------------------------------------ #
    def save(self) -> SubmissionResult | None:
        if self._submission is None:
            return None
        return self._submission.submit()

    def discard(self) -> None:
        """丢弃未保存的修改."""
        if self._store is None or self.submitting:
            return
        self._store.reset()
        log_info("已丢弃未保存的折扣修改", module=MODULE, discount_id=self.discount_id)

    def cancel(self) -> None:
        """离开编辑页(面包屑返回), 未保存的修改随之丢弃."""
        log_info(
            "离开折扣编辑页",
            module=MODULE,
            discount_id=self.discount_id,
            discarded_changes=self._store is not None and self._store.is_dirty(),
        )
        self._navigator.go_to_record_list()

    def toggle_delete(self) -> DeletionState | None:
        if self._deletion is None:
            return None
        return self._deletion.toggle()

    def confirm_delete(self) -> SubmissionResult | None:
        if self._deletion is None:
            return None
        return self._deletion.confirm()


__all__ = ["APP_DISCOUNT_TYPE", "DiscountEditController", "DiscountSummary"]
