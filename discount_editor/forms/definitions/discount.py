"""折扣编辑表单定义."""

from discount_editor.constants import DiscountMethod, RequirementType
from discount_editor.forms.definitions.base import (
    FieldComponent,
    FieldOption,
    ResourceFormDefinition,
    ResourceFormField,
)
from discount_editor.utils.time_utils import time_utils

DEFAULT_COMBINES_WITH = {
    "order_discounts": False,
    "product_discounts": False,
    "shipping_discounts": False,
}

DISCOUNT_FORM_DEFINITION = ResourceFormDefinition(
    name="discount",
    fields=[
        ResourceFormField(
            name="discount_title",
            label="折扣标题",
            help_text="自动折扣在结账页展示的名称",
            default="",
        ),
        ResourceFormField(
            name="discount_method",
            label="折扣方式",
            component=FieldComponent.CHOICE_LIST,
            required=True,
            default=DiscountMethod.CODE,
            options=[
                FieldOption(value=DiscountMethod.CODE, label="折扣码"),
                FieldOption(value=DiscountMethod.AUTOMATIC, label="自动折扣"),
            ],
        ),
        ResourceFormField(
            name="discount_code",
            label="折扣码",
            default="",
        ),
        ResourceFormField(
            name="combines_with",
            label="叠加设置",
            component=FieldComponent.CHECKBOX,
            default=DEFAULT_COMBINES_WITH,
        ),
        ResourceFormField(
            name="requirement_type",
            label="最低要求",
            component=FieldComponent.CHOICE_LIST,
            default=RequirementType.NONE,
            options=[
                FieldOption(value=RequirementType.NONE, label="无"),
                FieldOption(value=RequirementType.SUBTOTAL, label="最低金额"),
                FieldOption(value=RequirementType.QUANTITY, label="最低件数"),
            ],
        ),
        ResourceFormField(
            name="requirement_subtotal",
            label="最低金额",
            component=FieldComponent.NUMBER,
            default="0",
        ),
        ResourceFormField(
            name="requirement_quantity",
            label="最低件数",
            component=FieldComponent.NUMBER,
            default="0",
        ),
        ResourceFormField(
            name="usage_total_limit",
            label="总使用次数上限",
            component=FieldComponent.NUMBER,
            help_text="留空表示不限制",
            default=None,
        ),
        ResourceFormField(
            name="usage_once_per_customer",
            label="每位顾客限用一次",
            component=FieldComponent.CHECKBOX,
            default=False,
        ),
        ResourceFormField(
            name="start_date",
            label="开始时间",
            component=FieldComponent.DATE,
            required=True,
            default_factory=time_utils.now,
        ),
        ResourceFormField(
            name="end_date",
            label="结束时间",
            component=FieldComponent.DATE,
            default=None,
        ),
        ResourceFormField(
            name="configuration.customer_tag",
            label="顾客标签",
            default="",
        ),
        ResourceFormField(
            name="configuration.percentage",
            label="折扣百分比",
            component=FieldComponent.NUMBER,
            default="0",
            props={"suffix": "%", "min": 0, "max": 100},
        ),
        ResourceFormField(
            name="configuration.collections",
            label="适用系列",
            component=FieldComponent.RESOURCE_PICKER,
            default=[],
        ),
    ],
)
