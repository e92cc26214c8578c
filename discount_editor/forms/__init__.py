"""
表单包

集中管理折扣表单的字段单元、字段定义与水合逻辑。
"""

from .definitions.base import (
    FieldComponent,
    FieldOption,
    ResourceFormDefinition,
    ResourceFormField,
)
from .field_state import FieldState
from .form_store import ConfigurationFields, DiscountFormFields, DiscountFormStore
from .hydrator import DiscountFormHydrator

__all__ = [
    "ConfigurationFields",
    "DiscountFormFields",
    "DiscountFormHydrator",
    "DiscountFormStore",
    "FieldComponent",
    "FieldOption",
    "FieldState",
    "ResourceFormDefinition",
    "ResourceFormField",
]
