"""资源表单定义集合。"""

from .base import FieldComponent, FieldOption, ResourceFormDefinition, ResourceFormField
from .discount import DEFAULT_COMBINES_WITH, DISCOUNT_FORM_DEFINITION

__all__ = [
    "DEFAULT_COMBINES_WITH",
    "DISCOUNT_FORM_DEFINITION",
    "FieldComponent",
    "FieldOption",
    "ResourceFormDefinition",
    "ResourceFormField",
]
