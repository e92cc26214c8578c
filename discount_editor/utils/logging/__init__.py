"""日志辅助组件."""

from .context_vars import discount_id_var, discount_method_var
from .handlers import DebugFilter

__all__ = ["DebugFilter", "discount_id_var", "discount_method_var"]
