"""折扣编辑器.

在主机后台内嵌的折扣编辑页背后, 管理单条折扣的表单状态、保存与删除流程.
"""

from discount_editor.settings import APP_VERSION

__version__ = APP_VERSION
