"""外部协作方: 远程折扣服务客户端与主机导航桥."""

from .discount_api_client import DiscountApiClient, DiscountServiceClient, resolve_resource_id
from .navigation import AdminSectionNavigator, NavigationBridge

__all__ = [
    "AdminSectionNavigator",
    "DiscountApiClient",
    "DiscountServiceClient",
    "NavigationBridge",
    "resolve_resource_id",
]
