"""
RMS WEB SERVICE clients organized by API.
"""

from .base_client import BaseRMSClient, build_authorization
from .order_client import RMSOrderClient
from .shop_client import RMSShopClient
from .unified_client import RMSClient

__all__ = [
    "BaseRMSClient",
    "build_authorization",
    "RMSOrderClient",
    "RMSShopClient",
    "RMSClient",
]
