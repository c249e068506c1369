"""
Typed client for the Rakuten RMS WEB SERVICE order API.

Example:
    >>> from rakuten_rms import RMSClient, SearchOrderDateType
    >>> client = RMSClient.initialize(service_secret, license_key)
    >>> client.search_order(SearchOrderDateType.ORDER_DATE, start, end)
"""

from rakuten_rms.clients.unified_client import RMSClient
from rakuten_rms.core.logging_config import setup_logging
from rakuten_rms.domain.models import (
    BasketUpdate,
    SearchOrderCondition,
    SearchOrderDateType,
    ShippingUpdate,
    SortDirection,
    UpdateOrderMemoCondition,
)
from rakuten_rms.utils.error_handler import (
    AppException,
    DecodeException,
    FormatException,
    SemanticException,
    TransportException,
    UninitializedException,
    ValidationException,
)
from rakuten_rms.version import VERSION

__version__ = VERSION

__all__ = [
    "RMSClient",
    "BasketUpdate",
    "SearchOrderCondition",
    "SearchOrderDateType",
    "ShippingUpdate",
    "SortDirection",
    "UpdateOrderMemoCondition",
    "AppException",
    "DecodeException",
    "FormatException",
    "SemanticException",
    "TransportException",
    "UninitializedException",
    "ValidationException",
    "setup_logging",
    "__version__",
]
