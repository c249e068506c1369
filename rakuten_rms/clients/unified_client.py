"""
Unified RMS client that combines the order and shop clients.

``RMSClient`` is the public entry point: it owns the credential and the HTTP
session and delegates each operation to the specialized client.
"""

import logging
from datetime import date, datetime
from typing import List, Optional

import requests

from rakuten_rms.core.config import Settings, get_settings
from rakuten_rms.domain.models.codes import SearchOrderDateType
from rakuten_rms.domain.models.conditions import BasketUpdate, SearchOrderCondition, UpdateOrderMemoCondition
from rakuten_rms.schemas.calendar_schemas import ShopBizApiResponse
from rakuten_rms.schemas.order_schemas import (
    GetOrderResponse,
    SearchOrderResponse,
    UpdateOrderMemoResponse,
    UpdateOrderShippingResponse,
)
from rakuten_rms.utils.error_handler import UninitializedException

from .base_client import BaseRMSClient, build_authorization
from .order_client import RMSOrderClient
from .shop_client import RMSShopClient

logger = logging.getLogger(__name__)


class RMSClient(BaseRMSClient):
    """
    Facade over the RMS WEB SERVICE APIs.

    ``RMSClient()`` is uninitialized and every operation raises
    ``UninitializedException`` without a network call. Use ``initialize`` or
    ``from_settings`` to get a ready client; the credential never changes
    afterwards.

    Example:
        >>> with RMSClient.initialize(service_secret, license_key) as client:
        ...     result = client.search_order(SearchOrderDateType.ORDER_DATE, start, end)
    """

    def __init__(
        self,
        authorization: Optional[str] = None,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the unified client and its specialized clients."""
        super().__init__(authorization=authorization, session=session, settings=settings)

        # Specialized clients share the parent session
        self.orders = RMSOrderClient(authorization=authorization, session=self.session, settings=self.settings)
        self.shop = RMSShopClient(authorization=authorization, session=self.session, settings=self.settings)

    @classmethod
    def initialize(
        cls,
        service_secret: str,
        license_key: str,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ) -> "RMSClient":
        """
        Create an initialized client.

        Args:
            service_secret: RMS service secret
            license_key: RMS license key
            session: Optional HTTP session (not closed by the client)
            settings: Optional settings (default ``get_settings()``)

        Returns:
            RMSClient: Ready client

        Raises:
            UninitializedException: If either credential is empty
        """
        if not service_secret or not license_key:
            raise UninitializedException("Uninitialized: service secret and license key are required")

        client = cls(authorization=build_authorization(service_secret, license_key), session=session, settings=settings)
        logger.info("RMS client initialized")
        return client

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, session: Optional[requests.Session] = None
    ) -> "RMSClient":
        """
        Create a client with the credential from ``RMS_SERVICE_SECRET`` / ``RMS_LICENSE_KEY``.

        Raises:
            UninitializedException: If the credential is not configured
        """
        settings = settings or get_settings()
        return cls.initialize(settings.SERVICE_SECRET, settings.LICENSE_KEY, session=session, settings=settings)

    # =============================================================================
    # ORDER OPERATIONS - Delegate to OrderClient
    # =============================================================================

    def search_order(
        self,
        date_type: SearchOrderDateType | int,
        start_datetime: datetime,
        end_datetime: datetime,
        condition: Optional[SearchOrderCondition] = None,
    ) -> SearchOrderResponse:
        """Delegate to order client."""
        return self.orders.search_order(date_type, start_datetime, end_datetime, condition)

    def get_order(self, order_numbers: List[str], version: Optional[int] = None) -> GetOrderResponse:
        """Delegate to order client."""
        return self.orders.get_order(order_numbers, version)

    def update_order_memo(self, condition: UpdateOrderMemoCondition) -> UpdateOrderMemoResponse:
        """Delegate to order client."""
        return self.orders.update_order_memo(condition)

    def update_order_shipping(self, order_number: str, baskets: List[BasketUpdate]) -> UpdateOrderShippingResponse:
        """Delegate to order client."""
        return self.orders.update_order_shipping(order_number, baskets)

    # =============================================================================
    # SHOP OPERATIONS - Delegate to ShopClient
    # =============================================================================

    def get_shop_calendar(
        self, from_date: Optional[str | date] = None, period: Optional[int] = None
    ) -> ShopBizApiResponse:
        """Delegate to shop client."""
        return self.shop.get_shop_calendar(from_date, period)
