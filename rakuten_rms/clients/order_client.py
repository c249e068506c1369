"""
RMS order API client (楽天ペイ受注API).

This module handles order search, retrieval and the memo and shipping
updates. Requests are built by the normalizers in
``rakuten_rms.services.orders``.
"""

import logging
from datetime import datetime
from typing import List, Optional

from rakuten_rms.domain.models.codes import GET_ORDER_VERSIONS, MAX_ORDER_NUMBERS_PER_GET, SearchOrderDateType
from rakuten_rms.domain.models.conditions import BasketUpdate, SearchOrderCondition, UpdateOrderMemoCondition
from rakuten_rms.schemas.common import MessageEnvelope
from rakuten_rms.schemas.order_schemas import (
    GetOrderRequest,
    GetOrderResponse,
    SearchOrderResponse,
    UpdateOrderMemoResponse,
    UpdateOrderShippingResponse,
)
from rakuten_rms.services.orders.condition_normalizer import SearchOrderConditionNormalizer
from rakuten_rms.services.orders.update_normalizer import normalize_memo_update, normalize_shipping_update
from rakuten_rms.utils.error_handler import SemanticException, ValidationException

from .base_client import BaseRMSClient

logger = logging.getLogger(__name__)


def _raise_unless_success(envelope: MessageEnvelope, operation: str) -> None:
    leading = envelope.leading_message
    if not envelope.is_success:
        logger.debug(f"{operation} rejected: {leading.message_code} {leading.message}")
        raise SemanticException(
            leading.message or f"{operation} failed",
            message_type=leading.message_type,
            message_code=leading.message_code,
        )


class RMSOrderClient(BaseRMSClient):
    """
    Client for order operations.

    Search results and order details are returned as-is, including ERROR
    messages; the update operations raise when RMS rejects the change.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.normalizer = SearchOrderConditionNormalizer()

    def search_order(
        self,
        date_type: SearchOrderDateType | int,
        start_datetime: datetime,
        end_datetime: datetime,
        condition: Optional[SearchOrderCondition] = None,
    ) -> SearchOrderResponse:
        """
        Search order numbers in a date window.

        RMS requires the start within the last two years and the end at most
        63 days after the start.

        Args:
            date_type: Which order timestamp the window applies to
            start_datetime: Window start (JST wall clock)
            end_datetime: Window end (JST wall clock)
            condition: Optional filters; invalid values are dropped

        Returns:
            SearchOrderResponse: Order numbers and pagination
        """
        self._ensure_initialized()
        result = self.normalizer.normalize(date_type, start_datetime, end_datetime, condition)
        if result.dropped_fields:
            logger.info(f"searchOrder: ignoring invalid conditions {result.dropped_fields}")

        return self.send(self.settings.SEARCH_ORDER_PATH, result.request, SearchOrderResponse)

    def get_order(self, order_numbers: List[str], version: Optional[int] = None) -> GetOrderResponse:
        """
        Fetch full order records.

        Args:
            order_numbers: Up to 100 order numbers
            version: Response schema version 1..4 (default ``GET_ORDER_VERSION``)

        Returns:
            GetOrderResponse: Orders plus per-order messages

        Raises:
            ValidationException: If more than 100 numbers or an unknown version are given
        """
        self._ensure_initialized()
        version = version if version is not None else self.settings.GET_ORDER_VERSION

        if len(order_numbers) > MAX_ORDER_NUMBERS_PER_GET:
            raise ValidationException(
                message=f"getOrder accepts at most {MAX_ORDER_NUMBERS_PER_GET} order numbers",
                field="orderNumberList",
                invalid_value=len(order_numbers),
            )
        if version not in GET_ORDER_VERSIONS:
            raise ValidationException(
                message="Unsupported getOrder version",
                field="version",
                invalid_value=version,
                expected_format="1..4",
            )

        request = GetOrderRequest(order_number_list=list(order_numbers), version=version)
        return self.send(self.settings.GET_ORDER_PATH, request, GetOrderResponse)

    def update_order_memo(self, condition: UpdateOrderMemoCondition) -> UpdateOrderMemoResponse:
        """
        Update memo, operator and delivery fields of one order.

        Returns:
            UpdateOrderMemoResponse: Envelope with the INFO message

        Raises:
            SemanticException: If RMS answers with a non-INFO message
        """
        self._ensure_initialized()
        result = normalize_memo_update(condition)
        if result.dropped_fields:
            logger.info(f"updateOrderMemo[{condition.order_number}]: ignoring invalid values {result.dropped_fields}")

        response = self.send(self.settings.UPDATE_ORDER_MEMO_PATH, result.request, UpdateOrderMemoResponse)
        _raise_unless_success(response, "updateOrderMemo")
        logger.info(f"Order {condition.order_number} memo updated")
        return response

    def update_order_shipping(self, order_number: str, baskets: List[BasketUpdate]) -> UpdateOrderShippingResponse:
        """
        Register, update or delete shipments of one order.

        Args:
            order_number: Target order
            baskets: Shipments grouped by basket

        Returns:
            UpdateOrderShippingResponse: Envelope with the INFO message

        Raises:
            SemanticException: If RMS answers with a non-INFO message
        """
        self._ensure_initialized()
        if not order_number:
            raise ValidationException(message="Order number is required", field="orderNumber")

        request = normalize_shipping_update(order_number, baskets)
        response = self.send(self.settings.UPDATE_ORDER_SHIPPING_PATH, request, UpdateOrderShippingResponse)
        _raise_unless_success(response, "updateOrderShipping")
        logger.info(f"Order {order_number} shipping updated")
        return response
