"""
Domain models for request conditions.

These are plain dataclasses the caller mutates before a call; the
normalizers read them and never write back.
"""

from .codes import (
    DELIVERY_COMPANY_CODES,
    ORDER_PROGRESS_CODES,
    ORDER_TYPE_CODES,
    SETTLEMENT_METHOD_CODES,
    SearchOrderDateType,
    SortDirection,
)
from .conditions import BasketUpdate, SearchOrderCondition, ShippingUpdate, UpdateOrderMemoCondition

__all__ = [
    "DELIVERY_COMPANY_CODES",
    "ORDER_PROGRESS_CODES",
    "ORDER_TYPE_CODES",
    "SETTLEMENT_METHOD_CODES",
    "SearchOrderDateType",
    "SortDirection",
    "BasketUpdate",
    "SearchOrderCondition",
    "ShippingUpdate",
    "UpdateOrderMemoCondition",
]
