"""
RMS shop API client: business-day calendar and long-holiday announcements.
"""

import logging
from datetime import date
from typing import Dict, Optional

from rakuten_rms.domain.models.codes import MAX_CALENDAR_PERIOD, MIN_CALENDAR_PERIOD
from rakuten_rms.domain.value_objects.rms_datetime import encode_date, is_valid_date_string
from rakuten_rms.schemas.calendar_schemas import ShopBizApiResponse
from rakuten_rms.services.calendar.calendar_postprocessor import CalendarPostProcessor

from .base_client import BaseRMSClient

logger = logging.getLogger(__name__)


class RMSShopClient(BaseRMSClient):
    """Client for shop operations."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.postprocessor = CalendarPostProcessor()

    def get_shop_calendar(
        self, from_date: Optional[str | date] = None, period: Optional[int] = None
    ) -> ShopBizApiResponse:
        """
        Fetch the shop calendar.

        Args:
            from_date: First day (``YYYY-MM-DD``); today when omitted or invalid
            period: Number of days, 1..180; RMS uses 90 when omitted or invalid

        Returns:
            ShopBizApiResponse: Result code, messages and calendar
        """
        self._ensure_initialized()
        params: Dict[str, str] = {}

        if isinstance(from_date, date):
            params["fromDate"] = encode_date(from_date)
        elif from_date and is_valid_date_string(from_date):
            params["fromDate"] = from_date
        elif from_date:
            logger.debug(f"shopCalendar: ignoring invalid fromDate {from_date!r}")

        if period is not None:
            if MIN_CALENDAR_PERIOD <= period <= MAX_CALENDAR_PERIOD:
                params["period"] = str(period)
            else:
                logger.debug(f"shopCalendar: ignoring period {period} outside 1..180")

        body = self.fetch_xml(self.settings.SHOP_CALENDAR_PATH, params)
        endpoint = self.settings.endpoint_url(self.settings.SHOP_CALENDAR_PATH)
        response = self.postprocessor.decode(body, endpoint=endpoint)

        if not response.is_success:
            logger.debug(f"shopCalendar returned {response.result_code}")
        return response
