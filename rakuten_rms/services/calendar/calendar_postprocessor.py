"""
Decoder for the ``shopCalendar`` XML response.

Decoding runs in two passes: the XML tree is first mapped onto raw-string
models, then date strings are converted to typed values. A date that fails to
parse is skipped and reported; it never aborts the rest of the response.
"""

import logging
import xml.etree.ElementTree as ET

from rakuten_rms.domain.value_objects.rms_datetime import decode_compact_date, decode_response_datetime
from rakuten_rms.schemas.calendar_schemas import (
    CalendarEvent,
    ResultMessage,
    ShopBizApiResponse,
    ShopCalendar,
    ShopHoliday,
)
from rakuten_rms.utils.error_handler import DecodeException, FormatException

logger = logging.getLogger(__name__)

_HOLIDAY_TIMESTAMPS = {
    "stimestamp_ymd": "stimestamp",
    "etimestamp_ymd": "etimestamp",
    "stimestamp_mail_ymd": "stimestamp_mail",
    "etimestamp_mail_ymd": "etimestamp_mail",
}


def _text(element: ET.Element | None, tag: str) -> str | None:
    if element is None:
        return None
    value = element.findtext(tag)
    return value.strip() if value is not None else None


def _texts(element: ET.Element, tag: str) -> list[str]:
    """
    Collect the values of a repeated element.

    RMS wraps lists in an element of the same name
    (``<eventDates><eventDates>20200515</eventDates></eventDates>``) but a
    flat repetition is accepted too.
    """
    values = []
    for child in element.findall(tag):
        nested = child.findall(tag)
        if nested:
            values.extend((item.text or "").strip() for item in nested)
        elif child.text and child.text.strip():
            values.append(child.text.strip())
    return [value for value in values if value]


class CalendarPostProcessor:
    """Turns a ``shopCalendar`` XML body into a ``ShopBizApiResponse``."""

    def decode(self, body: bytes | str, endpoint: str | None = None) -> ShopBizApiResponse:
        """
        Decode and post-process the response body.

        Args:
            body: Raw XML
            endpoint: URL used in error details

        Returns:
            ShopBizApiResponse: Typed response

        Raises:
            DecodeException: If the body is not well-formed XML
        """
        try:
            root = ET.fromstring(body)
        except ET.ParseError as e:
            excerpt = body[:200] if isinstance(body, str) else body[:200].decode("utf-8", errors="replace")
            raise DecodeException(f"Invalid shop calendar XML: {e}", endpoint=endpoint, body_excerpt=excerpt) from e

        response = self._decode_structure(root)
        if response.shop_calendar is not None:
            self.postprocess(response.shop_calendar)
        return response

    def postprocess(self, calendar: ShopCalendar) -> ShopCalendar:
        """Fill the typed date fields of ``calendar`` from its raw strings."""
        for name, event in (
            ("businessHoliday", calendar.business_holiday),
            ("shippingHoliday", calendar.shipping_holiday),
            ("shippingOnly", calendar.shipping_only),
        ):
            self.postprocess_event(event, name)
        if calendar.shop_holiday is not None:
            self.postprocess_holiday(calendar.shop_holiday)
        return calendar

    def postprocess_event(self, event: CalendarEvent, name: str = "calendarEvent") -> CalendarEvent:
        """
        Parse each ``YYYYMMDD`` string independently.

        Invalid entries are skipped, kept in ``invalid_event_dates`` and
        logged; the raw list is left untouched.
        """
        event.event_dates = []
        event.invalid_event_dates = []
        for raw in event.event_date_strs:
            try:
                event.event_dates.append(decode_compact_date(raw))
            except FormatException:
                event.invalid_event_dates.append(raw)

        if event.invalid_event_dates:
            logger.warning(
                f"{name}: skipped {len(event.invalid_event_dates)} invalid event date(s): {event.invalid_event_dates}"
            )
        return event

    def postprocess_holiday(self, holiday: ShopHoliday) -> ShopHoliday:
        """Convert the non-empty announcement timestamps; absent ones stay ``None``."""
        for raw_field, typed_field in _HOLIDAY_TIMESTAMPS.items():
            raw = getattr(holiday, raw_field)
            if not raw:
                setattr(holiday, typed_field, None)
                continue
            try:
                setattr(holiday, typed_field, decode_response_datetime(raw))
            except FormatException:
                setattr(holiday, typed_field, None)
                logger.warning(f"shopHoliday: could not parse {raw_field}={raw!r}")
        return holiday

    # =========================================================================
    # STRUCTURAL DECODE
    # =========================================================================

    def _decode_structure(self, root: ET.Element) -> ShopBizApiResponse:
        messages = [
            ResultMessage(
                code=_text(element, "code"),
                message=_text(element, "message"),
                field_id=_text(element, "fieldId"),
            )
            for element in root.iter("resultMessage")
        ]

        calendar_element = root.find(".//shopCalendar")
        calendar = self._decode_calendar(calendar_element) if calendar_element is not None else None

        return ShopBizApiResponse(
            result_code=_text(root, ".//resultCode"),
            result_message_list=messages,
            shop_calendar=calendar,
        )

    def _decode_calendar(self, element: ET.Element) -> ShopCalendar:
        holiday_element = element.find("shopHoliday")
        return ShopCalendar(
            business_holiday=self._decode_event(element.find("businessHoliday")),
            shipping_holiday=self._decode_event(element.find("shippingHoliday")),
            shipping_only=self._decode_event(element.find("shippingOnly")),
            shop_holiday=self._decode_holiday(holiday_element) if holiday_element is not None else None,
        )

    def _decode_event(self, element: ET.Element | None) -> CalendarEvent:
        if element is None:
            return CalendarEvent()
        return CalendarEvent(
            regular_schedule=_texts(element, "regularSchedule"),
            event_date_strs=_texts(element, "eventDates"),
        )

    def _decode_holiday(self, element: ET.Element) -> ShopHoliday:
        return ShopHoliday(
            title=_text(element, "title") or None,
            message=_text(element, "message") or None,
            mail_message=_text(element, "mailMessage") or None,
            stimestamp_ymd=_text(element, "stimestampYmd") or None,
            etimestamp_ymd=_text(element, "etimestampYmd") or None,
            stimestamp_mail_ymd=_text(element, "stimestampMailYmd") or None,
            etimestamp_mail_ymd=_text(element, "etimestampMailYmd") or None,
        )


def decode_shop_calendar(body: bytes | str, endpoint: str | None = None) -> ShopBizApiResponse:
    """Shortcut for ``CalendarPostProcessor().decode(...)``."""
    return CalendarPostProcessor().decode(body, endpoint)
