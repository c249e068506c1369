"""Tests unitarios para el post-procesador del calendario de tienda (XML)."""

import logging
from datetime import date, datetime

import pytest

from rakuten_rms.domain.value_objects.rms_datetime import JST
from rakuten_rms.schemas.calendar_schemas import CalendarEvent, ShopHoliday
from rakuten_rms.services.calendar.calendar_postprocessor import CalendarPostProcessor, decode_shop_calendar
from rakuten_rms.utils.error_handler import DecodeException

CALENDAR_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<result>
  <resultCode>N000</resultCode>
  <resultMessageList>
    <resultMessage>
      <code>N000</code>
      <message>Succeeded.</message>
    </resultMessage>
  </resultMessageList>
  <shopCalendarBizModel>
    <shopCalendar>
      <businessHoliday>
        <regularSchedule>
          <regularSchedule>SUNDAY</regularSchedule>
          <regularSchedule>SATURDAY</regularSchedule>
        </regularSchedule>
        <eventDates>
          <eventDates>20200515</eventDates>
          <eventDates>20201301</eventDates>
          <eventDates>20200516</eventDates>
        </eventDates>
      </businessHoliday>
      <shippingHoliday/>
      <shippingOnly>
        <eventDates>
          <eventDates>20200520</eventDates>
        </eventDates>
      </shippingOnly>
      <shopHoliday>
        <title>GW</title>
        <stimestampYmd>2020-05-01T00:00:00+09:00</stimestampYmd>
        <etimestampYmd>2020-05-10T23:59:59+0900</etimestampYmd>
        <mailMessage>Mail notice</mailMessage>
        <message>Web notice</message>
      </shopHoliday>
    </shopCalendar>
  </shopCalendarBizModel>
</result>
"""

ERROR_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<result>
  <resultCode>C001</resultCode>
  <resultMessageList>
    <resultMessage>
      <code>C001</code>
      <message>Request parameter is invalid.</message>
      <fieldId>period</fieldId>
    </resultMessage>
  </resultMessageList>
</result>
"""


class TestDecodeShopCalendar:
    """Tests para la decodificación completa."""

    def test_result_code_and_messages(self):
        response = decode_shop_calendar(CALENDAR_XML)

        assert response.result_code == "N000"
        assert response.is_success is True
        assert response.result_message_list[0].code == "N000"
        assert response.result_message_list[0].message == "Succeeded."

    def test_event_dates_are_parsed(self):
        """Las fechas válidas se convierten y las inválidas se reportan."""
        calendar = decode_shop_calendar(CALENDAR_XML).shop_calendar

        event = calendar.business_holiday
        assert event.event_date_strs == ["20200515", "20201301", "20200516"]
        assert event.event_dates == [date(2020, 5, 15), date(2020, 5, 16)]
        assert event.invalid_event_dates == ["20201301"]
        assert event.regular_schedule == ["SUNDAY", "SATURDAY"]

    def test_single_event_date(self):
        calendar = decode_shop_calendar(CALENDAR_XML).shop_calendar

        assert calendar.shipping_only.event_dates == [date(2020, 5, 20)]
        assert calendar.shipping_only.invalid_event_dates == []

    def test_empty_event(self):
        calendar = decode_shop_calendar(CALENDAR_XML).shop_calendar

        assert calendar.shipping_holiday.event_date_strs == []
        assert calendar.shipping_holiday.event_dates == []

    def test_shop_holiday_timestamps(self):
        """Solo se convierten los timestamps presentes; los ausentes quedan en None."""
        holiday = decode_shop_calendar(CALENDAR_XML).shop_calendar.shop_holiday

        assert holiday.title == "GW"
        assert holiday.message == "Web notice"
        assert holiday.mail_message == "Mail notice"
        assert holiday.stimestamp == datetime(2020, 5, 1, 0, 0, 0, tzinfo=JST)
        assert holiday.etimestamp == datetime(2020, 5, 10, 23, 59, 59, tzinfo=JST)
        assert holiday.stimestamp_mail_ymd is None
        assert holiday.stimestamp_mail is None
        assert holiday.etimestamp_mail is None

    def test_error_response(self):
        response = decode_shop_calendar(ERROR_XML)

        assert response.is_success is False
        assert response.shop_calendar is None
        assert response.result_message_list[0].field_id == "period"

    def test_malformed_xml(self):
        with pytest.raises(DecodeException) as exc_info:
            decode_shop_calendar(b"<result><resultCode>N000</result>", endpoint="https://example.test/shopCalendar")

        assert exc_info.value.details["endpoint"] == "https://example.test/shopCalendar"

    def test_flat_event_dates(self):
        """También se aceptan elementos repetidos sin envoltorio."""
        body = (
            b"<result><resultCode>N000</resultCode><shopCalendarBizModel><shopCalendar>"
            b"<businessHoliday><eventDates>20200515</eventDates><eventDates>20200516</eventDates></businessHoliday>"
            b"</shopCalendar></shopCalendarBizModel></result>"
        )

        calendar = decode_shop_calendar(body).shop_calendar

        assert calendar.business_holiday.event_dates == [date(2020, 5, 15), date(2020, 5, 16)]
        assert calendar.shop_holiday is None


class TestPostprocess:
    """Tests para la segunda pasada sobre modelos ya decodificados."""

    def test_invalid_dates_are_logged(self, caplog):
        event = CalendarEvent(event_date_strs=["2020-05-15", "20200515"])

        with caplog.at_level(logging.WARNING, logger="rakuten_rms"):
            CalendarPostProcessor().postprocess_event(event, "businessHoliday")

        assert event.event_dates == [date(2020, 5, 15)]
        assert event.invalid_event_dates == ["2020-05-15"]
        assert "businessHoliday" in caplog.text

    def test_unparsable_holiday_timestamp_stays_none(self):
        holiday = ShopHoliday(stimestamp_ymd="2020-05-01", etimestamp_ymd="2020-05-10T00:00:00+0900")

        CalendarPostProcessor().postprocess_holiday(holiday)

        assert holiday.stimestamp is None
        assert holiday.stimestamp_ymd == "2020-05-01"
        assert holiday.etimestamp == datetime(2020, 5, 10, tzinfo=JST)
