"""
Decoding of the shop calendar XML response.
"""

from .calendar_postprocessor import CalendarPostProcessor, decode_shop_calendar

__all__ = ["CalendarPostProcessor", "decode_shop_calendar"]
