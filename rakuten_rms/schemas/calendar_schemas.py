"""
Modelos Pydantic para el calendario de la tienda (shop API, XML).

Los campos ``*_strs`` / ``*_ymd`` conservan el texto tal como llega en el XML;
los campos derivados (``event_dates``, ``stimestamp``...) los llena el
post-procesador de calendario.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

RESULT_CODE_SUCCESS = "N000"


class ResultMessage(BaseModel):
    """Mensaje de resultado (``resultMessageList/resultMessage``)."""

    code: Optional[str] = Field(None, description="N000 éxito; C*** error del cliente; E*** error del servidor")
    message: Optional[str] = None
    field_id: Optional[str] = Field(None, description="Parámetro que provocó el error, si aplica")


class CalendarEvent(BaseModel):
    """Días de un tipo de evento del calendario."""

    regular_schedule: List[str] = Field(default_factory=list, description="Días de la semana recurrentes")
    event_date_strs: List[str] = Field(default_factory=list, description="Fechas YYYYMMDD tal como llegan")
    event_dates: List[date] = Field(default_factory=list)
    invalid_event_dates: List[str] = Field(default_factory=list, description="Fechas que no pudieron parsearse")


class ShopHoliday(BaseModel):
    """Anuncio de vacaciones largas (web y correo)."""

    title: Optional[str] = None
    message: Optional[str] = None
    mail_message: Optional[str] = None

    stimestamp_ymd: Optional[str] = None
    etimestamp_ymd: Optional[str] = None
    stimestamp_mail_ymd: Optional[str] = None
    etimestamp_mail_ymd: Optional[str] = None

    stimestamp: Optional[datetime] = None
    etimestamp: Optional[datetime] = None
    stimestamp_mail: Optional[datetime] = None
    etimestamp_mail: Optional[datetime] = None


class ShopCalendar(BaseModel):
    """Calendario de operación de la tienda."""

    business_holiday: CalendarEvent = Field(default_factory=CalendarEvent)
    shipping_holiday: CalendarEvent = Field(default_factory=CalendarEvent)
    shipping_only: CalendarEvent = Field(default_factory=CalendarEvent)
    shop_holiday: Optional[ShopHoliday] = None


class ShopBizApiResponse(BaseModel):
    """Respuesta de ``shopCalendar``."""

    result_code: Optional[str] = None
    result_message_list: List[ResultMessage] = Field(default_factory=list)
    shop_calendar: Optional[ShopCalendar] = None

    @property
    def is_success(self) -> bool:
        """True si RMS devolvió ``N000``."""
        return self.result_code == RESULT_CODE_SUCCESS
