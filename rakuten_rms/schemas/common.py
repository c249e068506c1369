"""
Modelos Pydantic comunes a todos los endpoints JSON de RMS.

Los nombres de campo en Python son snake_case; el alias (camelCase, o el
nombre irregular que use RMS) es el nombre exacto en el cable.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MESSAGE_TYPE_INFO = "INFO"
MESSAGE_TYPE_ERROR = "ERROR"
MESSAGE_TYPE_WARNING = "WARNING"


class RMSRequestModel(BaseModel):
    """
    Base para cuerpos de request.

    Los campos en ``None`` no se envían.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    def to_wire(self) -> Dict[str, Any]:
        """
        Serializa el request con los nombres y formatos de RMS.

        Returns:
            Dict: Cuerpo JSON listo para enviar
        """
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class RMSResponseModel(BaseModel):
    """
    Base para respuestas. Conserva campos desconocidos para tolerar
    la evolución del esquema de RMS.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class MessageModel(RMSResponseModel):
    """Entrada de ``MessageModelList``."""

    message_type: str = Field(..., description="INFO, ERROR o WARNING")
    message_code: Optional[str] = Field(None, description="Código del mensaje RMS")
    message: Optional[str] = Field(None, description="Texto legible del mensaje")
    # Solo en mensajes asociados a un pedido
    order_number: Optional[str] = Field(None)


class MessageEnvelope(RMSResponseModel):
    """
    Respuesta con lista de mensajes.

    El primer mensaje es la señal autoritativa de éxito o fallo: un HTTP 200
    con ``messageType`` distinto de ``INFO`` sigue siendo un fallo de negocio.
    """

    message_model_list: List[MessageModel] = Field(default_factory=list, alias="MessageModelList")

    @property
    def leading_message(self) -> Optional[MessageModel]:
        """Primer mensaje de la lista (``None`` si está vacía)."""
        return self.message_model_list[0] if self.message_model_list else None

    @property
    def is_success(self) -> bool:
        """True si el primer mensaje es de tipo INFO."""
        leading = self.leading_message
        return leading is not None and leading.message_type == MESSAGE_TYPE_INFO
