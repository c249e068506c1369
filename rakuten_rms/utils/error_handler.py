"""
Sistema de manejo de errores personalizado.

Este módulo define todas las excepciones del cliente RMS y proporciona
utilidades para un manejo consistente de errores.
"""

import logging
import traceback
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """
    Códigos de error estandardizados para el cliente.
    """

    # Errores generales
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Estado del cliente
    UNINITIALIZED = "UNINITIALIZED"

    # Errores de transporte / decodificación
    RMS_CONNECTION_FAILED = "RMS_CONNECTION_FAILED"
    RMS_HTTP_ERROR = "RMS_HTTP_ERROR"
    RMS_DECODE_ERROR = "RMS_DECODE_ERROR"

    # Errores de negocio reportados por RMS
    RMS_SEMANTIC_ERROR = "RMS_SEMANTIC_ERROR"

    # Errores de formato de fechas
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"


class ErrorSeverity(Enum):
    """
    Niveles de severidad para errores.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AppException(Exception):
    """
    Excepción base para todas las excepciones del cliente RMS.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        is_retryable: bool = False,
    ):
        """
        Inicializa la excepción.

        Args:
            message: Mensaje de error
            error_code: Código de error estandardizado
            details: Información adicional del error
            status_code: Código HTTP asociado
            severity: Severidad del error
            is_retryable: Si la operación puede reintentarse (el cliente nunca reintenta)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        self.severity = severity
        self.is_retryable = is_retryable
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convierte la excepción a diccionario.

        Returns:
            Dict: Representación de la excepción
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
            "status_code": self.status_code,
            "severity": self.severity.value,
            "is_retryable": self.is_retryable,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        """String representation del error."""
        return f"{self.error_code.value}: {self.message}"


class UninitializedException(AppException):
    """
    El cliente no tiene credenciales, o RMS respondió con una lista de mensajes vacía.
    """

    def __init__(self, message: str = "Uninitialized", **kwargs):
        super().__init__(
            message=message,
            error_code=ErrorCode.UNINITIALIZED,
            status_code=401,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )


class ValidationException(AppException):
    """
    Excepción para errores de validación de datos que no pueden descartarse.
    """

    def __init__(
        self,
        message: str,
        field: str,
        invalid_value: Any = None,
        expected_format: Optional[str] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de validación.

        Args:
            message: Mensaje de error
            field: Campo que falló la validación
            invalid_value: Valor que causó el error
            expected_format: Formato esperado
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            status_code=422,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.field = field
        self.invalid_value = invalid_value
        self.expected_format = expected_format

        self.details.update(
            {
                "field": field,
                "invalid_value": str(invalid_value) if invalid_value is not None else None,
                "expected_format": expected_format,
            }
        )


class FormatException(ValidationException):
    """
    Una cadena de fecha/hora no coincide con el formato exacto de RMS.
    """

    def __init__(self, value: Any, expected_format: str, field: str = "datetime", **kwargs):
        super().__init__(
            message=f"'{value}' does not match {expected_format}",
            field=field,
            invalid_value=value,
            expected_format=expected_format,
            **kwargs,
        )
        self.error_code = ErrorCode.INVALID_DATE_FORMAT


class TransportException(AppException):
    """
    Excepción para fallos de red o respuestas HTTP no exitosas.
    """

    def __init__(
        self,
        message: str,
        api_response_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de transporte.

        Args:
            message: Mensaje de error
            api_response_code: Código HTTP devuelto por RMS (None si no hubo respuesta)
            endpoint: Endpoint que falló
            **kwargs: Argumentos adicionales para AppException
        """
        error_code = ErrorCode.RMS_HTTP_ERROR if api_response_code else ErrorCode.RMS_CONNECTION_FAILED
        severity = ErrorSeverity.HIGH if (api_response_code or 503) >= 500 else ErrorSeverity.MEDIUM

        super().__init__(
            message=message,
            error_code=error_code,
            status_code=api_response_code or 503,
            severity=severity,
            is_retryable=True,
            **kwargs,
        )

        self.api_response_code = api_response_code
        self.endpoint = endpoint

        self.details.update({"api_response_code": api_response_code, "endpoint": endpoint})


class DecodeException(AppException):
    """
    Excepción para cuerpos de respuesta malformados o que no cumplen el esquema.
    """

    def __init__(self, message: str, endpoint: Optional[str] = None, body_excerpt: Optional[str] = None, **kwargs):
        super().__init__(
            message=message,
            error_code=ErrorCode.RMS_DECODE_ERROR,
            status_code=502,
            severity=ErrorSeverity.MEDIUM,
            **kwargs,
        )
        self.endpoint = endpoint
        self.details.update({"endpoint": endpoint, "body_excerpt": body_excerpt})


class SemanticException(AppException):
    """
    Respuesta decodificada correctamente cuyo primer mensaje indica un fallo de negocio.
    """

    def __init__(
        self,
        message: str,
        message_type: Optional[str] = None,
        message_code: Optional[str] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción semántica.

        Args:
            message: Texto del mensaje devuelto por RMS
            message_type: Tipo del mensaje (ERROR, WARNING, ...)
            message_code: Código del mensaje RMS
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.RMS_SEMANTIC_ERROR,
            status_code=400,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.message_type = message_type
        self.message_code = message_code

        self.details.update({"message_type": message_type, "message_code": message_code})


# === FUNCIONES DE UTILIDAD ===


def log_error(
    exception: Exception,
    context: Optional[Dict[str, Any]] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Loggea un error de manera consistente.

    Args:
        exception: Excepción a loggear
        context: Contexto adicional
        level: Nivel de logging
    """
    context = context or {}

    log_data = {
        "exception_type": type(exception).__name__,
        "exception_message": str(exception),
        "traceback": traceback.format_exc(),
        **context,
    }

    if isinstance(exception, AppException):
        message = f"{exception.error_code.value}: {exception.message}"
        log_data.update(
            {
                "error_code": exception.error_code.value,
                "severity": exception.severity.value,
                "is_retryable": exception.is_retryable,
            }
        )
    else:
        message = f"Unhandled exception: {type(exception).__name__}: {str(exception)}"

    logger.log(level, message, extra=log_data)
