"""
Configuración del sistema de logging.

El cliente nunca configura logging al importarse: cada módulo usa
``logging.getLogger(__name__)`` y la aplicación anfitriona decide si llama a
``setup_logging()``. Incluye:
- Formateo con colores para consola
- Formateo JSON estructurado para monitoreo
- Handler de archivo con rotación opcional
- Helper para registrar llamadas HTTP a RMS
"""

import json
import logging
import logging.config
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from rakuten_rms.core.config import Settings, get_settings

_STANDARD_RECORD_KEYS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "message",
    "taskName",
}


class ColoredFormatter(logging.Formatter):
    """
    Formatter que agrega colores a los logs en consola.
    """

    # Códigos de color ANSI
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Verde
        "WARNING": "\033[33m",  # Amarillo
        "ERROR": "\033[31m",  # Rojo
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        """
        Formatea el record con colores si la salida es una terminal.

        Args:
            record: LogRecord a formatear

        Returns:
            str: Mensaje formateado
        """
        formatted = super().format(record)

        if hasattr(sys.stderr, "isatty") and sys.stderr.isatty():
            color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
            reset = self.COLORS["RESET"]
            formatted = formatted.replace(record.levelname, f"{color}{record.levelname}{reset}")

        return formatted


class StructuredFormatter(logging.Formatter):
    """
    Formatter para logging estructurado en JSON.
    """

    def __init__(self, *args, app_name: str = "rakuten-rms-client", app_version: str = "", **kwargs):
        super().__init__(*args, **kwargs)
        self.app_name = app_name
        self.app_version = app_version

    def format(self, record):
        """
        Formatea el record como JSON estructurado.

        Args:
            record: LogRecord a formatear

        Returns:
            str: Mensaje en formato JSON
        """
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "app_name": self.app_name,
            "app_version": self.app_version,
        }

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        extra_fields = {key: value for key, value in record.__dict__.items() if key not in _STANDARD_RECORD_KEYS}
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def get_logging_configuration(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """
    Genera configuración completa de logging.

    Args:
        settings: Configuración a usar (por defecto ``get_settings()``)

    Returns:
        Dict: Configuración para ``logging.config.dictConfig``
    """
    settings = settings or get_settings()

    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": settings.LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": ("%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s"),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "colored": {
                "()": ColoredFormatter,
                "format": settings.LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": StructuredFormatter,
                "app_name": settings.APP_NAME,
                "app_version": settings.APP_VERSION,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.LOG_LEVEL,
                "formatter": "colored" if settings.DEBUG else "standard",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            "rakuten_rms": {
                "level": "DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
                "propagate": True,
            },
            # Reducir verbosidad de librerías externas
            "urllib3.connectionpool": {"level": "WARNING"},
            "requests": {"level": "WARNING"},
        },
        "root": {"level": settings.LOG_LEVEL, "handlers": ["console"]},
    }

    if settings.LOG_FILE_PATH:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": settings.LOG_LEVEL,
            "formatter": "json" if settings.is_production else "detailed",
            "filename": settings.LOG_FILE_PATH,
            "maxBytes": settings.LOG_MAX_SIZE_MB * 1024 * 1024,
            "backupCount": settings.LOG_BACKUP_COUNT,
            "encoding": "utf-8",
        }
        config["root"]["handlers"].append("file")

    return config


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configura el logging de la aplicación anfitriona.

    Args:
        settings: Configuración a usar (por defecto ``get_settings()``)
    """
    settings = settings or get_settings()

    if settings.LOG_FILE_PATH:
        Path(settings.LOG_FILE_PATH).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(get_logging_configuration(settings))

    logger = logging.getLogger(__name__)
    logger.info(f"Sistema de logging configurado - Nivel: {settings.LOG_LEVEL}")


def log_api_call(method: str, url: str, status_code: int, duration: float, **kwargs) -> None:
    """
    Registra una llamada HTTP a RMS WEB SERVICE.

    Args:
        method: Método HTTP
        url: URL de la API
        status_code: Código de respuesta
        duration: Duración en segundos
        **kwargs: Datos adicionales
    """
    logger = logging.getLogger("rakuten_rms.api.call")

    extra_data = {
        "method": method,
        "url": url,
        "status_code": status_code,
        "duration_ms": round(duration * 1000, 2),
        **kwargs,
    }

    if 200 <= status_code < 300:
        level = logging.DEBUG
    elif 400 <= status_code < 500:
        level = logging.WARNING
    else:
        level = logging.ERROR

    logger.log(
        level,
        f"API call: {method} {url} -> {status_code} ({duration * 1000:.1f}ms)",
        extra=extra_data,
    )
