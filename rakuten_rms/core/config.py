"""
Configuración centralizada del cliente RMS.

Este módulo maneja todas las variables de entorno y configuraciones
del cliente usando Pydantic Settings para validación automática.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rakuten_rms.version import VERSION


class Settings(BaseSettings):
    """
    Configuración del cliente usando Pydantic Settings.

    Todas las configuraciones se cargan desde variables de entorno con
    prefijo ``RMS_`` y valores por defecto apropiados para desarrollo.
    """

    # === CONFIGURACIÓN BÁSICA ===
    APP_NAME: str = "rakuten-rms-client"
    APP_VERSION: str = VERSION
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)

    # === CREDENCIALES RMS WEB SERVICE ===
    SERVICE_SECRET: Optional[str] = Field(default=None)
    LICENSE_KEY: Optional[str] = Field(default=None)

    # === CONFIGURACIÓN DE LA API ===
    API_BASE_URL: str = Field(default="https://api.rms.rakuten.co.jp/es")
    SEARCH_ORDER_PATH: str = Field(default="/2.0/order/searchOrder/")
    GET_ORDER_PATH: str = Field(default="/2.0/order/getOrder/")
    UPDATE_ORDER_MEMO_PATH: str = Field(default="/2.0/order/updateOrderMemo/")
    UPDATE_ORDER_SHIPPING_PATH: str = Field(default="/2.0/order/updateOrderShipping/")
    SHOP_CALENDAR_PATH: str = Field(default="/1.0/shop/shopCalendar")
    REQUEST_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)
    # Versión del esquema de getOrder (1: 2018/02, 2: 2018/11, 3: 2019/04, 4: 2019/12)
    GET_ORDER_VERSION: int = Field(default=3, ge=1, le=4)
    USER_AGENT: Optional[str] = Field(default=None)

    # === CONFIGURACIÓN DE LOGGING ===
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE_PATH: Optional[str] = Field(default=None)
    LOG_MAX_SIZE_MB: int = Field(default=10)
    LOG_BACKUP_COUNT: int = Field(default=5)
    LOG_FORMAT: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    model_config = SettingsConfigDict(
        env_prefix="RMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Valida que el nivel de log sea válido."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL debe ser uno de: {valid_levels}")
        return v.upper()

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Valida que el entorno sea válido."""
        valid_envs = ["development", "staging", "production", "testing"]
        if v.lower() not in valid_envs:
            raise ValueError(f"ENVIRONMENT debe ser uno de: {valid_envs}")
        return v.lower()

    @field_validator("API_BASE_URL")
    @classmethod
    def validate_api_base_url(cls, v):
        """Normaliza la URL base (esquema obligatorio, sin barra final)."""
        if not v.startswith("https://") and not v.startswith("http://"):
            v = f"https://{v}"
        return v.rstrip("/")

    @property
    def is_production(self) -> bool:
        """Verifica si está en entorno de producción."""
        return self.ENVIRONMENT == "production"

    @property
    def has_credentials(self) -> bool:
        """Indica si hay service secret y license key configurados."""
        return bool(self.SERVICE_SECRET) and bool(self.LICENSE_KEY)

    @property
    def user_agent(self) -> str:
        """User-Agent enviado en cada request."""
        return self.USER_AGENT or f"{self.APP_NAME}/{self.APP_VERSION}"

    def endpoint_url(self, path: str) -> str:
        """
        Construye la URL completa de un endpoint.

        Args:
            path: Ruta relativa (p.ej. SEARCH_ORDER_PATH)

        Returns:
            str: URL absoluta
        """
        return f"{self.API_BASE_URL}/{path.lstrip('/')}"


@lru_cache()
def get_settings() -> Settings:
    """
    Obtiene instancia singleton de configuración.

    Usa LRU cache para evitar recrear la configuración
    múltiples veces durante la ejecución.

    Returns:
        Settings: Instancia de configuración
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Recarga la configuración (útil para testing).

    Returns:
        Settings: Nueva instancia de configuración
    """
    get_settings.cache_clear()
    return get_settings()
