# fxcli/core/config.py
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = {"CRITICAL", "FATAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG", "NOTSET"}


class Settings(BaseSettings):
    # Metadatos
    PROJECT_NAME: str = "currency"
    PROJECT_VERSION: str = "1.0.0"

    # Feed de tasas (Open Exchange Rates)
    OXR_APP_ID: str = ""
    OXR_API_URL: str = "https://openexchangerates.org/api/latest.json"

    # Timeout de la petición HTTP (segundos)
    REQUEST_TIMEOUT: float = 10.0

    # silencioso por defecto: la CLI ya reporta el error en stderr
    LOG_LEVEL: str = "CRITICAL"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("REQUEST_TIMEOUT")
    @classmethod
    def _timeout_positivo(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("REQUEST_TIMEOUT must be greater than zero")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _nivel_valido(cls, v: str) -> str:
        nivel = v.strip().upper()
        if nivel not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {v!r}")
        return nivel


settings = Settings()
