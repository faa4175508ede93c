"""Settings for sugar, loaded from SUGAR_* environment variables."""

from enum import StrEnum

from pydantic import field_validator
from pydantic_settings import BaseSettings


class LogLevel(StrEnum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Logging Configuration
    log_level: LogLevel = LogLevel.INFO
    json_logs: bool = False
    rich_tracebacks: bool = False

    model_config = {
        "env_prefix": "SUGAR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()
