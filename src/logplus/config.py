"""
Logging Configuration.
"""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .destinations import Destination, Mode, destination_from_mode


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingSettings(BaseSettings):
    """Logger configuration, read once at initialization."""

    model_config = SettingsConfigDict(
        env_prefix="LOGPLUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    service_name: str = Field(default="app", description="First field of every caller hierarchy")
    mode: Mode = Field(default="console", description="Destination: console, file or rolling")
    file_path: str = Field(default="", description="Log file for file/rolling modes; empty means ./logs/<timestamp>.log")
    level: LogLevel = Field(default=LogLevel.INFO, description="Minimum level passed to the engine")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    def destination(self) -> Destination:
        return destination_from_mode(self.mode, self.file_path)
