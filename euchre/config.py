"""Library configuration using Pydantic settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Settings loaded from ``EUCHRE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EUCHRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: LogLevel = Field(default="INFO", description="Level for the euchre logger")
    log_format: str = Field(
        default="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        description="Log record format",
    )
    log_datefmt: str = Field(default="%H:%M:%S", description="Log timestamp format")

    # Rules engine
    trace_comparisons: bool = Field(
        default=False, description="Log every pairwise card comparison at DEBUG"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.strip().upper() if isinstance(value, str) else value


# Global settings instance
settings = Settings()
