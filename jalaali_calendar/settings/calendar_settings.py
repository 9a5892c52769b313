from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class CalendarSettings(BaseSettings):
    application_level: str = Field(
        default="Development",
        description="Application level reported by the logger",
    )
    log_level: str = Field(default="INFO", description="Logger level")
    enable_tracing: bool = Field(
        default=False,
        description="Attach trace ids to log records",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write logs to `log_file_path`",
    )
    log_file_path: str = Field(default="jalaali_calendar.log")
    max_bytes: int = Field(default=10 * 1024 * 1024)
    backup_count: int = Field(default=5)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JALAALI_",
        extra="ignore",
    )
