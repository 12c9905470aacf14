"""Environment configuration for schedule rows."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    show_time_separators: bool = Field(
        default=True,
        validation_alias="SCHEDULE_SHOW_TIME_SEPARATORS",
    )
    timezone: str = Field(default="UTC", validation_alias="SCHEDULE_TIMEZONE")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"SCHEDULE_TIMEZONE is not a known timezone: {value}") from e
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


settings = Settings()
logger.debug(
    "Loaded schedule settings",
    show_time_separators=settings.show_time_separators,
    timezone=settings.timezone,
)
