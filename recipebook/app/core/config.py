import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Must match the scale of the quantity column, NUMERIC(10, 4)
    quantity_decimal_places: int = Field(4, alias="QUANTITY_DECIMAL_PLACES", ge=0, le=10)
    quantity_display_denominator: int = Field(16, alias="QUANTITY_DISPLAY_DENOMINATOR")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @field_validator("quantity_display_denominator")
    @classmethod
    def validate_denominator(cls, value: int) -> int:
        if value < 1 or value > 64 or value & (value - 1):
            raise ValueError("Display denominator must be a power of two between 1 and 64")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings
