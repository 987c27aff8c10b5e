from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    log_level: str = Field("INFO", validation_alias="MEASURELAB_LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="MEASURELAB_LOG_RING_SIZE", gt=0)
    log_to_stderr: bool = Field(False, validation_alias="MEASURELAB_LOG_TO_STDERR")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
