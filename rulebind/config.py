from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rulebind.validation.strategies import ValidationMode

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON output, False for colored console

    # Validation defaults picked up by newly constructed validators
    DEFAULT_MODE: ValidationMode = ValidationMode.COLLECT_ALL
    MAX_FAILURES: int | None = Field(default=None, ge=1)

    model_config = SettingsConfigDict(env_prefix="RULEBIND_", env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if (level := value.upper()) not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
