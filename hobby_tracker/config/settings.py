from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(
        default="",  # Empty means console logging only
        validation_alias="LOG_FILE",
    )
    long_session_threshold: int = Field(
        default=30,
        validation_alias="LONG_SESSION_THRESHOLD",
        description="Minutes a session must exceed to count as long",
    )
    wide_long_session_threshold: int = Field(
        default=33,
        validation_alias="WIDE_LONG_SESSION_THRESHOLD",
        description="Second long-session threshold shown in the enriched report",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value


settings = Settings()
