"""Application settings and configuration."""

from typing import Any, Literal

from pydantic import Field, field_validator  # type: ignore
from pydantic_settings import BaseSettings, SettingsConfigDict  # type: ignore


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    ENV: Literal["dev", "staging", "prod", "test"] = Field(default="dev")
    PROJECT_NAME: str = Field(default="KanaDojo Adaptive Engine")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=True)  # False = plain text console lines

    # Adaptive selection
    ADAPTIVE_SEED: int | None = Field(default=None)  # Fixed seed for reproducible sessions
    ADAPTIVE_PARAMS: dict[str, Any] = Field(default_factory=dict)  # JSON object of overrides

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level name and reject unknown levels."""
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown LOG_LEVEL: {value}")
        return level

    def __init__(self, **kwargs):
        """Validate settings on initialization."""
        super().__init__(**kwargs)
        # Reproducible draws are a debugging aid; never ship them
        if self.ENV == "prod" and self.ADAPTIVE_SEED is not None:
            raise ValueError("ADAPTIVE_SEED must not be set in production")


# Global settings instance
settings = Settings()
