"""Configuration settings for pagebar."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pagination defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAGEBAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Sequence Configuration
    pages_at_edges: int = Field(default=2, ge=0, description="Pages always shown at each end")
    pages_around_current: int = Field(
        default=2, ge=0, description="Pages shown on each side of the current page"
    )

    # Control Configuration
    show_first_last_arrows: bool = Field(default=True)
    show_next_prev_arrows: bool = Field(default=True)
    current_label_format: str = Field(
        default="· {label} ·",
        description="Format applied to the current page label, receives {label}",
    )
    row_width: int | None = Field(
        default=None, ge=1, description="Buttons per keyboard row, None keeps a single row"
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["console", "json"] = Field(default="console")

    @field_validator("current_label_format")
    @classmethod
    def validate_current_label_format(cls, v):
        """Only the {label} placeholder may be used."""
        try:
            v.format(label="1")
        except (AttributeError, KeyError, IndexError, ValueError) as e:
            raise ValueError(f"Invalid current label format {v!r}: {e!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
