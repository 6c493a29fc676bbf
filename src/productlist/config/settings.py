"""Configuration settings for the product list app."""
from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root: the directory holding src/ (4 parents up from this file)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Default log directory
DEFAULT_LOG_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_FILE = DEFAULT_LOG_DIR / "productlist.log"


class ProductListSettings(BaseSettings):
    """Application settings with environment variable support."""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = DEFAULT_LOG_FILE
    LOG_TO_FILE: bool = True
    LOG_FORMAT: str = "detailed"  # simple, detailed
    LOG_RETENTION_DAYS: int = 7
    LOG_ROTATION_SIZE_MB: int = 1

    # Application Settings
    APP_TITLE: str = "Список продуктов"

    model_config = SettingsConfigDict(
        env_prefix="PRODUCTLIST_",
        case_sensitive=False,
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Log file path is resolved against the project root
        if self.LOG_FILE and not self.LOG_FILE.is_absolute():
            self.LOG_FILE = PROJECT_ROOT / self.LOG_FILE

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = ["simple", "detailed"]
        v = v.lower()
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v


class StreamlitSettings(BaseSettings):
    """Streamlit-specific settings."""
    PAGE_LAYOUT: str = "centered"
    PAGE_ICON: str = "🛒"

    model_config = SettingsConfigDict(
        env_prefix="STREAMLIT_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("PAGE_LAYOUT")
    @classmethod
    def validate_layout(cls, v: str) -> str:
        valid_layouts = ["centered", "wide"]
        if v not in valid_layouts:
            raise ValueError(f"Layout must be one of: {', '.join(valid_layouts)}")
        return v


@lru_cache()
def get_settings() -> ProductListSettings:
    """Get cached settings instance."""
    return ProductListSettings()


@lru_cache()
def get_streamlit_settings() -> StreamlitSettings:
    """Get cached Streamlit settings instance."""
    return StreamlitSettings()


def clear_settings_cache() -> None:
    """Clear all settings caches to force reload from environment."""
    get_settings.cache_clear()
    get_streamlit_settings.cache_clear()
