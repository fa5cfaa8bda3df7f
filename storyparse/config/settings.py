"""Configuration management using Pydantic."""
from pathlib import Path
from typing import Any, Dict
from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml

from .constants import (
    DEFAULT_FORMAT,
    DEFAULT_JSON_LENGTH_CEILING,
    DEFAULT_LOG_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_PREVIEW_CHARS,
    DEFAULT_LOG_RETENTION_DAYS,
    DEFAULT_MIN_SUMMARY_LENGTH,
    FORMAT_HINTS,
    LOG_LEVELS,
    PROJECT_CONFIG_FILE,
    USER_CONFIG_FILE,
)


class Settings(BaseSettings):
    """Parser settings loaded from environment and config files."""

    model_config = SettingsConfigDict(
        env_prefix="STORYPARSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Format detection
    json_length_ceiling: int = Field(
        default=DEFAULT_JSON_LENGTH_CEILING,
        gt=0,
        description="Responses at or above this length are never treated as JSON by auto-detection"
    )
    default_format: str = Field(
        default=DEFAULT_FORMAT,
        description="Format hint used by the CLI when none is given: 'json', 'text' or 'auto'"
    )

    # Text extraction
    min_summary_length: int = Field(
        default=DEFAULT_MIN_SUMMARY_LENGTH,
        ge=0,
        description="Minimum length an unlabelled line must exceed to be used as a chapter summary"
    )

    # Logging
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(
        default=DEFAULT_LOG_DIR,
        description="Directory for log files"
    )
    log_retention_days: int = Field(
        default=DEFAULT_LOG_RETENTION_DAYS,
        ge=0,
        description="Days to keep old log files"
    )
    log_preview_chars: int = Field(
        default=DEFAULT_LOG_PREVIEW_CHARS,
        gt=0,
        description="How much of a failed JSON candidate to include in diagnostics"
    )

    @field_validator('default_format')
    @classmethod
    def validate_default_format(cls, v: str) -> str:
        """Validate the default format hint."""
        v = v.lower()
        if v not in FORMAT_HINTS:
            raise ValueError(f"Format must be one of: {', '.join(FORMAT_HINTS)}")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level."""
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
        return v

    @field_validator('log_dir')
    @classmethod
    def expand_log_dir(cls, v: Path) -> Path:
        """Expand the log directory; setup_logging creates it when logging starts."""
        return Path(v).expanduser().resolve()

    def load_config_file(self, config_path: Path) -> None:
        """Load additional settings from a YAML config file."""
        if config_path.exists():
            with open(config_path, encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}

            # Update settings with config file data
            for key, value in config_data.items():
                if key in type(self).model_fields:
                    setattr(self, key, value)

    def save_config_file(self, config_path: Path) -> None:
        """Save current settings to a YAML config file."""
        config_data = self.to_config_dict()

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config_data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    def to_config_dict(self) -> Dict[str, Any]:
        """Settings as plain values suitable for YAML."""
        return {
            'json_length_ceiling': self.json_length_ceiling,
            'default_format': self.default_format,
            'min_summary_length': self.min_summary_length,
            'log_level': self.log_level,
            'log_dir': str(self.log_dir),
            'log_retention_days': self.log_retention_days,
            'log_preview_chars': self.log_preview_chars,
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()

    # Load user config if it exists
    if USER_CONFIG_FILE.exists():
        settings.load_config_file(USER_CONFIG_FILE)

    # Load project config if it exists
    if PROJECT_CONFIG_FILE.exists():
        settings.load_config_file(PROJECT_CONFIG_FILE)

    return settings
