"""
Configuration management using pydantic-settings.
Loads from config.yaml, .env, and environment variables.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file at module import
load_dotenv()


class OutputSettings(BaseSettings):
    """Default output options for commands."""

    model_config = SettingsConfigDict(
        env_prefix="PRINTFLAGS_OUTPUT_",
        extra="ignore",
    )

    format: str = Field(default="", description="Default --output format ('' = success message)")
    dry_run: bool = Field(default=False, description="Report operations as dry runs by default")


class LoggingSettings(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="PRINTFLAGS_LOG_",
        extra="ignore",
    )

    level: str = Field(default="warning", description="Console log level")
    file: Path | None = Field(default=None, description="Optional log file path")
    use_rich: bool = Field(default=True, description="Use Rich console handler")

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        value = value.lower()
        if value not in ("debug", "info", "warning", "error", "critical"):
            raise ValueError(f"Unknown log level: {value}")
        return value


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Settings":
        """Load settings from config.yaml and environment."""
        config_data: dict[str, Any] = {}

        if config_path is None:
            config_path = Path("config.yaml")

        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                yaml_content: Any = yaml.safe_load(f)
                yaml_config: dict[str, Any] = yaml_content or {}

            if "output" in yaml_config:
                config_data["output"] = OutputSettings(**yaml_config["output"])  # type: ignore
            if "logging" in yaml_config:
                config_data["logging"] = LoggingSettings(**yaml_config["logging"])  # type: ignore

            unknown = set(yaml_config) - {"output", "logging"}
            if unknown:
                logging.getLogger(__name__).warning(
                    "Ignoring unknown sections in %s: %s", config_path, ", ".join(sorted(unknown))
                )

        return cls(**config_data)  # type: ignore


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Path | None = None) -> Settings:
    """Reload settings from config."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
