"""
Configuration management for banner roster extraction.

Loads settings from environment variables and config file, with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BANNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    fetch_timeout: float = Field(default=10.0, description="Wiki fetch timeout in seconds")
    user_agent: str = Field(
        default="banner-roster/0.1 (+https://github.com/banner-roster/banner-roster)",
        description="User-Agent sent with every wiki request",
    )
    accept_language: str = Field(
        default="en-US,en;q=0.9,th;q=0.8",
        description="Accept-Language sent with every wiki request",
    )
    log_level: str = Field(default="INFO", description="Logging level")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    global _settings
    _settings = Settings()
    return _settings
