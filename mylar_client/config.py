"""
Configuration management for the Mylar API client
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class MylarConfig(BaseSettings):
    """Client configuration with environment variable support."""

    # Mylar server settings
    mylar_url: str = ""
    mylar_api_key: str = ""
    mylar_timeout: Optional[float] = None  # Seconds; unset means the session default

    # Application settings
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    @property
    def is_configured(self) -> bool:
        """Check if both the server URL and API key are set."""
        return bool(self.mylar_url and self.mylar_api_key)


# Global configuration instance - lazily initialized to avoid import-time errors
_config = None


def get_config() -> MylarConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = MylarConfig()  # type: ignore
    return _config
