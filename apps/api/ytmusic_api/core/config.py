"""Configuration Management System

Provides a centralized configuration for the YouTube Music API proxy.
Handles configuration for all service components including:

Core Components:
- Service metadata and CORS
- Upstream client identity (client name/version, browser, user agent)
- Logging paths and levels

Features:
- Environment-based configuration with `.env` override support
- Type validation and enforcement
- Dynamic path resolution

Example:
    from ytmusic_api.core.config import settings

    # Access configuration values
    version = settings.VERSION
    base_url = settings.YTM_BASE_URL
"""

from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration management service."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # API settings
    VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: str = "*"

    # Base directory for resolving relative paths
    BASE_DIR: Path = Path(__file__).parent.parent.parent

    # Logging settings
    LOG_DIR: str = "logs"  # Default if env var not set
    LOG_LEVEL: str = "INFO"  # Default log level

    # Upstream (YouTube Music internal API)
    YTM_BASE_URL: str = "https://music.youtube.com/youtubei/v1"
    YTM_CLIENT_NAME: str = "WEB_REMIX"
    YTM_CLIENT_VERSION: str = "1.20260209.03.00"
    YTM_BROWSER_NAME: str = "Chrome"
    YTM_BROWSER_VERSION: str = "144.0.0.0"
    YTM_USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/144.0.0.0 Safari/537.36"
    )
    # None keeps the transport default
    YTM_TIMEOUT_SECONDS: Optional[float] = None

    def __init__(self, **kwargs):
        """Initialize settings and create required directories."""
        super().__init__(**kwargs)

        self.log_dir_path.mkdir(parents=True, exist_ok=True)

    @property
    def log_dir_path(self) -> Path:
        """Resolve log directory path.

        Returns absolute path based on LOG_DIR environment variable.
        If LOG_DIR is absolute, uses it directly.
        If relative, resolves from BASE_DIR.
        """
        path = Path(self.LOG_DIR)
        return path if path.is_absolute() else self.BASE_DIR / path

    @property
    def cors_origins_list(self) -> List[str]:
        """Split CORS_ORIGINS into a list; "*" allows every origin."""
        origins = [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]
        return origins or ["*"]


# Initialize global settings
settings = Settings()
