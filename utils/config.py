"""Configuration management for the catalog API and its clients.

Provides:
- Config: base class that reports its public settings as a dict
- AppConfig: server settings read from ``APP_*`` environment variables
- ClientConfig: client settings read from ``CATALOG_*`` environment variables
"""

import os as _os
from pathlib import Path
from typing import Any, Dict

DEFAULT_DATA_PATH = Path("data") / "items.json"
DEFAULT_PAGE_SIZE = 50


class Config:
    """Base configuration class for organizing application settings."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary.

        Returns:
            Dictionary of all public config attributes, paths as strings
        """
        return {
            k: str(v) if isinstance(v, Path) else v
            for k, v in self.__dict__.items()
            if not k.startswith("_")
        }


class AppConfig(Config):
    """Application-level configuration loaded from environment variables.

    All env vars have defaults so the server works out of the box.

    Environment variables:
        APP_DATA_PATH: Path to the items JSON file (default: data/items.json)
        APP_PORT: API server port (default: 3001)
        APP_HOST: API server bind address (default: 127.0.0.1)
        APP_LOG_FORMAT: Logging format, "text" or "json" (default: text)
        APP_CORS_ORIGINS: Comma-separated allowed origins (default: *)
        APP_DEFAULT_PAGE_SIZE: Page size when ``limit`` is omitted (default: 50)
    """

    def __init__(self) -> None:
        super().__init__()
        self.data_path = Path(_os.getenv("APP_DATA_PATH", str(DEFAULT_DATA_PATH)))
        self.api_port = int(_os.getenv("APP_PORT", "3001"))
        self.api_host = _os.getenv("APP_HOST", "127.0.0.1")
        self.log_format = _os.getenv("APP_LOG_FORMAT", "text")
        raw_origins = _os.getenv("APP_CORS_ORIGINS", "*")
        self.cors_origins: list[str] = (
            ["*"] if raw_origins == "*"
            else [o.strip() for o in raw_origins.split(",") if o.strip()]
        )
        self.default_page_size = int(
            _os.getenv("APP_DEFAULT_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))
        )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create an AppConfig instance populated from environment variables."""
        return cls()


class ClientConfig(Config):
    """Settings for CatalogClient and the command-line browser.

    Environment variables:
        CATALOG_API_URL: Base URL of the API (default: http://localhost:3001/api)
        CATALOG_TIMEOUT: Request timeout in seconds (default: 10)
        CATALOG_FETCH_LIMIT: Page size requested by fetch_items (default: 500)
    """

    def __init__(self) -> None:
        super().__init__()
        self.api_url = _os.getenv("CATALOG_API_URL", "http://localhost:3001/api")
        self.timeout_seconds = float(_os.getenv("CATALOG_TIMEOUT", "10"))
        self.fetch_limit = int(_os.getenv("CATALOG_FETCH_LIMIT", "500"))

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return cls()
