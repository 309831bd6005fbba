"""Configuration management for the CoinGecko API key and settings.

Loads configuration from environment variables or .env file.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

DEFAULT_COINGECKO_BASE_URL = "https://api.coingecko.com/api/v3"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    """Parse an optional timeout in seconds; empty means no timeout."""
    if value is None or not value.strip():
        return None
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError("COINGECKO_TIMEOUT", f"not a number: {value!r}")


def _parse_origins(value: str) -> list[str]:
    """Parse a comma-separated CORS origins string into a clean list."""
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class APIConfig:
    """Runtime configuration for the market-data client and web app."""

    # CoinGecko demo API key, sent only with the markets listing call
    coingecko_api_key: Optional[str] = field(default=None, repr=False)

    coingecko_base_url: str = DEFAULT_COINGECKO_BASE_URL

    # None disables the HTTP timeout entirely
    request_timeout: Optional[float] = None

    cors_origins: list[str] = field(
        default_factory=lambda: _parse_origins(DEFAULT_CORS_ORIGINS)
    )

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Load configuration from environment variables."""
        return cls(
            coingecko_api_key=os.getenv("COINGECKO_API_KEY") or None,
            coingecko_base_url=os.getenv(
                "COINGECKO_BASE_URL", DEFAULT_COINGECKO_BASE_URL
            ).rstrip("/"),
            request_timeout=_parse_timeout(os.getenv("COINGECKO_TIMEOUT")),
            cors_origins=_parse_origins(
                os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
            ),
        )

    @classmethod
    def load(cls, env_file: Optional[Path] = None) -> "APIConfig":
        """
        Load configuration from .env file and environment variables.

        Args:
            env_file: Optional path to .env file. If not provided,
                      looks for .env in the project root.

        Returns:
            APIConfig instance with loaded values
        """
        if env_file:
            load_dotenv(env_file)
        else:
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        return cls.from_env()

    def has_coingecko(self) -> bool:
        """Check if the CoinGecko API key is configured."""
        return bool(self.coingecko_api_key)

    def require_coingecko_key(self) -> str:
        """Return the API key or raise if it is not configured."""
        if not self.coingecko_api_key:
            raise ConfigurationError(
                "COINGECKO_API_KEY",
                "must be set to serve the token listing",
            )
        return self.coingecko_api_key


# Global config instance (lazy loaded)
_config: Optional[APIConfig] = None


def get_config() -> APIConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = APIConfig.load()
    return _config


def reload_config(env_file: Optional[Path] = None) -> APIConfig:
    """Reload configuration from environment."""
    global _config
    _config = APIConfig.load(env_file)
    return _config
