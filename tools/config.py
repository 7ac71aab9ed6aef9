import os
from dataclasses import dataclass
from typing import Mapping, Optional
from loguru import logger

DEFAULT_CLOSE_BASE_URL = "https://api.close.com/api/v1"
DEFAULT_CACHE_BASE_URL = "https://scrapers-cache.herokuapp.com"


@dataclass(frozen=True)
class RefreshConfig:
    """Settings shared by the cache and Close clients, read once at startup."""
    close_api_key: str = ""
    cache_token: str = ""
    close_base_url: str = DEFAULT_CLOSE_BASE_URL
    cache_base_url: str = DEFAULT_CACHE_BASE_URL
    timeout: float = 20.0
    leads_csv: str = "./leads.csv"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RefreshConfig":
        """
        Build the configuration from environment variables.

        Call ``load_dotenv()`` first so values from a ``.env`` file are visible.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Populated configuration
        """
        env = os.environ if environ is None else environ

        config = cls(
            close_api_key=env.get("CLOSEIO_APIKEY", ""),
            cache_token=env.get("CACHE_TOKEN", ""),
            close_base_url=env.get("CLOSE_BASE_URL", DEFAULT_CLOSE_BASE_URL).rstrip("/"),
            cache_base_url=env.get("CACHE_BASE_URL", DEFAULT_CACHE_BASE_URL).rstrip("/"),
            timeout=_timeout(env.get("HTTP_TIMEOUT")),
            leads_csv=env.get("LEADS_CSV", "./leads.csv"),
        )

        if not config.close_api_key:
            logger.warning("No Close API key provided (CLOSEIO_APIKEY), CRM calls will be rejected")
        if not config.cache_token:
            logger.warning("No scrapers cache token provided (CACHE_TOKEN), cache calls will be rejected")

        return config


def _timeout(value: Optional[str]) -> float:
    """Parse HTTP_TIMEOUT, falling back to the default when unset or invalid."""
    default = RefreshConfig.timeout
    if not value:
        return default
    try:
        timeout = float(value)
    except ValueError:
        logger.warning(f"Invalid HTTP_TIMEOUT {value!r}, using {default} seconds")
        return default
    if timeout <= 0:
        logger.warning(f"HTTP_TIMEOUT must be positive, using {default} seconds")
        return default
    return timeout
