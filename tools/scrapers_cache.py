import re
import httpx
from dataclasses import dataclass
from typing import Dict, Any, Optional
from loguru import logger

from tools.config import RefreshConfig
from tools.errors import MalformedUrlError, CacheLookupError

COMPANY_URL_PATTERN = re.compile(r"linkedin\.com/company/([^/?#]+)")
NORMALIZED_COMPANY_PATTERN = re.compile(r"urn:li:fs_normalized_company:(.+)")

LINKEDIN_COMPANY_SCRAPER = "linkedinCompany"
SALES_NAVIGATOR_COMPANY_SCRAPER = "salesNavigatorCompany"


@dataclass(frozen=True)
class ProfileKey:
    primary_tag: str
    secondary_tag: str


@dataclass
class ResolvedCompany:
    """Both cached scrape documents for one company."""
    key: ProfileKey
    basic_profile: Dict[str, Any]
    extended_profile: Dict[str, Any]


def extract_company_tag(profile_url: str) -> str:
    """Return the path segment following ``/company/`` in a LinkedIn URL."""
    match = COMPANY_URL_PATTERN.search(profile_url or "")
    if not match:
        raise MalformedUrlError(profile_url)
    return match.group(1)


def extract_normalized_company_tag(basic_profile: Dict[str, Any]) -> str:
    """Return the normalized company id referenced by the basic profile."""
    try:
        urn = basic_profile["data"]["*elements"][0]
    except (KeyError, IndexError, TypeError):
        raise CacheLookupError("Basic profile has no normalized company reference")

    match = NORMALIZED_COMPANY_PATTERN.search(str(urn))
    if not match:
        raise CacheLookupError(f"Unexpected normalized company reference: {urn}")
    return match.group(1)


class ScrapersCacheClient:
    """Client for the scrapers cache service holding LinkedIn scrape results."""

    def __init__(self, config: RefreshConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = config.cache_base_url
        self.token = config.cache_token
        self.timeout = config.timeout
        self.transport = transport

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for cache requests."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Basic {self.token}"
        }

    async def get_cached_data(self, scraper_tag: str, history_tag: str) -> Dict[str, Any]:
        """
        Fetch one cached scrape document.

        Args:
            scraper_tag: Scraper that produced the document
            history_tag: Key of the document within that scraper

        Returns:
            The ``data`` member of the response body
        """
        url = f"{self.base_url}/scrapers/{scraper_tag}/{history_tag}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, headers=self._get_headers())
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as e:
            upstream = _error_message(e.response)
            if upstream:
                raise CacheLookupError(f"Scraper cache error : {upstream}", upstream) from e
            raise CacheLookupError(f"Scraper cache error : {e}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise CacheLookupError(f"Scraper cache error : {e}") from e

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise CacheLookupError(f"Scraper cache returned no data for {scraper_tag}/{history_tag}")
        return data


def _error_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    return body.get("message") if isinstance(body, dict) else None


async def resolve_company(profile_url: str, cache: ScrapersCacheClient) -> ResolvedCompany:
    """
    Fetch the basic and extended cached profiles of a company.

    The extended profile is keyed by an id found inside the basic profile,
    so the two lookups run one after the other.

    Args:
        profile_url: LinkedIn company page URL
        cache: Scrapers cache client

    Returns:
        Both documents and the keys used to fetch them
    """
    primary_tag = extract_company_tag(profile_url)
    logger.info(f"Fetching cached company profile for {primary_tag}")
    basic_profile = await cache.get_cached_data(LINKEDIN_COMPANY_SCRAPER, primary_tag)

    secondary_tag = extract_normalized_company_tag(basic_profile)
    extended_profile = await cache.get_cached_data(SALES_NAVIGATOR_COMPANY_SCRAPER, secondary_tag)

    return ResolvedCompany(
        key=ProfileKey(primary_tag=primary_tag, secondary_tag=secondary_tag),
        basic_profile=basic_profile,
        extended_profile=extended_profile,
    )
