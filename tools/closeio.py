import httpx
from typing import Dict, Any, Optional
from loguru import logger

from tools.config import RefreshConfig
from tools.errors import CrmLookupError, CrmUpdateError


class CloseClient:
    """Close CRM integration client."""

    def __init__(self, config: RefreshConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = config.close_api_key
        self.base_url = config.close_base_url
        self.timeout = config.timeout
        self.transport = transport

    def _get_auth(self) -> httpx.BasicAuth:
        """Close authenticates with the API key as the basic auth username."""
        return httpx.BasicAuth(self.api_key, "")

    async def find_lead_by_linkedin_url(self, linkedin_url: str) -> Optional[Dict[str, Any]]:
        """
        Find the lead whose LinkedIn company field matches a profile URL.

        Lookup failures are logged and reported as no match.

        Args:
            linkedin_url: LinkedIn company page URL

        Returns:
            First matching lead or None
        """
        try:
            return await self._search_lead(f'linkedin_company:"{linkedin_url}"')
        except CrmLookupError as e:
            logger.error(f"Lead search failed: {e}")
            return None

    async def _search_lead(self, query: str) -> Optional[Dict[str, Any]]:
        """Run a lead search query and return the first result."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    f"{self.base_url}/lead/",
                    params={"query": query},
                    auth=self._get_auth()
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise CrmLookupError(str(e)) from e

        results = data.get("data") if isinstance(data, dict) else None
        return results[0] if results else None

    async def update_lead(self, lead_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update some fields of an existing lead.

        Args:
            lead_id: Close lead id
            fields: Field name (or ``custom.<id>`` key) to new value

        Returns:
            Updated lead as returned by Close
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.put(
                    f"{self.base_url}/lead/{lead_id}/",
                    json=fields,
                    auth=self._get_auth()
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise CrmUpdateError(lead_id, f"{e.response.status_code} {e.response.text}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise CrmUpdateError(lead_id, str(e)) from e
