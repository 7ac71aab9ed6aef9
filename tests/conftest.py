import json
import os
import sys
from typing import Any, Callable, Dict, List

import httpx
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tools.config import RefreshConfig

CACHE_BASE = "https://cache.test"
CLOSE_BASE = "https://close.test/api/v1"
PROFILE_URL = "https://www.linkedin.com/company/acme-corp/"


class FakeServices:
    """Serves canned cache and Close responses and records every request."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.cache: Dict[str, Any] = {}
        self.leads: List[Dict[str, Any]] = [{"id": "lead_abc"}]
        self.search_status = 200
        self.failing_fields: List[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)

        if url.startswith(CACHE_BASE):
            key = request.url.path.replace("/scrapers/", "", 1)
            if key not in self.cache:
                return httpx.Response(404, json={"message": f"No cache entry for {key}"})
            return httpx.Response(200, json={"data": self.cache[key]})

        if request.method == "GET" and request.url.path.endswith("/lead/"):
            if self.search_status != 200:
                return httpx.Response(self.search_status, json={"error": "boom"})
            return httpx.Response(200, json={"data": self.leads})

        if request.method == "PUT":
            body = json.loads(request.content)
            if any(field in body for field in self.failing_fields):
                return httpx.Response(400, json={"field-errors": {"x": "invalid"}})
            return httpx.Response(200, json={"id": "lead_abc", **body})

        return httpx.Response(500)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def updates(self) -> List[Dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests if r.method == "PUT"]

    def add_company(self, basic: Dict[str, Any], extended: Dict[str, Any],
                    tag: str = "acme-corp", normalized: str = "1234") -> None:
        basic.setdefault("data", {"*elements": [f"urn:li:fs_normalized_company:{normalized}"]})
        self.cache[f"linkedinCompany/{tag}"] = basic
        self.cache[f"salesNavigatorCompany/{normalized}"] = extended


@pytest.fixture
def config() -> RefreshConfig:
    return RefreshConfig(
        close_api_key="close_key",
        cache_token="cache_token",
        close_base_url=CLOSE_BASE,
        cache_base_url=CACHE_BASE,
    )


@pytest.fixture
def services() -> FakeServices:
    return FakeServices()
