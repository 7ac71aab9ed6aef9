from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from tools.scrapers_cache import ResolvedCompany


def find_included(document: Dict[str, Any], attribute: str) -> Optional[Dict[str, Any]]:
    """Return the first ``included`` element carrying a truthy ``attribute``."""
    for element in document.get("included") or []:
        if isinstance(element, dict) and element.get(attribute):
            return element
    return None


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


@dataclass
class CompanyProfile:
    """Fields the refresh reads out of the cached scrape documents.

    Absent data is ``None`` (or an empty list for locations).
    """
    employee_count: Optional[int] = None
    confirmed_locations: List[Dict[str, Any]] = field(default_factory=list)
    last_funding_round: Optional[Dict[str, Any]] = None
    description: Optional[str] = None
    industry: Optional[str] = None
    website: Optional[str] = None

    @classmethod
    def from_resolved(cls, company: ResolvedCompany) -> "CompanyProfile":
        basic = company.basic_profile
        extended = company.extended_profile

        locations = find_included(basic, "confirmedLocations")
        funding = find_included(basic, "fundingData")

        confirmed_locations = []
        if locations and isinstance(locations["confirmedLocations"], list):
            confirmed_locations = [loc for loc in locations["confirmedLocations"] if isinstance(loc, dict)]

        last_funding_round = None
        if funding and isinstance(funding["fundingData"], dict):
            last_funding_round = funding["fundingData"].get("lastFundingRound")
            if not isinstance(last_funding_round, dict):
                last_funding_round = None

        return cls(
            employee_count=extended.get("employeeCount") or None,
            confirmed_locations=confirmed_locations,
            last_funding_round=last_funding_round,
            description=_text(extended.get("description")),
            industry=_text(extended.get("industry")),
            website=_text(extended.get("website")),
        )
