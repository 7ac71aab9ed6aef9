from dataclasses import dataclass, asdict
from typing import TypedDict, Optional, List, Dict, Any

from tools.profile import CompanyProfile
from tools.scrapers_cache import ResolvedCompany


@dataclass
class UpdateStatus:
    """Which field groups were written to Close for one lead."""
    fte: bool = False
    locations: bool = False
    funding: bool = False
    description: bool = False
    website: bool = False
    industry: bool = False

    def as_dict(self) -> Dict[str, bool]:
        return asdict(self)


class RefreshState(TypedDict, total=False):
    """State shape for refreshing one lead."""
    profile_url: str
    company: ResolvedCompany         # both cached scrape documents
    profile: CompanyProfile          # fields read out of them
    lead: Optional[Dict[str, Any]]   # matching Close lead
    status: UpdateStatus
    outcome: str                     # "updated" | "lead_not_found"
    errors: List[str]
