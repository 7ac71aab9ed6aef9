from graph.state import RefreshState
from tools.profile import CompanyProfile
from tools.scrapers_cache import ScrapersCacheClient, resolve_company
from loguru import logger


async def resolve(state: RefreshState, cache: ScrapersCacheClient) -> RefreshState:
    """Load the cached scrape documents for the lead's company."""
    logger.info(f"Resolving company profile: {state.get('profile_url', 'unknown')}")

    company = await resolve_company(state["profile_url"], cache)
    state["company"] = company
    state["profile"] = CompanyProfile.from_resolved(company)

    logger.info(f"Resolved {company.key.primary_tag} ({company.key.secondary_tag})")
    return state
