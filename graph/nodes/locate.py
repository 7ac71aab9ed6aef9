from typing import Any, Dict, Optional
from graph.state import RefreshState
from tools.closeio import CloseClient
from loguru import logger


def has_lead(lead: Optional[Dict[str, Any]]) -> bool:
    """A usable lead is one Close gave an id to."""
    return bool(lead) and bool(lead.get("id"))


async def locate(state: RefreshState, crm: CloseClient) -> RefreshState:
    """Find the Close lead to refresh."""
    lead = await crm.find_lead_by_linkedin_url(state["profile_url"])
    state["lead"] = lead

    if not has_lead(lead):
        logger.warning(f"No Close lead matches {state['profile_url']}, skipping updates")
        state["outcome"] = "lead_not_found"
    else:
        logger.info(f"Found Close lead {lead['id']}")

    return state


def lead_found(state: RefreshState) -> str:
    """Branch on whether a lead was located."""
    return "update" if has_lead(state.get("lead")) else "skip"
