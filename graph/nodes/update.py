from typing import Dict, Any, Callable, List, Tuple
from graph.state import RefreshState, UpdateStatus
from tools.closeio import CloseClient
from tools.errors import CrmUpdateError
from tools.mappers import (
    DESCRIPTION_FIELD,
    INDUSTRY_FIELD,
    WEBSITE_FIELD,
    field_update,
    fte_update,
    funding_update,
    locations_update,
)
from tools.profile import CompanyProfile
from loguru import logger


def _planned_updates(profile: CompanyProfile) -> List[Tuple[str, Callable[[], Dict[str, Any]]]]:
    """Field groups with data to write, in update order."""
    planned = []
    if profile.employee_count:
        planned.append(("fte", lambda: fte_update(profile.employee_count)))
    if profile.confirmed_locations:
        planned.append(("locations", lambda: locations_update(profile.confirmed_locations)))
    if profile.last_funding_round is not None:
        planned.append(("funding", lambda: funding_update(profile.last_funding_round)))
    if profile.description:
        planned.append(("description", lambda: field_update(DESCRIPTION_FIELD, profile.description)))
    if profile.industry:
        planned.append(("industry", lambda: field_update(INDUSTRY_FIELD, profile.industry)))
    if profile.website:
        planned.append(("website", lambda: field_update(WEBSITE_FIELD, profile.website)))
    return planned


async def apply_updates(profile: CompanyProfile, lead: Dict[str, Any], crm: CloseClient) -> UpdateStatus:
    """
    Push every available field group to a Close lead.

    Each group is one update call. A failed call, or scraped data the
    mapper cannot read, is logged and leaves its flag unset without
    stopping the remaining groups.

    Args:
        profile: Fields read from the cached scrape documents
        lead: Close lead to update
        crm: Close client

    Returns:
        Per-group success flags
    """
    status = UpdateStatus()

    for group, build in _planned_updates(profile):
        try:
            await crm.update_lead(lead["id"], build())
            setattr(status, group, True)
        except (CrmUpdateError, AttributeError, KeyError, TypeError) as e:
            logger.warning(f"Could not update {group} because : {e}")

    return status


async def update(state: RefreshState, crm: CloseClient) -> RefreshState:
    """Write the resolved company fields onto the located lead."""
    status = await apply_updates(state["profile"], state["lead"], crm)
    state["status"] = status
    state["outcome"] = "updated"

    failed = [group for group, _ in _planned_updates(state["profile"]) if not getattr(status, group)]
    if failed:
        state.setdefault("errors", []).extend(f"update_failed: {group}" for group in failed)

    return state
