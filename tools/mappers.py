"""Builders for the bodies of Close lead update requests.

Every function is pure: it only turns scraped values into a field mapping.
"""
from typing import Dict, Any, List

FTE_FIELD = "custom.lcf_CpqzI0t50mc3P052ZlAy9YAx2iC2ofOPDUNUHPHCcrG"
FUNDING_AMOUNT_FIELD = "custom.lcf_9Z3LDpeub9fpLx6G7r9g2EGw0yTzAcH39giBGTWkZRk"
FUNDING_DATE_FIELD = "custom.lcf_h0rUN4DUjTKmNgyTvX6ViHyW7K0oSel4kQuNKaPnj4z"
FUNDING_TYPE_FIELD = "custom.lcf_5X1PGJB0YSCBO9wVW833wFnVHz59PvnnWD0pfjmwdxh"
INDUSTRY_FIELD = "custom.lcf_rbpfN3AmrbcLW9OjmSFEXc6qfYt5OXXBwiuhvGX8JsZ"

DESCRIPTION_FIELD = "description"
WEBSITE_FIELD = "url"

AMOUNT_NOT_FOUND = "Not Found"


def fte_update(employee_count: int) -> Dict[str, Any]:
    return {FTE_FIELD: employee_count}


def to_address(location: Dict[str, Any]) -> Dict[str, Any]:
    """Map one scraped location onto a Close address."""
    return {
        "address_1": location.get("line1"),
        "address_2": location.get("line2") or "",
        "city": location.get("city"),
        "state": location.get("geographicArea") or "",
        "zipcode": location.get("postalCode") or "",
        "country": location.get("country"),
    }


def locations_update(locations: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"addresses": [to_address(location) for location in locations]}


def format_funding_type(funding_type: str) -> str:
    """
    Turn a scraped funding type into the label used in Close.

    ``"seed"`` becomes ``"Seed"`` and ``"series_unknown"`` becomes
    ``"Venture - Series Unknown"``.
    """
    label = (funding_type or "").lower().capitalize().replace("_", " ")
    return label.replace("Series unknown", "Venture - Series Unknown")


def format_announced_on(announced_on: Dict[str, Any]) -> str:
    """Render an ``{day, month, year}`` date as month/day/year."""
    if not announced_on:
        return ""
    return f"{announced_on.get('month')}/{announced_on.get('day')}/{announced_on.get('year')}"


def funding_update(last_funding_round: Dict[str, Any]) -> Dict[str, Any]:
    money_raised = last_funding_round.get("moneyRaised")
    amount = money_raised.get("amount") if money_raised else AMOUNT_NOT_FOUND

    return {
        FUNDING_AMOUNT_FIELD: amount,
        FUNDING_DATE_FIELD: format_announced_on(last_funding_round.get("announcedOn")),
        FUNDING_TYPE_FIELD: format_funding_type(last_funding_round.get("fundingType")),
    }


def field_update(field: str, value: Any) -> Dict[str, Any]:
    return {field: value}
