import argparse
import asyncio
import csv
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
from loguru import logger
from langgraph.graph import StateGraph, START, END
from dotenv import load_dotenv

from graph.state import RefreshState
from graph.nodes.resolve import resolve
from graph.nodes.locate import locate, lead_found
from graph.nodes.update import update
from tools.closeio import CloseClient
from tools.config import RefreshConfig
from tools.scrapers_cache import ScrapersCacheClient

URL_COLUMN = "companyLinkedinUrl"


@dataclass(frozen=True)
class InputRecord:
    company_linkedin_url: str


@dataclass
class BatchReport:
    """Per-record outcomes of one batch run."""
    updated: List[str] = field(default_factory=list)
    not_found: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


def read_records(path: str) -> List[InputRecord]:
    """Read every company URL from the leads CSV, in file order."""
    records = []
    with open(path, newline="", encoding="utf-8-sig") as f:
        for line, row in enumerate(csv.DictReader(f), start=2):
            url = (row.get(URL_COLUMN) or "").strip()
            if not url:
                logger.warning(f"Skipping row {line}: no {URL_COLUMN}")
                continue
            records.append(InputRecord(company_linkedin_url=url))
    return records


def build_workflow(cache: ScrapersCacheClient, crm: CloseClient):
    """Build the per-lead refresh workflow."""
    workflow = StateGraph(RefreshState)

    async def resolve_node(state: RefreshState) -> RefreshState:
        return await resolve(state, cache)

    async def locate_node(state: RefreshState) -> RefreshState:
        return await locate(state, crm)

    async def update_node(state: RefreshState) -> RefreshState:
        return await update(state, crm)

    workflow.add_node("resolve", resolve_node)
    workflow.add_node("locate", locate_node)
    workflow.add_node("update", update_node)

    workflow.add_edge(START, "resolve")
    workflow.add_edge("resolve", "locate")

    # No lead means nothing to update
    workflow.add_conditional_edges(
        "locate",
        lead_found,
        {
            "update": "update",
            "skip": END
        }
    )
    workflow.add_edge("update", END)

    return workflow.compile()


async def refresh_company(workflow, profile_url: str) -> Dict[str, Any]:
    """Run the refresh workflow for one company URL."""
    initial_state = {
        "profile_url": profile_url,
        "errors": []
    }
    return await workflow.ainvoke(initial_state)


async def run_batch(records: Iterable[InputRecord], workflow) -> BatchReport:
    """
    Refresh every record in order, one at a time.

    A failing record is logged and never stops the batch.

    Args:
        records: Records to process
        workflow: Compiled refresh workflow

    Returns:
        Outcome of every record
    """
    records = list(records)
    total = len(records)
    report = BatchReport()

    for index, record in enumerate(records, start=1):
        url = record.company_linkedin_url
        logger.info(f"({index}/{total}) Updating {url}...")

        try:
            result = await refresh_company(workflow, url)

            if result.get("outcome") == "updated":
                logger.info(f"({index}/{total}) Successfully updated {url} : {result['status'].as_dict()}")
                report.updated.append(url)
            else:
                logger.warning(f"({index}/{total}) Lead not found for {url}")
                report.not_found.append(url)
        except Exception as e:
            logger.error(f"({index}/{total}) Could not update {url} because of error : {e}")
            report.failed.append(url)

    logger.info(
        f"Batch completed: {len(report.updated)} updated, "
        f"{len(report.not_found)} not found, {len(report.failed)} failed"
    )
    return report


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Refresh Close leads from cached LinkedIn company scrapes")
    parser.add_argument("--input", help="Leads CSV with a companyLinkedinUrl column (default: $LEADS_CSV or ./leads.csv)")
    parser.add_argument("--log-file", default="logs/closeio_refresh.log", help="Log file path")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    # Load environment variables
    load_dotenv()

    # Configure logging
    log_dir = os.path.dirname(args.log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    logger.add(args.log_file, rotation="1 day", retention="7 days", level="INFO")

    config = RefreshConfig.from_env()
    path = args.input or config.leads_csv

    logger.info(f"Starting Close lead refresh from {path}")
    records = read_records(path)

    workflow = build_workflow(ScrapersCacheClient(config), CloseClient(config))
    asyncio.run(run_batch(records, workflow))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
