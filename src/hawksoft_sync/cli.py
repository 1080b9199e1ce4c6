"""Command-line entry point for hawksoft-sync."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Optional

import dateutil.parser as parser
import typer
from rich.console import Console
from rich.table import Table

from hawksoft_sync.config import Settings, load_settings
from hawksoft_sync.exceptions import ConfigError, HawksoftSyncError
from hawksoft_sync.export.writer import export_entries
from hawksoft_sync.hawksoft.client import HawksoftClient
from hawksoft_sync.hawksoft.fetcher import BatchFetcher
from hawksoft_sync.logging_setup import setup_logging
from hawksoft_sync.phones.models import PhoneEntry
from hawksoft_sync.sync import PhoneSyncService, SyncSummary, summarize

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK = timedelta(days=7)

EPILOG = (
    "Environment variables required: BASE_URL, AGENCY_ID, API_USER, API_PASS "
    "(read from .env when present).\n\n"
    "Examples:\n\n"
    "  hawksoft-sync --mode Full --output phone_numbers.json\n\n"
    "  hawksoft-sync --mode Incremental --since 2025-01-01 --output changes.csv\n\n"
    "  hawksoft-sync --mode SingleClient --client 123 --output client_123.json"
)

app = typer.Typer(
    name="hawksoft-sync",
    help="Sync HawkSoft client phone numbers to customer numbers.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


class SyncMode(str, Enum):
    FULL = "Full"
    INCREMENTAL = "Incremental"
    SINGLE_CLIENT = "SingleClient"


def build_client(settings: Settings) -> HawksoftClient:
    return HawksoftClient.from_settings(settings)


def parse_since(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return parser.parse(value)
    except (ValueError, OverflowError) as e:
        raise typer.BadParameter(f"Invalid date: {value!r}", param_hint="--since") from e


@app.command(epilog=EPILOG)
def main(
    ctx: typer.Context,
    mode: SyncMode = typer.Option(
        SyncMode.FULL,
        "--mode",
        "-m",
        case_sensitive=False,
        help="Sync mode: Full, Incremental, or SingleClient",
    ),
    since: Optional[str] = typer.Option(
        None,
        "--since",
        "-s",
        help="For incremental sync: sync changes since this date (default: 7 days ago)",
    ),
    client: Optional[int] = typer.Option(
        None,
        "--client",
        "-c",
        help="For single client sync: client number to sync",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (.json or .csv)",
    ),
):
    """Sync phone numbers to customer numbers and optionally export them."""
    setup_logging()
    since_at = parse_since(since)

    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    logger.info("Hawksoft Data Sync Started")

    if mode is SyncMode.SINGLE_CLIENT and client is None:
        logger.error("Client number is required for single client sync")
        typer.echo(ctx.get_help())
        return

    try:
        entries = asyncio.run(_run(settings, mode, since_at, client))
        print_summary(summarize(entries))
        if output is not None:
            export_entries(entries, output)
    except HawksoftSyncError as e:
        logger.error(f"An error occurred during sync: {e}")
        raise typer.Exit(1)

    logger.info("Hawksoft Data Sync Completed Successfully")


async def _run(
    settings: Settings,
    mode: SyncMode,
    since: Optional[datetime],
    client_number: Optional[int],
) -> list[PhoneEntry]:
    async with build_client(settings) as client:
        fetcher = BatchFetcher(
            client,
            batch_size=settings.batch_size,
            delay=settings.batch_delay,
        )
        service = PhoneSyncService(client, fetcher)

        if mode is SyncMode.INCREMENTAL:
            since = since or datetime.now() - DEFAULT_LOOKBACK
            logger.info(f"Running incremental sync since {since}")
            return await service.sync_changed(since)
        if mode is SyncMode.SINGLE_CLIENT:
            logger.info(f"Running single client sync for client {client_number}")
            return await service.sync_client(client_number)
        logger.info("Running full sync")
        return await service.sync_all()


def print_summary(summary: SyncSummary) -> None:
    console.print("\n[bold]Phone Number Sync Summary[/bold]")
    console.print(f"  Total Clients with Phone Numbers: {summary.total_clients}")
    console.print(f"  Total Phone Number Entries: {summary.total_entries}")

    if summary.by_type:
        table = Table(title="By Phone Type")
        table.add_column("Type", style="cyan")
        table.add_column("Count", justify="right")
        for phone_type, count in summary.by_type.items():
            table.add_row(phone_type, str(count))
        console.print(table)

    if summary.examples:
        table = Table(title="Examples")
        table.add_column("Client", justify="right")
        table.add_column("Type", style="cyan")
        table.add_column("Phone")
        table.add_column("Person", style="dim")
        for entry in summary.examples:
            table.add_row(
                str(entry.client_number),
                entry.phone_type,
                entry.phone_number or "",
                entry.person_name or "Client",
            )
        console.print(table)


if __name__ == "__main__":
    app()
