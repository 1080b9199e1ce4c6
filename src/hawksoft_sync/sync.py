"""Phone number sync runs: full, incremental, and single client."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from hawksoft_sync.hawksoft.client import HawksoftClient
from hawksoft_sync.hawksoft.fetcher import BatchFetcher
from hawksoft_sync.phones.extractor import extract_phone_entries
from hawksoft_sync.phones.models import PhoneEntry

logger = logging.getLogger(__name__)

SUMMARY_EXAMPLES = 5


@dataclass
class SyncSummary:
    """Totals describing one sync result."""

    total_clients: int
    total_entries: int
    by_type: dict[str, int] = field(default_factory=dict)
    examples: list[PhoneEntry] = field(default_factory=list)


class PhoneSyncService:
    """Fetch client records and turn them into phone entries.

    Listing failures propagate; per-client failures during batch fetches are
    logged and skipped by the fetcher.
    """

    def __init__(self, client: HawksoftClient, fetcher: BatchFetcher | None = None):
        self._client = client
        self._fetcher = fetcher or BatchFetcher(client)

    async def sync_all(self) -> list[PhoneEntry]:
        logger.info("Starting full phone number sync")
        client_numbers = await self._client.list_all_client_ids()
        records = await self._fetcher.fetch_records(client_numbers)
        entries = extract_phone_entries(records)
        logger.info(f"Extracted {len(entries)} phone number mappings")
        return entries

    async def sync_changed(self, since: datetime) -> list[PhoneEntry]:
        logger.info(f"Starting incremental phone number sync since {since}")
        client_numbers = await self._client.list_changed_client_ids(since)
        records = await self._fetcher.fetch_records(client_numbers)
        entries = extract_phone_entries(records)
        logger.info(f"Extracted {len(entries)} changed phone number mappings")
        return entries

    async def sync_client(self, client_number: int) -> list[PhoneEntry]:
        logger.info(f"Starting phone number sync for client {client_number}")
        record = await self._client.get_client_record(client_number)
        if record is None:
            return []
        entries = extract_phone_entries([record])
        logger.info(
            f"Extracted {len(entries)} phone number mappings for client {client_number}"
        )
        return entries


def summarize(entries: Sequence[PhoneEntry]) -> SyncSummary:
    """Count distinct clients and entries per phone type."""
    return SyncSummary(
        total_clients=len({entry.client_number for entry in entries}),
        total_entries=len(entries),
        by_type=dict(Counter(entry.phone_type for entry in entries if entry.phone_type)),
        examples=list(entries[:SUMMARY_EXAMPLES]),
    )
