"""Batched concurrent fetching of client detail records.

Ids are split into contiguous fixed-size batches. Each batch is fetched
concurrently and fully joined before the next one starts, with a short
pause in between to bound the request rate. A failed fetch drops that one
client; it never aborts the run.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence

from hawksoft_sync.config import DEFAULT_BATCH_DELAY, DEFAULT_BATCH_SIZE
from hawksoft_sync.exceptions import HawksoftError
from hawksoft_sync.hawksoft.client import HawksoftClient
from hawksoft_sync.hawksoft.models import ClientRecord

logger = logging.getLogger(__name__)


@dataclass
class FetchOutcome:
    """Result of one detail fetch: a record, absence (404), or an error."""

    client_number: int
    record: ClientRecord | None = None
    error: HawksoftError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class BatchFetcher:
    """Drive ``HawksoftClient.get_client_record`` over many client numbers.

    Args:
        client: Gateway used for each detail fetch.
        batch_size: Number of concurrent requests per batch.
        delay: Seconds to wait between batches (not after the last).
        sleep: Awaitable sleep, replaceable in tests.
    """

    def __init__(
        self,
        client: HawksoftClient,
        batch_size: int = DEFAULT_BATCH_SIZE,
        delay: float = DEFAULT_BATCH_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")
        self._client = client
        self.batch_size = batch_size
        self.delay = delay
        self._sleep = sleep

    async def fetch_records(self, client_numbers: Sequence[int]) -> list[ClientRecord]:
        """Fetch every client record, skipping not-found and failed ids."""
        total = len(client_numbers)
        records: list[ClientRecord] = []
        failures = 0

        logger.info(f"Fetching detailed records for {total} clients")

        for start in range(0, total, self.batch_size):
            batch = client_numbers[start:start + self.batch_size]
            outcomes = await asyncio.gather(*(self._fetch_one(n) for n in batch))

            for outcome in outcomes:
                if outcome.failed:
                    failures += 1
                elif outcome.record is not None:
                    records.append(outcome.record)

            done = min(start + self.batch_size, total)
            logger.info(f"Processed batch {done}/{total}")

            if done < total:
                await self._sleep(self.delay)

        if failures:
            logger.error(f"{failures} of {total} client records failed to fetch")
        logger.info(f"Successfully retrieved {len(records)} client records")
        return records

    async def _fetch_one(self, client_number: int) -> FetchOutcome:
        try:
            record = await self._client.get_client_record(client_number)
        except HawksoftError as e:
            logger.error(f"Failed to fetch client {client_number}: {e}")
            return FetchOutcome(client_number, error=e)
        return FetchOutcome(client_number, record=record)
