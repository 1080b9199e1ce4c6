"""Async HawkSoft Partner API client.

Basic-auth credentials and the base URL are fixed at construction; callers
never pass credentials per request.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from hawksoft_sync.config import DEFAULT_REQUEST_TIMEOUT, Settings
from hawksoft_sync.exceptions import DecodeError, TransportError
from hawksoft_sync.hawksoft.models import ClientRecord
from hawksoft_sync.hawksoft.parser import parse_client_numbers, parse_client_record

logger = logging.getLogger(__name__)

API_VERSION = "3.0"
AS_OF_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_as_of(since: datetime) -> str:
    """Render ``since`` in UTC for the ``asOf`` query parameter.

    Naive datetimes are taken as local time.
    """
    return since.astimezone(timezone.utc).strftime(AS_OF_FORMAT)


class HawksoftClient:
    """Async client for the HawkSoft agency client endpoints.

    Use as an async context manager so the underlying connection pool is
    closed when the run ends.

    Args:
        base_url: API root, e.g. ``https://integration.hawksoft.app``.
        agency_id: Agency the vendor credentials are scoped to.
        user: Basic-auth user.
        password: Basic-auth password.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        agency_id: str,
        user: str,
        password: str,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._agency_id = agency_id
        self._timeout = timeout
        self._http = httpx.AsyncClient(
            auth=httpx.BasicAuth(user, password),
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HawksoftClient:
        return cls(
            base_url=settings.base_url,
            agency_id=settings.agency_id,
            user=settings.api_user,
            password=settings.api_password,
            timeout=settings.request_timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def agency_id(self) -> str:
        return self._agency_id

    async def __aenter__(self) -> HawksoftClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ---- Listing ----

    async def list_all_client_ids(self) -> list[int]:
        """Return every client number in the agency."""
        url = self._agency_url("clients")
        logger.info(f"Fetching all client numbers from: {url}")
        client_numbers = await self._get_client_numbers(url, {})
        logger.info(f"Retrieved {len(client_numbers)} client numbers")
        return client_numbers

    async def list_changed_client_ids(self, since: datetime) -> list[int]:
        """Return client numbers changed at or after ``since``."""
        url = self._agency_url("clients")
        as_of = format_as_of(since)
        logger.info(f"Fetching changed client numbers since {as_of} from: {url}")
        client_numbers = await self._get_client_numbers(url, {"asOf": as_of})
        logger.info(f"Retrieved {len(client_numbers)} changed client numbers")
        return client_numbers

    # ---- Detail ----

    async def get_client_record(self, client_number: int) -> ClientRecord | None:
        """Fetch one client's detail record; None if the API reports 404."""
        url = self._agency_url(f"client/{client_number}")
        logger.debug(f"Fetching client record for client {client_number}")

        response = await self._get(url, {})
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.warning(f"Client {client_number} not found")
            return None
        _raise_for_status(response, f"client {client_number}")

        try:
            record = parse_client_record(_json(response))
        except DecodeError as e:
            raise DecodeError(f"Invalid record for client {client_number}: {e}") from e

        logger.debug(f"Retrieved client record for client {client_number}")
        return record

    # ---- Internals ----

    def _agency_url(self, path: str) -> str:
        return f"{self._base_url}/vendor/agency/{self._agency_id}/{path}"

    async def _get(self, url: str, params: dict[str, str]) -> httpx.Response:
        try:
            # httpx timeouts are per phase; this bounds the whole request
            return await asyncio.wait_for(
                self._http.get(url, params={"version": API_VERSION, **params}),
                timeout=self._timeout,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise TransportError(f"Request timed out: {url}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed for {url}: {e}") from e

    async def _get_client_numbers(self, url: str, params: dict[str, str]) -> list[int]:
        response = await self._get(url, params)
        _raise_for_status(response, "client list")
        return parse_client_numbers(_json(response))


def _raise_for_status(response: httpx.Response, what: str) -> None:
    if response.is_success:
        return
    raise TransportError(
        f"Fetching {what} failed with HTTP {response.status_code}",
        status_code=response.status_code,
    )


def _json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e
