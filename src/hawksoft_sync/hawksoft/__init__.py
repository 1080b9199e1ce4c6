"""HawkSoft Partner API client, payload models and batch fetcher."""

from hawksoft_sync.hawksoft.models import ClientDetails, ClientRecord, Contact, Person
from hawksoft_sync.hawksoft.parser import parse_client_numbers, parse_client_record
from hawksoft_sync.hawksoft.client import HawksoftClient
from hawksoft_sync.hawksoft.fetcher import BatchFetcher, FetchOutcome

__all__ = [
    "ClientDetails",
    "ClientRecord",
    "Contact",
    "Person",
    "parse_client_numbers",
    "parse_client_record",
    "HawksoftClient",
    "BatchFetcher",
    "FetchOutcome",
]
