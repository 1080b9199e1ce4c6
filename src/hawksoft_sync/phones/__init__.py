"""Phone normalization and extraction from client records."""

from hawksoft_sync.phones.models import PHONE_TYPES, PhoneEntry
from hawksoft_sync.phones.normalize import normalize_phone
from hawksoft_sync.phones.extractor import (
    extract_phone_entries,
    is_phone_contact,
    resolve_person_name,
)

__all__ = [
    "PHONE_TYPES",
    "PhoneEntry",
    "normalize_phone",
    "extract_phone_entries",
    "is_phone_contact",
    "resolve_person_name",
]
