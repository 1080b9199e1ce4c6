"""Extract phone entries from fetched client records."""

from __future__ import annotations

import logging
from typing import Iterable

from hawksoft_sync.hawksoft.models import ClientRecord, Contact, Person
from hawksoft_sync.phones.models import PHONE_TYPES, PhoneEntry
from hawksoft_sync.phones.normalize import normalize_phone

logger = logging.getLogger(__name__)


def extract_phone_entries(records: Iterable[ClientRecord]) -> list[PhoneEntry]:
    """Flatten client records into phone entries.

    Order follows the records, then each record's contacts, as given.
    """
    entries: list[PhoneEntry] = []

    for record in records:
        if record.contacts is None:
            continue

        for contact in record.contacts:
            if not is_phone_contact(contact):
                continue

            person_name = resolve_person_name(record.people, contact.person_id)
            entry = PhoneEntry(
                client_number=record.client_number,
                phone_number=normalize_phone(contact.data),
                phone_type=contact.type,
                person_id=contact.person_id,
                person_name=person_name,
                priority=contact.priority,
                last_modified=contact.modified,
            )
            entries.append(entry)

            logger.debug(
                f"Extracted phone: Client {entry.client_number} - {entry.phone_type}: "
                f"{entry.phone_number} ({person_name or 'Client'})"
            )

    return entries


def is_phone_contact(contact: Contact) -> bool:
    """True for a recognized phone type carrying non-blank data."""
    return contact.type in PHONE_TYPES and bool(contact.data and contact.data.strip())


def resolve_person_name(people: list[Person] | None, person_id: str | None) -> str | None:
    """Display name of the first person whose id matches, if it has one."""
    if not person_id or not person_id.strip() or people is None:
        return None

    person = next((p for p in people if p.id == person_id), None)
    if person is None:
        return None

    names = [
        name for name in (person.first_name, person.last_name)
        if name and name.strip()
    ]
    return " ".join(names) if names else None
