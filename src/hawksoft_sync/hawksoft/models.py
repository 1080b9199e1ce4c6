"""Data models for HawkSoft client payloads."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class ClientDetails:
    """The ``details`` block of a client record."""

    office_id: int | None = None
    client_type: str | None = None
    status: str | None = None
    is_personal: bool = False
    is_commercial: bool = False
    company_name: str | None = None
    agency_num: str | None = None
    client_since: datetime | None = None
    contact_info_last_updated: datetime | None = None
    id: str | None = None
    modified: datetime | None = None


@dataclass
class Person:
    """A named individual attached to a client."""

    id: str | None = None
    title: str | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    relationship: str | None = None
    date_of_birth: datetime | None = None
    gender: str | None = None
    occupation: str | None = None
    marital_status: str | None = None
    modified: datetime | None = None


@dataclass
class Contact:
    """One contact point (phone, email, ...) on a client record.

    ``person_id`` links to ``Person.id`` by value; it is None for
    client-level contacts.
    """

    type: str | None = None
    data: str | None = None
    person_id: str | None = None
    priority: int = 0
    id: str | None = None
    description: str | None = None
    allow_mass_email: bool = False
    is_billing_contact: bool = False
    modified: datetime | None = None


@dataclass
class ClientRecord:
    """A fetched client detail record."""

    client_number: int
    details: ClientDetails | None = None
    people: list[Person] | None = None
    contacts: list[Contact] | None = None
