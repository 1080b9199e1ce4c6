"""Parse HawkSoft API JSON payloads into client models.

Pure functions, no network calls. Object keys are matched
case-insensitively since the API does not guarantee their casing.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

import dateutil.parser as parser

from hawksoft_sync.exceptions import DecodeError
from hawksoft_sync.hawksoft.models import ClientDetails, ClientRecord, Contact, Person


def parse_client_numbers(payload: Any) -> list[int]:
    """Validate a client-list payload; ``null`` decodes to an empty list."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a list of client numbers, got {type(payload).__name__}")
    for item in payload:
        if not _is_int(item):
            raise DecodeError(f"Client number is not an integer: {item!r}")
    return list(payload)


def parse_client_record(payload: Any) -> ClientRecord:
    """Build a ClientRecord from a client detail payload."""
    obj = _as_object(payload, "client record")

    client_number = obj.get("clientnumber")
    if not _is_int(client_number):
        raise DecodeError(f"Client record has no integer clientNumber: {client_number!r}")

    details = obj.get("details")
    return ClientRecord(
        client_number=client_number,
        details=_parse_details(details) if details is not None else None,
        people=_parse_list(obj.get("people"), _parse_person, "people"),
        contacts=_parse_list(obj.get("contacts"), _parse_contact, "contacts"),
    )


def _parse_details(raw: Any) -> ClientDetails:
    obj = _as_object(raw, "details")
    office_id = obj.get("officeid")
    if office_id is not None and not _is_int(office_id):
        raise DecodeError(f"officeId is not an integer: {office_id!r}")
    return ClientDetails(
        office_id=office_id,
        client_type=_text(obj, "clienttype"),
        status=_text(obj, "status"),
        is_personal=bool(obj.get("ispersonal")),
        is_commercial=bool(obj.get("iscommercial")),
        company_name=_text(obj, "companyname"),
        agency_num=_text(obj, "agencynum"),
        client_since=_timestamp(obj, "clientsince"),
        contact_info_last_updated=_timestamp(obj, "contactinfolastupdated"),
        id=_text(obj, "id"),
        modified=_timestamp(obj, "modified"),
    )


def _parse_person(raw: Any) -> Person:
    obj = _as_object(raw, "person")
    return Person(
        id=_text(obj, "id"),
        title=_text(obj, "title"),
        first_name=_text(obj, "firstname"),
        middle_name=_text(obj, "middlename"),
        last_name=_text(obj, "lastname"),
        relationship=_text(obj, "relationship"),
        date_of_birth=_timestamp(obj, "dateofbirth"),
        gender=_text(obj, "gender"),
        occupation=_text(obj, "occupation"),
        marital_status=_text(obj, "maritalstatus"),
        modified=_timestamp(obj, "modified"),
    )


def _parse_contact(raw: Any) -> Contact:
    obj = _as_object(raw, "contact")
    priority = obj.get("priority")
    if priority is None:
        priority = 0
    elif not _is_int(priority):
        raise DecodeError(f"Contact priority is not an integer: {priority!r}")
    return Contact(
        type=_text(obj, "type"),
        data=_text(obj, "data"),
        person_id=_text(obj, "personid"),
        priority=priority,
        id=_text(obj, "id"),
        description=_text(obj, "description"),
        allow_mass_email=bool(obj.get("allowmassemail")),
        is_billing_contact=bool(obj.get("isbillingcontact")),
        modified=_timestamp(obj, "modified"),
    )


def _parse_list(raw: Any, parse_item, what: str) -> list | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise DecodeError(f"Expected a list for {what}, got {type(raw).__name__}")
    return [parse_item(item) for item in raw]


def _as_object(raw: Any, what: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise DecodeError(f"Expected an object for {what}, got {type(raw).__name__}")
    # First spelling wins when keys differ only by case
    lowered: dict[str, Any] = {}
    for key, value in raw.items():
        lowered.setdefault(str(key).lower(), value)
    return lowered


def _text(obj: dict[str, Any], key: str) -> str | None:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"Expected a string for {key}, got {type(value).__name__}")
    return value


def _timestamp(obj: dict[str, Any], key: str) -> datetime | None:
    value = _text(obj, key)
    if not value:
        return None
    try:
        return parser.isoparse(value)
    except (ValueError, OverflowError) as e:
        raise DecodeError(f"Invalid timestamp for {key}: {value!r}") from e


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
