"""Tests for HawkSoft payload parsing."""

from datetime import datetime, timezone

import pytest

from hawksoft_sync.exceptions import DecodeError
from hawksoft_sync.hawksoft.parser import parse_client_numbers, parse_client_record


CLIENT_PAYLOAD = {
    "clientNumber": 1001,
    "details": {
        "officeId": 1,
        "clientType": "Personal",
        "status": "Active",
        "isPersonal": True,
        "isCommercial": False,
        "companyName": None,
        "clientSince": "2019-05-01T00:00:00",
        "id": "d1",
        "modified": "2024-03-01T09:30:00Z",
    },
    "people": [
        {"id": "p1", "firstName": "Larry", "lastName": "Lastname",
         "dateOfBirth": "1970-01-02T00:00:00"},
    ],
    "contacts": [
        {"id": "c1", "type": "CellPhone", "personId": "p1", "data": "5037777777",
         "priority": 100, "isBillingContact": True, "modified": "2024-03-01T09:30:00Z"},
        {"id": "c2", "type": "Email", "data": "x@y.com", "priority": 1},
    ],
}


def test_parse_client_numbers():
    assert parse_client_numbers([3, 1, 2]) == [3, 1, 2]
    assert parse_client_numbers([]) == []
    assert parse_client_numbers(None) == []


@pytest.mark.parametrize("payload", [{"ids": [1]}, [1, "2"], [1.5], [True], "1,2"])
def test_parse_client_numbers_rejects_bad_shapes(payload):
    with pytest.raises(DecodeError):
        parse_client_numbers(payload)


def test_parse_client_record():
    record = parse_client_record(CLIENT_PAYLOAD)

    assert record.client_number == 1001
    assert record.details.client_type == "Personal"
    assert record.details.is_personal is True
    assert record.details.client_since == datetime(2019, 5, 1)
    assert record.details.modified == datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)

    [person] = record.people
    assert person.id == "p1"
    assert person.first_name == "Larry"
    assert person.middle_name is None

    cell, email = record.contacts
    assert cell.type == "CellPhone"
    assert cell.person_id == "p1"
    assert cell.priority == 100
    assert cell.is_billing_contact is True
    assert cell.modified == datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)
    assert email.person_id is None
    assert email.modified is None


def test_keys_match_case_insensitively():
    record = parse_client_record({
        "ClientNumber": 7,
        "Contacts": [{"Type": "HomePhone", "Data": "5031234567", "PersonID": "p"}],
    })
    assert record.client_number == 7
    assert record.contacts[0].type == "HomePhone"
    assert record.contacts[0].person_id == "p"


def test_optional_sections_may_be_missing():
    record = parse_client_record({"clientNumber": 5, "people": None})
    assert record.details is None
    assert record.people is None
    assert record.contacts is None


def test_null_priority_defaults_to_zero():
    record = parse_client_record({"clientNumber": 5, "contacts": [{"type": "WorkPhone",
                                                                   "priority": None}]})
    assert record.contacts[0].priority == 0


@pytest.mark.parametrize("payload", [
    [],
    "client",
    {"clientNumber": "1001"},
    {"details": {}},
    {"clientNumber": 1, "contacts": {"type": "CellPhone"}},
    {"clientNumber": 1, "contacts": ["CellPhone"]},
    {"clientNumber": 1, "contacts": [{"priority": "high"}]},
    {"clientNumber": 1, "contacts": [{"data": 5037777777}]},
    {"clientNumber": 1, "contacts": [{"modified": "yesterday-ish"}]},
    {"clientNumber": 1, "details": {"officeId": "one"}},
])
def test_malformed_records_raise(payload):
    with pytest.raises(DecodeError):
        parse_client_record(payload)
