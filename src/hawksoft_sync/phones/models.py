"""Phone entry output model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

import dateutil.parser as parser

PHONE_TYPES = ("WorkPhone", "CellPhone", "HomePhone")


@dataclass(frozen=True)
class PhoneEntry:
    """One phone number mapped to a client, and to a person when known.

    ``person_name`` is None when the number belongs to the client itself.
    """

    client_number: int
    phone_number: str | None
    phone_type: str
    person_id: str | None = None
    person_name: str | None = None
    priority: int = 0
    last_modified: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """camelCase mapping used by the JSON export."""
        return {
            "clientNumber": self.client_number,
            "phoneNumber": self.phone_number,
            "phoneType": self.phone_type,
            "personId": self.person_id,
            "personName": self.person_name,
            "priority": self.priority,
            "lastModified": self.last_modified.isoformat() if self.last_modified else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PhoneEntry:
        last_modified = data.get("lastModified")
        return cls(
            client_number=data["clientNumber"],
            phone_number=data.get("phoneNumber"),
            phone_type=data["phoneType"],
            person_id=data.get("personId"),
            person_name=data.get("personName"),
            priority=data.get("priority", 0),
            last_modified=parser.isoparse(last_modified) if last_modified else None,
        )
