"""Write phone entries to JSON or CSV files."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Sequence

from hawksoft_sync.exceptions import ExportError
from hawksoft_sync.phones.models import PhoneEntry

logger = logging.getLogger(__name__)

CSV_HEADER = "ClientNumber,PhoneNumber,PhoneType,PersonId,PersonName,Priority,LastModified"
_CSV_MONTH_TO_SECOND = "%m-%d %H:%M:%S"

JSON = "json"
CSV = "csv"


def resolve_output_path(path: str | Path) -> tuple[Path, str]:
    """Pick the export format from the extension.

    ``.csv`` selects CSV, ``.json`` selects JSON, and any other path gets
    ``.json`` appended.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return path, CSV
    if suffix == ".json":
        return path, JSON
    return path.with_name(path.name + ".json"), JSON


def export_entries(entries: Sequence[PhoneEntry], path: str | Path) -> Path:
    """Write entries in the format implied by ``path``; returns the path written."""
    target, fmt = resolve_output_path(path)
    if fmt == CSV:
        write_csv(entries, target)
    else:
        write_json(entries, target)
    return target


def write_json(entries: Sequence[PhoneEntry], path: str | Path) -> None:
    """Write entries as an indented JSON array with camelCase keys."""
    payload = [entry.to_dict() for entry in entries]
    try:
        Path(path).write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Error exporting phone number mappings to {path}: {e}") from e
    logger.info(f"Exported {len(entries)} phone number mappings to {path}")


def write_csv(entries: Sequence[PhoneEntry], path: str | Path) -> None:
    """Write entries as CSV: numbers bare, every text field double-quoted."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(CSV_HEADER + "\n")
            writer = csv.writer(f, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
            for entry in entries:
                writer.writerow(_csv_row(entry))
    except OSError as e:
        raise ExportError(f"Error exporting phone number mappings to {path}: {e}") from e
    logger.info(f"Exported {len(entries)} phone number mappings to {path}")


def _csv_row(entry: PhoneEntry) -> list:
    ts = entry.last_modified
    # strftime %Y does not zero-pad years below 1000 on every platform
    last_modified = f"{ts.year:04d}-{ts.strftime(_CSV_MONTH_TO_SECOND)}" if ts else ""
    return [
        entry.client_number,
        entry.phone_number or "",
        entry.phone_type or "",
        entry.person_id or "",
        entry.person_name or "",
        entry.priority,
        last_modified,
    ]


def read_json(path: str | Path) -> list[PhoneEntry]:
    """Load entries previously written by ``write_json``."""
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ExportError(f"Error reading phone number mappings from {path}: {e}") from e
    except ValueError as e:
        raise ExportError(f"{path} is not valid JSON: {e}") from e
    try:
        return [PhoneEntry.from_dict(item) for item in payload]
    except (KeyError, TypeError, ValueError) as e:
        raise ExportError(f"{path} holds a malformed phone entry: {e!r}") from e
