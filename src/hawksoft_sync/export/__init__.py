"""JSON and CSV export of phone entries."""

from hawksoft_sync.export.writer import (
    CSV_HEADER,
    export_entries,
    read_json,
    resolve_output_path,
    write_csv,
    write_json,
)

__all__ = [
    "CSV_HEADER",
    "export_entries",
    "read_json",
    "resolve_output_path",
    "write_csv",
    "write_json",
]
