"""Unified exception hierarchy for hawksoft-sync."""


class HawksoftSyncError(Exception):
    """Base exception for all hawksoft-sync errors."""


class ConfigError(HawksoftSyncError):
    """A required setting is missing or malformed."""


# HawkSoft API
class HawksoftError(HawksoftSyncError):
    """Base exception for HawkSoft API operations."""


class TransportError(HawksoftError):
    """Request failed or the API answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(HawksoftError):
    """Response body could not be parsed into the expected shape."""


# Export
class ExportError(HawksoftSyncError):
    """Failed to write the export file."""
