"""Sync HawkSoft client phone numbers into JSON or CSV exports."""

__version__ = "0.1.0"
