"""Phone number display normalization."""

from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_phone(raw: str | None) -> str | None:
    """Format a US number as ``(DDD) DDD-DDDD``.

    A leading country code ``1`` on an 11-digit number is dropped. Input
    that does not reduce to 10 digits is returned unchanged; blank input
    gives None.
    """
    if raw is None or not raw.strip():
        return None

    digits = _NON_DIGITS.sub("", raw)
    if len(digits) == 11 and digits.startswith("1"):
        digits = digits[1:]
    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    return raw
