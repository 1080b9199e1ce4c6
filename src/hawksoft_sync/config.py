"""Environment-driven settings for the HawkSoft API connection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from hawksoft_sync.exceptions import ConfigError

logger = logging.getLogger(__name__)

REQUIRED_VARS = ("BASE_URL", "AGENCY_ID", "API_USER", "API_PASS")

DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_BATCH_SIZE = 10
DEFAULT_BATCH_DELAY = 0.1


@dataclass(frozen=True)
class Settings:
    """Connection and pacing settings for one sync run."""

    base_url: str
    agency_id: str
    api_user: str
    api_password: str
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    batch_size: int = DEFAULT_BATCH_SIZE
    batch_delay: float = DEFAULT_BATCH_DELAY

    def __repr__(self) -> str:
        return (
            f"Settings(base_url={self.base_url!r}, agency_id={self.agency_id!r}, "
            f"api_user={self.api_user!r}, api_password='***', "
            f"request_timeout={self.request_timeout}, batch_size={self.batch_size}, "
            f"batch_delay={self.batch_delay})"
        )


def load_settings(env_file: str | Path | None = ".env") -> Settings:
    """Build Settings from the environment, reading ``env_file`` first if it exists.

    Variables already present in the environment take precedence over the
    file. Raises ConfigError listing every missing required variable.
    """
    if env_file is not None and Path(env_file).is_file():
        load_dotenv(env_file, override=False)
        logger.debug(f"Loaded environment from {env_file}")

    values = {name: (os.environ.get(name) or "").strip() for name in REQUIRED_VARS}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)}")

    return Settings(
        base_url=values["BASE_URL"].rstrip("/"),
        agency_id=values["AGENCY_ID"],
        api_user=values["API_USER"],
        api_password=values["API_PASS"],
        request_timeout=_positive("REQUEST_TIMEOUT", float, DEFAULT_REQUEST_TIMEOUT),
        batch_size=_positive("BATCH_SIZE", int, DEFAULT_BATCH_SIZE),
        batch_delay=_non_negative("BATCH_DELAY", DEFAULT_BATCH_DELAY),
    )


def _read_number(name: str, cast, default):
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


def _positive(name: str, cast, default):
    value = _read_number(name, cast, default)
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def _non_negative(name: str, default: float) -> float:
    value = _read_number(name, float, default)
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {value}")
    return value
