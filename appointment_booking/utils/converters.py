"""Date conversion helpers shared by the API mappers."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional


def to_instant(value: datetime, default_tz: Optional[tzinfo] = None) -> datetime:
    """Return ``value`` as an absolute UTC instant.

    Offset-aware values keep the instant they describe. Naive wall-clock
    values are read in ``default_tz`` (UTC when not given).
    """

    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=default_tz or timezone.utc)
    return value.astimezone(timezone.utc)


def to_api_datetime(instant: datetime) -> datetime:
    """Convert a stored instant into the timestamp exposed by the API."""

    return to_instant(instant)


def format_api_datetime(value: datetime) -> str:
    """ISO-8601 rendering in UTC with a ``Z`` suffix."""

    text = to_instant(value).isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text
