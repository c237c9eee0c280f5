"""Timestamp helpers shared by the dispatcher and the metadata routes."""

from datetime import datetime, timezone


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with millisecond precision, e.g. 2024-01-15T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
