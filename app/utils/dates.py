"""
Datetime helpers.

pymongo returns naive datetimes that are UTC. Everything in the
dashboard compares against an aware UTC "now", so normalise first.
"""

from datetime import datetime, timezone
from typing import Any, Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: Any) -> Optional[datetime]:
    """
    Convert a stored timestamp to an aware UTC datetime.

    Accepts datetime (naive = UTC) or ISO-8601 strings, as written by
    older platform imports. Anything else returns None.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
