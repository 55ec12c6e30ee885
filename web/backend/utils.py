#!/usr/bin/env python3
"""
Conversion helpers shared by the response builders.
"""

from enum import Enum
from typing import Optional, Any
from datetime import datetime, timezone


def safe_str(value: Optional[Any], default: str = "") -> str:
    """Invitation UUIDs and other ids rendered as strings ('' for None)."""
    if value is None:
        return default
    return str(value)


def enum_value(value: Optional[Any]) -> Optional[Any]:
    """Plain value of an Enum member; other values pass through."""
    if isinstance(value, Enum):
        return value.value
    return value


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    ISO 8601 timestamp for API responses.

    Naive datetimes are stored in UTC, so they are tagged as such before
    formatting. Returns None for None.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()
