"""Serialization utilities for converting rows to API responses."""
import base64
from datetime import datetime, timezone
from typing import Optional


def serialize_datetime(value: Optional[datetime]) -> Optional[str]:
    """
    Serialize a stored UTC datetime to an ISO 8601 string with offset.

    Args:
        value: Naive UTC datetime or None

    Returns:
        ISO format string or None
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def encode_blob(value: Optional[bytes]) -> Optional[str]:
    """Base64-encode a binary column for JSON transport."""
    if value is None:
        return None
    return base64.b64encode(value).decode("ascii")


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize an incoming datetime to naive UTC for comparisons and storage."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
