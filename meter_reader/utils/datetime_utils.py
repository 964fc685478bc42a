"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the application.
Local times use the timezone configured in meter_reader.core.config.

Functions:
- utc_now(): Current UTC time (for persisted audit fields)
- resolve_timezone(): tzinfo for a configured timezone name
- now(): Current time in the given or application timezone
- billing_month(): "YYYY-MM" bucket used for the one-reading-per-month rule
- parse_iso(): Safely parse ISO 8601 string to datetime
- to_iso(): Convert datetime object to ISO 8601 string
"""
import logging
import zoneinfo
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Optional

from ..core.config import get_settings

logger = logging.getLogger(__name__)


def resolve_timezone(tz_str: str) -> tzinfo:
    """
    Timezone for "UTC" or an IANA name such as "America/Sao_Paulo".

    Raises:
        ValueError: if the name is not a known timezone
    """
    name = (tz_str or "").strip()
    if name.upper() == "UTC":
        return dt_timezone.utc
    try:
        return zoneinfo.ZoneInfo(name)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise ValueError(f"Unknown timezone '{tz_str}'") from e


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().local_timezone
    try:
        return resolve_timezone(tz_str)
    except ValueError:
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def now(tz: Optional[tzinfo] = None) -> datetime:
    """
    Get current datetime in tz, or in the application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(tz if tz is not None else _get_app_timezone())


def billing_month(dt: datetime, tz: Optional[tzinfo] = None) -> str:
    """
    Month bucket of a timestamp, as "YYYY-MM" in tz (default: the application timezone).

    Naive datetimes are taken to be UTC.
    """
    local = ensure_utc(dt).astimezone(tz if tz is not None else _get_app_timezone())
    return f"{local.year:04d}-{local.month:02d}"


def parse_iso(dt_str: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to datetime object.
    Handles both timezone-aware and naive strings.
    If string is naive, assumes application timezone.

    Args:
        dt_str: ISO 8601 string (e.g., "2025-12-24T10:30:00Z" or "2025-12-24T10:30:00+05:30")

    Returns:
        timezone-aware datetime object, or None if parsing fails
    """
    if not dt_str or not isinstance(dt_str, str):
        return None

    try:
        normalized = dt_str.strip().replace("Z", "+00:00")
        dt = datetime.fromisoformat(normalized)
    except ValueError:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())
    return dt


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.
    If datetime is naive, assumes UTC (values read back from MongoDB).

    Returns:
        ISO 8601 formatted string ("Z" suffix for UTC), or None if dt is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=dt_timezone.utc)

    if dt.utcoffset() == timedelta(0):
        return dt.astimezone(dt_timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")
    return dt.replace(microsecond=0).isoformat()
