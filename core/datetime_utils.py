# core/datetime_utils.py
"""
Centralized datetime handling for hackops.

Schedule times arrive as ISO 8601 strings and are kept verbatim; these
helpers parse them only for ordering and display.
"""
from datetime import datetime, time, tzinfo
from typing import Optional, Union

from django.utils import timezone


def now() -> datetime:
    """
    Get current datetime (timezone-aware when USE_TZ=True).

    This is the single source of truth for "now" in hackops.
    """
    return timezone.now()


def parse_iso(iso_string: str) -> Optional[datetime]:
    """
    Parse ISO 8601 datetime string.

    Returns None if parsing fails.
    """
    if not iso_string:
        return None
    try:
        return datetime.fromisoformat(iso_string.replace('Z', '+00:00'))
    except (ValueError, AttributeError):
        return None


def parse_time_of_day(iso_string: str) -> Optional[Union[datetime, time]]:
    """
    Parse a full ISO datetime, or a bare ISO time such as ``"09:00"``.
    """
    parsed = parse_iso(iso_string)
    if parsed is not None:
        return parsed
    try:
        return time.fromisoformat(iso_string)
    except (ValueError, TypeError):
        return None


def as_aware(dt: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Attach ``tz`` (default: current time zone) to naive datetimes."""
    if timezone.is_aware(dt):
        return dt
    return timezone.make_aware(dt, tz or timezone.get_current_timezone())


def format_time_of_day(iso_string: str, tz: Optional[tzinfo] = None) -> str:
    """
    Format an ISO value as a short time of day, e.g. "9:00 AM".

    Aware datetimes are converted to ``tz`` first. Unparseable input is
    returned unchanged.
    """
    parsed = parse_time_of_day(iso_string)
    if parsed is None:
        return iso_string

    if isinstance(parsed, datetime) and tz is not None and timezone.is_aware(parsed):
        parsed = parsed.astimezone(tz)

    return parsed.strftime("%I:%M %p").lstrip("0")
