"""Timezone utilities.

Single source of truth for timezone operations: US time band lookup,
viewer-zone conversion and the fixed renderings used in entry titles.
"""

from datetime import UTC, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo

from playlistarr.config import get_viewer_timezone
from playlistarr.utilities.constants import US_TIME_BANDS

__all__ = [
    "resolve_us_time_band",
    "zone_or_utc",
    "now_viewer",
    "to_viewer_tz",
    "format_clock",
    "format_day_clock",
]


def resolve_us_time_band(abbrev: str | None) -> ZoneInfo | None:
    """Map a US time band label (ET, PST, AKDT, ...) to its civil zone.

    Representative cities are used so DST is applied per calendar date.

    Returns:
        ZoneInfo, or None for unknown/missing labels
    """
    if not abbrev:
        return None
    name = US_TIME_BANDS.get(abbrev.strip().upper())
    return ZoneInfo(name) if name else None


def zone_or_utc(abbrev: str | None) -> tzinfo:
    """Civil zone for a band label, falling back to a fixed zero offset."""
    return resolve_us_time_band(abbrev) or timezone.utc


def now_viewer(viewer_tz: tzinfo | None = None) -> datetime:
    """Get current time in the viewer timezone."""
    return datetime.now(UTC).astimezone(viewer_tz or get_viewer_timezone())


def to_viewer_tz(dt: datetime, viewer_tz: tzinfo | None = None) -> datetime:
    """Convert any datetime to the viewer timezone.

    Args:
        dt: Datetime to convert (must be timezone-aware)
        viewer_tz: Target zone (None = configured viewer timezone)

    Returns:
        Datetime in viewer timezone
    """
    if dt.tzinfo is None:
        raise ValueError("Cannot convert naive datetime - must be timezone-aware")
    return dt.astimezone(viewer_tz or get_viewer_timezone())


def format_clock(dt: datetime) -> str:
    """24h wall clock, e.g. '19:30'."""
    return dt.strftime("%H:%M")


def format_day_clock(dt: datetime) -> str:
    """Day/month plus 24h clock, e.g. '23/12 19:30'."""
    return dt.strftime("%d/%m %H:%M")
