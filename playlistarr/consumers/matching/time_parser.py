"""Start time extraction for entry titles.

Turns the many ways providers write a start time into one viewer-local
instant:
- start:2025 12 30 00:50:00            (explicit year, no zone - taken as UTC)
- | 12/23/2025 7:30 PM ET              (explicit year, 12h, US band)
- (12.23 5:30PM ET)                    (fallback year, 12h, US band)
- (12.23 17:30 ET)                     (fallback year, 24h, US band)
- Tue 9th Dec 6:00PM ET                (fallback year, 12h, US band)

Each shape is a (scan pattern, fragment pattern, extractor) record. The scan
pattern is searched in whole titles and requires the shape's delimiters
(start:, |, parentheses). The fragment pattern is used on a start time that
title grammar already cut out, where those delimiters are optional.

After zone resolution the instant is rounded (:50-:59 -> next hour,
:20-:29 -> next half hour) and converted to the viewer timezone.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, tzinfo
from pathlib import Path
from re import Pattern

from playlistarr.config import get_viewer_timezone
from playlistarr.utilities.constants import MONTH_NUMBERS, US_TIME_BANDS
from playlistarr.utilities.tz import zone_or_utc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WallClock:
    """Civil date/time as written in a title, before zone resolution."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    zone: str | None = None  # band label as written (ET, PST, ...)


@dataclass(frozen=True)
class TimeShape:
    """One recognizable start time layout."""

    name: str
    scan: Pattern
    fragment: Pattern
    extract: Callable[[re.Match, int], WallClock]


def _shape(
    name: str,
    body: str,
    extract: Callable[[re.Match, int], WallClock],
    prefix: str = "",
    suffix: str = "",
) -> TimeShape:
    """Compile scan (delimiters required) and fragment (optional) patterns."""
    fragment = body
    if prefix:
        fragment = f"(?:{prefix})?" + fragment
    if suffix:
        fragment = fragment + f"(?:{suffix})?"
    return TimeShape(
        name=name,
        scan=re.compile(prefix + body + suffix, re.IGNORECASE),
        fragment=re.compile(fragment, re.IGNORECASE),
        extract=extract,
    )


# =============================================================================
# CONVERSION HELPERS
# =============================================================================


def to_24h(hour: int | str, meridiem: str) -> int:
    """Convert a 12-hour clock hour to 24-hour.

    12 AM -> 0, 12 PM -> 12, 5 PM -> 17.
    """
    h = int(hour) % 12
    if meridiem.strip().upper() == "PM":
        h += 12
    return h


def round_up_minutes(minute: int) -> int:
    """Minutes to add so kick-off style times land on :00 or :30.

    :50-:59 advance to the next hour, :20-:29 to the next half hour,
    everything else is left alone.
    """
    if minute >= 50:
        return 60 - minute
    if 20 <= minute < 30:
        return 30 - minute
    return 0


def month_number(name: str) -> int:
    """Month number for 'Jan'/'January' style names (0 if unknown)."""
    return MONTH_NUMBERS.get(name[:3].lower(), 0)


def strip_ordinals(text: str) -> str:
    """'Sat 3rd Jan' -> 'Sat 3 Jan' (only 1-2 digit numbers followed by a space)."""
    return re.sub(r"\b(\d{1,2})(?:st|nd|rd|th) ", r"\1 ", text, flags=re.IGNORECASE)


# =============================================================================
# SHAPES
# =============================================================================


def _from_start(m: re.Match, fallback_year: int) -> WallClock:
    # Seconds are ignored; rounding works on whole minutes
    return WallClock(
        year=int(m["year"]),
        month=int(m["month"]),
        day=int(m["day"]),
        hour=int(m["hour"]),
        minute=int(m["minute"]),
    )


def _from_pipe_date(m: re.Match, fallback_year: int) -> WallClock:
    return WallClock(
        year=int(m["year"]),
        month=int(m["month"]),
        day=int(m["day"]),
        hour=to_24h(m["hour"], m["meridiem"]),
        minute=int(m["minute"]),
        zone=m["zone"].upper(),
    )


def _from_paren_12h(m: re.Match, fallback_year: int) -> WallClock:
    return WallClock(
        year=fallback_year,
        month=int(m["month"]),
        day=int(m["day"]),
        hour=to_24h(m["hour"], m["meridiem"]),
        minute=int(m["minute"]),
        zone=m["zone"].upper(),
    )


def _from_paren_24h(m: re.Match, fallback_year: int) -> WallClock:
    return WallClock(
        year=fallback_year,
        month=int(m["month"]),
        day=int(m["day"]),
        hour=int(m["hour"]),
        minute=int(m["minute"]),
        zone=m["zone"].upper(),
    )


def _from_day_of_week(m: re.Match, fallback_year: int) -> WallClock:
    # Trailing band wins; "ET Fri 2 Jan 6:45pm" puts it in front
    zone = m["zone"] or m["lead_zone"]
    return WallClock(
        year=fallback_year,
        month=month_number(m["month_name"]),
        day=int(m["day"]),
        hour=to_24h(m["hour"], m["meridiem"]),
        minute=int(m["minute"]),
        zone=zone.upper() if zone else None,
    )


_MONTHS = r"Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec"
_WEEKDAYS = r"Mon|Tue|Wed|Thu|Fri|Sat|Sun"
# Known band labels, longest first
_BANDS = "|".join(sorted(US_TIME_BANDS, key=len, reverse=True))

# Priority order matters: only the first shape that matches is used
TIME_SHAPES: tuple[TimeShape, ...] = (
    _shape(
        "start",
        r"(?P<year>\d{4})\s+(?P<month>\d{1,2})\s+(?P<day>\d{1,2})\s+"
        r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?",
        _from_start,
        prefix=r"start:\s*",
    ),
    _shape(
        "pipe_date_12h",
        r"(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4})\s+"
        r"(?P<hour>\d{1,2}):(?P<minute>\d{2})\s*(?P<meridiem>AM|PM)\s*(?P<zone>[A-Z]{1,4})",
        _from_pipe_date,
        prefix=r"\|\s*",
    ),
    _shape(
        "paren_12h",
        r"(?P<month>\d{1,2})\.(?P<day>\d{1,2})\s+"
        r"(?P<hour>\d{1,2}):(?P<minute>\d{2})\s*(?P<meridiem>AM|PM)\s*(?P<zone>[A-Z]{1,4})",
        _from_paren_12h,
        prefix=r"\(",
        suffix=r"\)",
    ),
    _shape(
        "paren_24h",
        r"(?P<month>\d{1,2})\.(?P<day>\d{1,2})\s+"
        r"(?P<hour>\d{1,2}):(?P<minute>\d{2})\s*(?P<zone>[A-Z]{1,4})",
        _from_paren_24h,
        prefix=r"\(",
        suffix=r"\)",
    ),
    # Optional zones here must be known bands ("Suns Tue ..." has no zone)
    _shape(
        "day_of_week",
        rf"(?:\b(?P<lead_zone>{_BANDS})\s+)?\b(?P<weekday>{_WEEKDAYS})[a-z]*\s+"
        rf"(?P<day>\d{{1,2}})(?:st|nd|rd|th)?\s+(?P<month_name>{_MONTHS})[a-z]*\s+"
        r"(?P<hour>\d{1,2}):(?P<minute>\d{2})\s*(?P<meridiem>AM|PM)"
        rf"(?:\s*\b(?P<zone>{_BANDS})\b)?",
        _from_day_of_week,
    ),
)

# stop: tokens are never used for the start instant but are stripped by the writer
STOP_TOKEN = re.compile(
    r"stop:\s*\d{4}\s+\d{1,2}\s+\d{1,2}\s+\d{1,2}:\d{2}(?::\d{2})?", re.IGNORECASE
)


# =============================================================================
# RESOLUTION
# =============================================================================


def resolve_wall_clock(wall: WallClock, viewer_tz: tzinfo | None = None) -> datetime | None:
    """Zone, round and convert a wall clock to the viewer timezone.

    Unknown/missing band labels use a fixed zero offset. Impossible dates
    (Feb 30, 25:00) resolve to None.
    """
    try:
        zoned = datetime(
            wall.year, wall.month, wall.day, wall.hour, wall.minute,
            tzinfo=zone_or_utc(wall.zone),
        )
    except ValueError as e:
        logger.debug("[TIME] Invalid wall clock %s: %s", wall, e)
        return None

    # Absolute shift so DST transitions don't skew the rounding
    rounded = zoned.astimezone(UTC) + timedelta(minutes=round_up_minutes(zoned.minute))
    return rounded.astimezone(viewer_tz or get_viewer_timezone())


def _first_match(
    text: str, fallback_year: int, viewer_tz: tzinfo | None, *, fragment: bool
) -> datetime | None:
    for shape in TIME_SHAPES:
        pattern = shape.fragment if fragment else shape.scan
        m = pattern.search(text)
        if not m:
            continue
        wall = shape.extract(m, fallback_year)
        logger.debug("[TIME] '%s' matched %s -> %s", text[:60], shape.name, wall)
        return resolve_wall_clock(wall, viewer_tz)
    return None


def scan_title(
    title: str, fallback_year: int, viewer_tz: tzinfo | None = None
) -> datetime | None:
    """Find the first recognizable start time anywhere in a title.

    Args:
        title: Full entry title
        fallback_year: Year for shapes that don't carry one
        viewer_tz: Target zone (None = configured viewer timezone)

    Returns:
        Rounded viewer-local instant, or None
    """
    if not title:
        return None
    return _first_match(title, fallback_year, viewer_tz, fragment=False)


def parse_start_fragment(
    fragment: str, fallback_year: int, viewer_tz: tzinfo | None = None
) -> datetime | None:
    """Resolve a start time fragment cut out by title grammar.

    Ordinal suffixes are stripped first ('3rd Jan' -> '3 Jan').
    """
    if not fragment:
        return None
    return _first_match(strip_ordinals(fragment), fallback_year, viewer_tz, fragment=True)


# =============================================================================
# FALLBACK YEAR / TOKEN STRIPPING
# =============================================================================

_DATE_IN_PATH = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def extract_fallback_year(path: str | Path, today: date | None = None) -> int:
    """Year for year-less start times, taken from the playlist's file name.

    Looks for YYYY-MM-DD in the base name, then anywhere in the path, and
    falls back to the current year.
    """
    path = Path(path)
    for candidate in (path.name, str(path)):
        if m := _DATE_IN_PATH.search(candidate):
            return int(m.group(1))
    return (today or date.today()).year


_TRAILING_SEPARATORS = "|-:;,"


def strip_time_tokens(title: str) -> str:
    """Remove every recognizable time token from a title.

    Dangling separators left at the end are dropped and inner runs of
    whitespace collapsed.
    """
    result = title
    for shape in TIME_SHAPES:
        result = shape.scan.sub("", result)
    result = STOP_TOKEN.sub("", result)

    result = result.strip()
    while result and result[-1] in _TRAILING_SEPARATORS:
        result = result.rstrip(_TRAILING_SEPARATORS + " \t")

    return re.sub(r"\s{2,}", " ", result).strip()
