"""Playlist processing pipeline.

Coordinates one run over a batch of entries:
stamp standalone start times -> drop placeholder titles -> scheduled filter
-> (nba) consolidate and cleanse -> order.

"Now" and the viewer zone are read once here and passed down.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo

from playlistarr.config import (
    get_excluded_title_keywords,
    get_recent_window_hours,
    get_viewer_timezone,
)
from playlistarr.consumers.consolidation import (
    ConsolidationResult,
    cleanse_home_away,
    consolidate_matches,
)
from playlistarr.consumers.matching.time_parser import scan_title
from playlistarr.consumers.ordering import sort_entries
from playlistarr.core.types import Entry
from playlistarr.playlist.filters import filter_excluded_titles, filter_scheduled_entries
from playlistarr.utilities.tz import now_viewer

logger = logging.getLogger(__name__)


@dataclass
class PipelineOptions:
    """Switches for one processing run."""

    fallback_year: int
    require_start_time: bool = False  # --start-time
    recent_only: bool = False  # --recent
    nba: bool = False  # --nba
    excluded_keywords: tuple[str, ...] | None = None  # None = configured keywords
    recent_past: timedelta | None = None
    recent_future: timedelta | None = None


@dataclass
class PipelineResult:
    """Result of a processing run."""

    entries: list[Entry]
    input_count: int
    stamped: int = 0
    excluded: int = 0
    filtered: int = 0
    consolidation: ConsolidationResult | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None


def stamp_start_times(
    entries: list[Entry], fallback_year: int, viewer_tz: tzinfo | None = None
) -> int:
    """Give untimed entries the first start time found anywhere in the title.

    Returns:
        Number of entries stamped
    """
    stamped = 0
    for entry in entries:
        if entry.start_time is not None:
            continue
        instant = scan_title(entry.title, fallback_year, viewer_tz)
        if instant is not None:
            entry.start_time = instant
            stamped += 1
    logger.debug("[TIME] Stamped start times on %d of %d entries", stamped, len(entries))
    return stamped


def process_playlist(
    entries: list[Entry],
    options: PipelineOptions,
    *,
    now: datetime | None = None,
    viewer_tz: tzinfo | None = None,
) -> PipelineResult:
    """Run the full pipeline over a batch.

    Args:
        entries: Entries as read from the playlist (mutated)
        options: Pipeline switches
        now: Reference time (None = current time in the viewer zone)
        viewer_tz: Viewer zone (None = configured viewer timezone)

    Returns:
        PipelineResult with the surviving entries in output order
    """
    viewer_tz = viewer_tz or get_viewer_timezone()
    now = now or now_viewer(viewer_tz)
    result = PipelineResult(entries=entries, input_count=len(entries), started_at=now)

    result.stamped = stamp_start_times(entries, options.fallback_year, viewer_tz)

    keywords = (
        options.excluded_keywords
        if options.excluded_keywords is not None
        else get_excluded_title_keywords()
    )
    kept = filter_excluded_titles(entries, keywords)
    result.excluded = len(entries) - len(kept)

    if options.require_start_time or options.recent_only:
        past_hours, future_hours = get_recent_window_hours()
        before = len(kept)
        kept = filter_scheduled_entries(
            kept,
            require_start_time=options.require_start_time,
            apply_range=options.recent_only,
            past=options.recent_past or timedelta(hours=past_hours),
            future=options.recent_future or timedelta(hours=future_hours),
            now=now,
        )
        result.filtered = before - len(kept)

    if options.nba:
        result.consolidation = consolidate_matches(
            kept, options.fallback_year, now=now, viewer_tz=viewer_tz
        )
        cleanse_home_away(kept)

    sort_entries(kept)

    result.entries = kept
    result.completed_at = now_viewer(viewer_tz)
    logger.info(
        "[PIPELINE] %d in, %d out (stamped=%d, excluded=%d, filtered=%d)",
        result.input_count,
        len(kept),
        result.stamped,
        result.excluded,
        result.filtered,
    )
    return result
