"""Entry filters applied between reading and consolidation."""

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta

from playlistarr.core.types import Entry

logger = logging.getLogger(__name__)


def filter_excluded_titles(entries: list[Entry], keywords: Iterable[str]) -> list[Entry]:
    """Drop entries whose title contains any keyword (case-insensitive).

    Used for placeholder streams ("No Event", "Offline", ...).
    """
    lowered = [k.lower() for k in keywords if k]
    kept = [e for e in entries if not any(k in e.title.lower() for k in lowered)]
    if len(kept) != len(entries):
        logger.info("[FILTER] Excluded %d placeholder entries", len(entries) - len(kept))
    return kept


def filter_scheduled_entries(
    entries: list[Entry],
    *,
    require_start_time: bool,
    apply_range: bool,
    past: timedelta,
    future: timedelta,
    now: datetime,
) -> list[Entry]:
    """Keep entries by start time.

    Args:
        entries: Entries to filter
        require_start_time: Drop entries without a start time
        apply_range: Drop timed entries outside [now - past, now + future]
        past: How far back a start may be
        future: How far ahead a start may be
        now: Reference time (aware)
    """
    earliest = now - past
    latest = now + future

    kept = []
    for entry in entries:
        start = entry.start_time
        if start is None:
            if not require_start_time:
                kept.append(entry)
            continue
        if apply_range and (start < earliest or start > latest):
            continue
        kept.append(entry)

    logger.info(
        "[FILTER] Scheduled filter kept %d of %d entries (require_time=%s, range=%s)",
        len(kept),
        len(entries),
        require_start_time,
        apply_range,
    )
    return kept
