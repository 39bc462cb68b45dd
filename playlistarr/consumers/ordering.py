"""Entry ordering.

Total order over a playlist:
1. Entries with a start time come before entries without one
2. Timed entries: earlier first; on a tie, by match identity (when both
   have one and they differ), then by title ignoring case and the channel
   prefix before the first ':', then by exact title
3. Untimed entries: by title ignoring case, then by exact title
"""

import logging
from functools import cmp_to_key

from playlistarr.core.types import Entry

logger = logging.getLogger(__name__)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _after_channel(title: str) -> str:
    _, sep, rest = title.partition(":")
    return rest if sep else title


def _compare_titles(a: str, b: str, *, strip_channel: bool) -> int:
    key_a = _after_channel(a) if strip_channel else a
    key_b = _after_channel(b) if strip_channel else b
    return _cmp(key_a.lower(), key_b.lower()) or _cmp(a, b)


def compare_entries(a: Entry, b: Entry) -> int:
    """Three-way comparison of two entries (negative when a sorts first)."""
    if a.start_time is not None and b.start_time is not None:
        if a.start_time != b.start_time:
            return -1 if a.start_time < b.start_time else 1

        id_a, id_b = a.match_id, b.match_id
        if id_a and id_b and id_a != id_b:
            return _cmp(id_a, id_b)

        return _compare_titles(a.title, b.title, strip_channel=True)

    if a.start_time is not None:
        return -1
    if b.start_time is not None:
        return 1

    return _compare_titles(a.title, b.title, strip_channel=False)


def sort_entries(entries: list[Entry]) -> None:
    """Sort entries in place."""
    entries.sort(key=cmp_to_key(compare_entries))
    logger.debug(
        "[ORDER] Sorted %d entries (%d timed)",
        len(entries),
        sum(1 for e in entries if e.start_time is not None),
    )
