"""Match consolidation.

Providers often list the same game several times (home feed, away feed,
different channels) with slightly different start times. Consolidation groups
resolved entries by match identity and gives every entry of a group the same
canonical start - the latest one seen - and a normalized title.

Two passes over the batch:
1. Resolve each entry, stamp its own instant, rewrite its title prefix and
   record the latest instant per identity
2. Re-stamp every resolved entry with its group's canonical instant and
   finish the title with the canonical local time and a day offset
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, tzinfo

from playlistarr.consumers.matching.matcher import resolve_title
from playlistarr.consumers.matching.result import ResultAggregator, log_result
from playlistarr.core.types import MATCH_ID_ATTRIBUTE, Entry, FranchiseMatch
from playlistarr.utilities.constants import HOME_AWAY_CLEANSERS
from playlistarr.utilities.tz import format_clock, now_viewer, to_viewer_tz

logger = logging.getLogger(__name__)


class MatchGroups:
    """Latest start instant per match identity within one batch.

    Stored instants only move forward.
    """

    def __init__(self) -> None:
        self._latest: dict[str, datetime] = {}

    def observe(self, identity: str, instant: datetime) -> datetime:
        """Record an instant for an identity; returns the current canonical one."""
        current = self._latest.get(identity)
        if current is None or instant > current:
            self._latest[identity] = instant
        return self._latest[identity]

    def canonical(self, identity: str) -> datetime | None:
        return self._latest.get(identity)

    def __contains__(self, identity: str) -> bool:
        return identity in self._latest

    def __len__(self) -> int:
        return len(self._latest)


@dataclass
class ConsolidationResult:
    """Outcome of one consolidation run."""

    results: ResultAggregator = field(default_factory=ResultAggregator)
    groups: int = 0
    restamped: int = 0  # entries whose instant moved to the canonical one


def format_title_prefix(match: FranchiseMatch) -> str:
    """Normalized title up to (not including) the start time.

    'NBA 10: Spurs (SAS) vs Cavaliers (CLE) H > '
    """
    tag = f"{match.stream_tag} " if match.stream_tag else ""
    return (
        f"{match.channel}: "
        f"{match.team1.team_name} ({match.team1.acronym}) vs "
        f"{match.team2.team_name} ({match.team2.acronym}) "
        f"{tag}> "
    )


def day_offset(instant: datetime, now: datetime) -> int:
    """Whole days from instant to now, truncated toward zero.

    Positive for instants in the past, negative for the future.
    """
    return int((now - instant) / timedelta(days=1))


def format_day_offset(days: int) -> str:
    """' (+1)' / ' (-2)', or '' for zero."""
    return f" ({days:+d})" if days else ""


def consolidate_matches(
    entries: list[Entry],
    fallback_year: int,
    *,
    now: datetime | None = None,
    viewer_tz: tzinfo | None = None,
) -> ConsolidationResult:
    """Group resolved entries by match identity and unify their start.

    Entries whose title doesn't resolve are left untouched (they keep any
    instant from the standalone scan).

    Args:
        entries: Batch to consolidate (mutated in place)
        fallback_year: Year for start times that don't carry one
        now: Reference time for day offsets (None = current time)
        viewer_tz: Target zone (None = configured viewer timezone)

    Returns:
        ConsolidationResult with per-outcome counts
    """
    now = now or now_viewer(viewer_tz)
    result = ConsolidationResult()
    groups = MatchGroups()

    # Pass 1: resolve, stamp own instant, track latest per identity
    own_instants: dict[int, datetime] = {}
    for index, entry in enumerate(entries):
        outcome = resolve_title(entry.original_title, fallback_year, viewer_tz)
        result.results.add(outcome)
        log_result(logger, outcome)
        if not outcome.is_matched:
            continue

        match = outcome.match
        entry.start_time = match.start_time
        entry.title = format_title_prefix(match)
        entry.set_attribute(MATCH_ID_ATTRIBUTE, match.identity)
        own_instants[index] = match.start_time
        groups.observe(match.identity, match.start_time)

    # Pass 2: canonical instant + rendered time for every resolved entry
    for index, own_instant in own_instants.items():
        entry = entries[index]
        canonical = groups.canonical(entry.match_id)
        if canonical is None:
            continue

        if canonical != own_instant:
            result.restamped += 1
            logger.debug(
                "[CONSOLIDATE] %s moved %s -> %s",
                entry.match_id,
                own_instant.strftime("%H:%M"),
                canonical.strftime("%H:%M"),
            )

        local = to_viewer_tz(canonical, viewer_tz)
        entry.start_time = local
        entry.title = (
            f"{entry.title}{format_clock(local)}"
            f"{format_day_offset(day_offset(local, now))}"
        )

    result.groups = len(groups)
    logger.info(
        "[CONSOLIDATE] %d entries, %d matches, %s, %d restamped",
        len(entries),
        result.groups,
        result.results.summary(),
        result.restamped,
    )
    return result


def cleanse_home_away(entries: list[Entry]) -> int:
    """Replace Home/Away stream markers with (H)/(A) tags.

    Applies to every entry, resolved or not.

    Returns:
        Number of titles changed
    """
    changed = 0
    for entry in entries:
        title = entry.title
        for olds, new in HOME_AWAY_CLEANSERS:
            for old in olds:
                title = title.replace(old, new)
        if title != entry.title:
            entry.title = title
            changed += 1

    if changed:
        logger.debug("[CONSOLIDATE] Cleansed home/away markers in %d titles", changed)
    return changed
