"""Match Result System for title resolution.

Two discrete categories:
- FAILED: Resolution attempted but the title couldn't be fully resolved
- MATCHED: Title resolved to two franchises and a start instant

Failures are never raised - they're recorded here so a batch can report
why entries were left out of consolidation.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from playlistarr.core.types import FranchiseMatch

# =============================================================================
# RESULT CATEGORIES
# =============================================================================


class ResultCategory(Enum):
    """Top-level result category for title resolution."""

    FAILED = "failed"  # Resolution attempted but failed
    MATCHED = "matched"  # Resolved to a FranchiseMatch


class FailedReason(Enum):
    """Reasons a title could not be resolved."""

    TITLE_NOT_PARSED = "title_not_parsed"  # No grammar shape matched
    TEAM1_NOT_FOUND = "team1_not_found"
    TEAM2_NOT_FOUND = "team2_not_found"
    BOTH_TEAMS_NOT_FOUND = "both_teams_not_found"
    SAME_TEAM = "same_team"  # Both slots resolved to one franchise
    NO_START_TIME = "no_start_time"  # Start fragment not recognized


FAILED_DISPLAY: dict[FailedReason, str] = {
    FailedReason.TITLE_NOT_PARSED: "Title shape not recognized",
    FailedReason.TEAM1_NOT_FOUND: "First team not found",
    FailedReason.TEAM2_NOT_FOUND: "Second team not found",
    FailedReason.BOTH_TEAMS_NOT_FOUND: "Neither team found",
    FailedReason.SAME_TEAM: "Both teams resolved to the same franchise",
    FailedReason.NO_START_TIME: "Start time not recognized",
}


# =============================================================================
# MATCH OUTCOME - Unified result object
# =============================================================================


@dataclass
class MatchOutcome:
    """Unified result object for title resolution.

    Use the factory methods to create instances:
        MatchOutcome.failed(FailedReason.TEAM1_NOT_FOUND, title=..., detail=...)
        MatchOutcome.matched(match, title=...)
    """

    category: ResultCategory
    failed_reason: FailedReason | None = None
    match: FranchiseMatch | None = None
    title: str | None = None
    detail: str | None = None

    @classmethod
    def failed(
        cls,
        reason: FailedReason,
        *,
        title: str | None = None,
        detail: str | None = None,
    ) -> "MatchOutcome":
        """Create a FAILED result."""
        return cls(
            category=ResultCategory.FAILED,
            failed_reason=reason,
            title=title,
            detail=detail,
        )

    @classmethod
    def matched(cls, match: FranchiseMatch, *, title: str | None = None) -> "MatchOutcome":
        """Create a MATCHED result."""
        return cls(category=ResultCategory.MATCHED, match=match, title=title)

    @property
    def is_matched(self) -> bool:
        return self.category == ResultCategory.MATCHED

    @property
    def is_failed(self) -> bool:
        return self.category == ResultCategory.FAILED


def get_display_text(outcome: MatchOutcome) -> str:
    """Get human-readable display text for a resolution result."""
    if outcome.is_matched and outcome.match:
        return f"Matched {outcome.match.identity}"
    if outcome.failed_reason:
        return FAILED_DISPLAY.get(outcome.failed_reason, outcome.failed_reason.value)
    return str(outcome)


# =============================================================================
# LOGGING UTILITIES
# =============================================================================


def log_result(
    logger: logging.Logger,
    outcome: MatchOutcome,
    max_title_len: int = 60,
) -> None:
    """Log a resolution result with consistent formatting.

    Format:
        [MATCHED] title -> SAS-CLE @ 2025-12-30 01:00
        [FAILED:reason] title | detail
    """
    title = outcome.title or ""
    display_title = title[:max_title_len]
    if len(title) > max_title_len:
        display_title += "..."

    if outcome.is_matched and outcome.match:
        logger.debug(
            "[MATCHED] %s -> %s @ %s",
            display_title,
            outcome.match.identity,
            outcome.match.start_time.strftime("%Y-%m-%d %H:%M"),
        )
        return

    reason = outcome.failed_reason.value if outcome.failed_reason else "unknown"
    if outcome.detail:
        logger.debug("[FAILED:%s] %s | %s", reason, display_title, outcome.detail)
    else:
        logger.debug("[FAILED:%s] %s", reason, display_title)


# =============================================================================
# AGGREGATION
# =============================================================================


@dataclass
class ResultAggregator:
    """Tallies outcomes across one batch."""

    matched: int = 0
    failed: Counter = field(default_factory=Counter)

    def add(self, outcome: MatchOutcome) -> None:
        if outcome.is_matched:
            self.matched += 1
        elif outcome.failed_reason:
            self.failed[outcome.failed_reason] += 1

    @property
    def failed_total(self) -> int:
        return sum(self.failed.values())

    @property
    def total(self) -> int:
        return self.matched + self.failed_total

    def summary(self) -> str:
        """One-line summary, e.g. 'matched=4 failed=2 (team1_not_found=1, ...)'."""
        text = f"matched={self.matched} failed={self.failed_total}"
        if self.failed:
            parts = ", ".join(
                f"{reason.value}={count}"
                for reason, count in sorted(self.failed.items(), key=lambda kv: kv[0].value)
            )
            text += f" ({parts})"
        return text
