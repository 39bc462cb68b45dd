"""Title resolution - the single entry point for matching one title.

Flow:
1. Title grammar extracts channel / team / time fragments
2. Team fragments resolve to two distinct franchises
3. The start fragment resolves to a rounded viewer-local instant
"""

import logging
from datetime import tzinfo

from playlistarr.consumers.matching.grammar import parse_title
from playlistarr.consumers.matching.result import FailedReason, MatchOutcome
from playlistarr.consumers.matching.team_matcher import resolve_teams
from playlistarr.consumers.matching.time_parser import parse_start_fragment
from playlistarr.core.types import FranchiseMatch

logger = logging.getLogger(__name__)


def resolve_title(
    title: str,
    fallback_year: int,
    viewer_tz: tzinfo | None = None,
) -> MatchOutcome:
    """Resolve a title to a FranchiseMatch.

    Args:
        title: Entry title as loaded
        fallback_year: Year for start times that don't carry one
        viewer_tz: Target zone (None = configured viewer timezone)

    Returns:
        MatchOutcome - MATCHED with the match, or FAILED with the reason
    """
    groups = parse_title(title)
    if groups is None:
        return MatchOutcome.failed(FailedReason.TITLE_NOT_PARSED, title=title)

    team1, team2, reason = resolve_teams(groups.team1, groups.team2)
    if reason is not None:
        return MatchOutcome.failed(
            reason,
            title=title,
            detail=f"'{groups.team1}' vs '{groups.team2}'",
        )

    start_time = parse_start_fragment(groups.start_time, fallback_year, viewer_tz)
    if start_time is None:
        return MatchOutcome.failed(
            FailedReason.NO_START_TIME,
            title=title,
            detail=groups.start_time,
        )

    return MatchOutcome.matched(
        FranchiseMatch(
            channel=groups.channel,
            team1=team1,
            team2=team2,
            start_time=start_time,
            stream_type=groups.stream_type,
        ),
        title=title,
    )
