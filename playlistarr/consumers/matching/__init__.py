"""Title matching module.

Provides title grammar, team resolution, start time resolution and result
tracking.

Main entry point:
    from playlistarr.consumers.matching import resolve_title

    outcome = resolve_title(title, fallback_year=2025)
    if outcome.is_matched:
        print(outcome.match.identity, outcome.match.start_time)
"""

from playlistarr.consumers.matching.grammar import (
    TITLE_SHAPES,
    TitleShape,
    match_shape,
    parse_title,
)
from playlistarr.consumers.matching.matcher import resolve_title
from playlistarr.consumers.matching.result import (
    FailedReason,
    MatchOutcome,
    ResultAggregator,
    ResultCategory,
)
from playlistarr.consumers.matching.team_matcher import (
    generate_match_id,
    resolve_franchise,
    resolve_teams,
)
from playlistarr.consumers.matching.time_parser import (
    extract_fallback_year,
    parse_start_fragment,
    round_up_minutes,
    scan_title,
    strip_time_tokens,
    to_24h,
)

__all__ = [
    # Main entry point
    "resolve_title",
    # Result types
    "ResultCategory",
    "FailedReason",
    "MatchOutcome",
    "ResultAggregator",
    # Grammar
    "TITLE_SHAPES",
    "TitleShape",
    "match_shape",
    "parse_title",
    # Teams
    "generate_match_id",
    "resolve_franchise",
    "resolve_teams",
    # Times
    "extract_fallback_year",
    "parse_start_fragment",
    "round_up_minutes",
    "scan_title",
    "strip_time_tokens",
    "to_24h",
]
