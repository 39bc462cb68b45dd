"""Title grammar matching.

Titles come in a handful of provider-specific shapes. Each shape is a
(pattern, group names) record; shapes are tried in order and the first one
that matches with non-empty team1/team2/start time wins. A structural match
with an empty required fragment falls through to the next shape.

Shapes (separator is one of vs / x / @, case-insensitive):
1) <channel>: <team1> vs <team2> | <start time>
   USA | NBA 03: Atlanta Hawks vs Toronto Raptors | Sat 3rd Jan 7:30PM ET
2) <channel>: <team1> vs <team2> (<stream type>) (<start time>)
   NBA 27: Rockets vs Clippers (Home) (12.23 5:30PM ET)
3) <channel>: <team1> vs <team2> | <stream type> Stream | <start time>
   NBA 27: Rockets vs Clippers | Away Stream | (12.23 5:30PM ET)
4) <channel>: <team1> x <team2> start:<start time> stop:<stop time>
   NBA 10 : Spurs (SAS) x Cavaliers (CLE) start:2025 12 30 00:50:00 stop:2025 12 30 04:50:00
5) <channel>: <team1> @ <team2> // <alt start time> // <start time>
   NBA 02 : Brooklyn Nets @ Washington Wizards // UK Fri 2 Jan 11:45pm // ET Fri 2 Jan 6:45pm
"""

import logging
import re
from dataclasses import dataclass
from re import Pattern

from playlistarr.core.types import TitleGroups

logger = logging.getLogger(__name__)

_HEAD = r"(.*): (.*) (?:vs|x|@) (.*)"

REQUIRED_GROUPS = ("team1", "team2", "start_time")


@dataclass(frozen=True)
class TitleShape:
    """One recognizable title layout."""

    name: str
    pattern: Pattern
    groups: tuple[str, ...]  # TitleGroups field per capture group, in order
    example: str = ""


TITLE_SHAPES: tuple[TitleShape, ...] = (
    TitleShape(
        name="pipe",
        pattern=re.compile(_HEAD + r" \| (.*)", re.IGNORECASE),
        groups=("channel", "team1", "team2", "start_time"),
        example="USA | NBA 03: Atlanta Hawks vs Toronto Raptors | Sat 3rd Jan 7:30PM ET",
    ),
    TitleShape(
        name="parenthesized",
        pattern=re.compile(_HEAD + r" \((.*)\) \((.*)\)", re.IGNORECASE),
        groups=("channel", "team1", "team2", "stream_type", "start_time"),
        example="NBA 27: Rockets vs Clippers (Home) (12.23 5:30PM ET)",
    ),
    TitleShape(
        name="pipe_stream",
        pattern=re.compile(_HEAD + r" \| (.*) Stream \| (.*)", re.IGNORECASE),
        groups=("channel", "team1", "team2", "stream_type", "start_time"),
        example="NBA 27: Rockets vs Clippers | Away Stream | (12.23 5:30PM ET)",
    ),
    TitleShape(
        name="start_stop",
        pattern=re.compile(_HEAD + r" start:(.*) stop:(.*)", re.IGNORECASE),
        groups=("channel", "team1", "team2", "start_time", "stop_time"),
        example=(
            "NBA 10 : Spurs (SAS) x Cavaliers (CLE) "
            "start:2025 12 30 00:50:00 stop:2025 12 30 04:50:00"
        ),
    ),
    TitleShape(
        name="double_slash",
        pattern=re.compile(_HEAD + r" // (.*) // (.*)", re.IGNORECASE),
        groups=("channel", "team1", "team2", "alt_start_time", "start_time"),
        example="NBA 02 : Brooklyn Nets @ Washington Wizards // UK Fri 2 Jan 11:45pm // ET Fri 2 Jan 6:45pm",
    ),
)

TITLE_SHAPES_BY_NAME = {shape.name: shape for shape in TITLE_SHAPES}


def match_shape(shape: TitleShape, title: str) -> TitleGroups | None:
    """Apply a single shape to a title.

    Returns:
        TitleGroups when the shape matches and every required fragment is
        non-empty, else None
    """
    match = shape.pattern.search(title)
    if not match:
        return None

    fragments = {name: (value or "").strip() for name, value in zip(shape.groups, match.groups())}
    if any(not fragments.get(name) for name in REQUIRED_GROUPS):
        logger.debug("[GRAMMAR] Shape '%s' matched with empty fragment: %s", shape.name, title[:60])
        return None

    return TitleGroups(shape=shape.name, **fragments)


def parse_title(title: str) -> TitleGroups | None:
    """Extract channel/team/time fragments from a title.

    Tries TITLE_SHAPES in order; returns the first complete result, or None.
    """
    if not title:
        return None

    for shape in TITLE_SHAPES:
        groups = match_shape(shape, title)
        if groups is not None:
            return groups

    logger.debug("[GRAMMAR] No shape matched: %s", title[:60])
    return None
