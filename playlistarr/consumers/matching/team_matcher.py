"""Team fragment resolution.

Maps the free-text team fragments cut out by title grammar to canonical
franchises. A fragment matches a franchise when it contains, case-sensitive:
- the full name ("Golden State Warriors") or short name ("Warriors")
- the acronym tag "(GSW)" or alternate tag "(GS)"

Accented letters are folded before the name check. The franchise table is
walked in order and the first hit wins. Both slots are resolved
independently; a pair where either slot misses, or both land on the same
franchise, is unresolved.
"""

import logging

from unidecode import unidecode

from playlistarr.consumers.matching.result import FailedReason
from playlistarr.core.types import Franchise
from playlistarr.utilities.constants import FRANCHISES

logger = logging.getLogger(__name__)


def _acronym_tags(franchise: Franchise) -> tuple[str, ...]:
    tags = [f"({franchise.acronym})"]
    if franchise.acronym_alt:
        tags.append(f"({franchise.acronym_alt})")
    return tuple(tags)


def fragment_mentions(fragment: str, franchise: Franchise) -> bool:
    """Check whether a team fragment refers to a franchise."""
    if any(tag in fragment for tag in _acronym_tags(franchise)):
        return True
    folded = unidecode(fragment)
    if franchise.name in folded:
        return True
    return bool(franchise.team_name) and franchise.team_name in folded


def resolve_franchise(fragment: str) -> Franchise | None:
    """Resolve one team fragment to the first franchise it mentions."""
    if not fragment:
        return None

    for franchise in FRANCHISES:
        if fragment_mentions(fragment, franchise):
            return franchise

    logger.debug("[TEAM] No franchise for fragment '%s'", fragment[:40])
    return None


def resolve_teams(
    team1: str, team2: str
) -> tuple[Franchise | None, Franchise | None, FailedReason | None]:
    """Resolve both team slots of a title.

    Returns:
        Tuple of (franchise1, franchise2, failed_reason). failed_reason is
        None only when both slots resolved to different franchises.
    """
    franchise1 = resolve_franchise(team1)
    franchise2 = resolve_franchise(team2)

    if franchise1 is None and franchise2 is None:
        return None, None, FailedReason.BOTH_TEAMS_NOT_FOUND
    if franchise1 is None:
        return None, franchise2, FailedReason.TEAM1_NOT_FOUND
    if franchise2 is None:
        return franchise1, None, FailedReason.TEAM2_NOT_FOUND
    if franchise1 == franchise2:
        logger.debug("[TEAM] '%s' and '%s' both resolve to %s", team1, team2, franchise1.acronym)
        return franchise1, franchise2, FailedReason.SAME_TEAM

    return franchise1, franchise2, None


def generate_match_id(team1: str, team2: str) -> str:
    """Match identity for two team fragments, e.g. 'SAS-CLE' ('' if unresolved)."""
    franchise1, franchise2, reason = resolve_teams(team1, team2)
    if reason is not None:
        return ""
    return f"{franchise1.acronym}-{franchise2.acronym}"
