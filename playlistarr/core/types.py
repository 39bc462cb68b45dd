"""Core data types for Playlistarr.

All data structures are dataclasses with attribute access.
"""

from dataclasses import dataclass, field
from datetime import datetime

# Attribute carrying the derived match identity (read by ordering and writer)
MATCH_ID_ATTRIBUTE = "nba-match-id"
GROUP_TITLE_ATTRIBUTE = "group-title"


@dataclass(frozen=True)
class Franchise:
    """Canonical NBA team identity."""

    name: str  # "Golden State Warriors"
    acronym: str  # "GSW"
    acronym_alt: str | None = None  # "GS"
    city: str = ""
    team_name: str = ""  # "Warriors"


@dataclass
class Entry:
    """One playlist item: #EXTINF metadata plus its URI.

    Attribute keys are case-insensitive: they are lower-cased on construction
    and by get_attribute()/set_attribute().
    """

    title: str
    uri: str
    attributes: dict[str, str] = field(default_factory=dict)
    duration: int = -1

    # Viewer-local start instant (aware), when one could be resolved
    start_time: datetime | None = None

    # Title as loaded - matching always parses this copy
    original_title: str = ""

    # Raw #EXTINF line as read from the source file
    raw: str = ""

    def __post_init__(self) -> None:
        self.attributes = {k.lower(): v for k, v in self.attributes.items()}
        if not self.original_title:
            self.original_title = self.title

    def get_attribute(self, key: str, default: str = "") -> str:
        return self.attributes.get(key.lower(), default)

    def set_attribute(self, key: str, value: str) -> None:
        self.attributes[key.lower()] = value

    @property
    def group_title(self) -> str:
        return self.get_attribute(GROUP_TITLE_ATTRIBUTE)

    @property
    def match_id(self) -> str:
        """Derived match identity (e.g. 'SAS-CLE'), or '' when unresolved."""
        return self.get_attribute(MATCH_ID_ATTRIBUTE)


@dataclass(frozen=True)
class TitleGroups:
    """Raw fragments extracted from a title by one grammar shape."""

    shape: str
    channel: str
    team1: str
    team2: str
    start_time: str
    stream_type: str = ""
    stop_time: str = ""
    alt_start_time: str = ""


@dataclass(frozen=True)
class FranchiseMatch:
    """A title fully resolved to two franchises and a start instant."""

    channel: str
    team1: Franchise
    team2: Franchise
    start_time: datetime  # viewer-local, rounded
    stream_type: str = ""

    @property
    def identity(self) -> str:
        """Match identity in title order, e.g. 'SAS-CLE'."""
        return f"{self.team1.acronym}-{self.team2.acronym}"

    @property
    def stream_tag(self) -> str:
        """Single-letter stream type tag ('H', 'A', ...) or ''."""
        return self.stream_type[:1].upper()
