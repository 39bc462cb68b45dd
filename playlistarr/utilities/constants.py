"""Reference data for title matching.

Franchise table, US time band labels, month names and title cleansers.
Everything here is built once at import time and exposed read-only
(tuples and MappingProxyType) - nothing mutates it at runtime.
"""

from types import MappingProxyType

from playlistarr.core.types import Franchise

# =============================================================================
# NBA FRANCHISES
# Ordered by full name. Team resolution walks this order and takes the first
# hit, so the order is part of the behavior.
# =============================================================================

FRANCHISES: tuple[Franchise, ...] = (
    Franchise("Atlanta Hawks", "ATL", city="Atlanta", team_name="Hawks"),
    Franchise("Boston Celtics", "BOS", city="Boston", team_name="Celtics"),
    Franchise("Brooklyn Nets", "BKN", city="Brooklyn", team_name="Nets"),
    Franchise("Charlotte Hornets", "CHA", city="Charlotte", team_name="Hornets"),
    Franchise("Chicago Bulls", "CHI", city="Chicago", team_name="Bulls"),
    Franchise("Cleveland Cavaliers", "CLE", city="Cleveland", team_name="Cavaliers"),
    Franchise("Dallas Mavericks", "DAL", city="Dallas", team_name="Mavericks"),
    Franchise("Denver Nuggets", "DEN", city="Denver", team_name="Nuggets"),
    Franchise("Detroit Pistons", "DET", city="Detroit", team_name="Pistons"),
    Franchise(
        "Golden State Warriors", "GSW", acronym_alt="GS",
        city="San Francisco", team_name="Warriors",
    ),
    Franchise("Houston Rockets", "HOU", city="Houston", team_name="Rockets"),
    Franchise("Indiana Pacers", "IND", city="Indiana", team_name="Pacers"),
    Franchise("Los Angeles Clippers", "LAC", city="Los Angeles", team_name="Clippers"),
    Franchise("Los Angeles Lakers", "LAL", city="Los Angeles", team_name="Lakers"),
    Franchise("Memphis Grizzlies", "MEM", city="Memphis", team_name="Grizzlies"),
    Franchise("Miami Heat", "MIA", city="Miami", team_name="Heat"),
    Franchise("Milwaukee Bucks", "MIL", city="Milwaukee", team_name="Bucks"),
    Franchise("Minnesota Timberwolves", "MIN", city="Minnesota", team_name="Timberwolves"),
    Franchise(
        "New Orleans Pelicans", "NOP", acronym_alt="NO",
        city="New Orleans", team_name="Pelicans",
    ),
    Franchise("New York Knicks", "NYK", acronym_alt="NY", city="New York", team_name="Knicks"),
    Franchise("Oklahoma City Thunder", "OKC", city="Oklahoma", team_name="Thunder"),
    Franchise("Orlando Magic", "ORL", city="Orlando", team_name="Magic"),
    Franchise("Philadelphia 76ers", "PHI", city="Philadelphia", team_name="76ers"),
    Franchise("Phoenix Suns", "PHX", city="Phoenix", team_name="Suns"),
    Franchise("Portland Trail Blazers", "POR", city="Portland", team_name="Trail Blazers"),
    Franchise("Sacramento Kings", "SAC", city="Sacramento", team_name="Kings"),
    Franchise(
        "San Antonio Spurs", "SAS", acronym_alt="SA",
        city="San Antonio", team_name="Spurs",
    ),
    Franchise("Toronto Raptors", "TOR", city="Toronto", team_name="Raptors"),
    Franchise("Utah Jazz", "UTA", acronym_alt="UTAH", city="Utah", team_name="Jazz"),
    Franchise("Washington Wizards", "WAS", city="Washington", team_name="Wizards"),
)

FRANCHISES_BY_ACRONYM: MappingProxyType = MappingProxyType(
    {franchise.acronym: franchise for franchise in FRANCHISES}
)


# =============================================================================
# US TIME BANDS
# Band label -> representative IANA zone. Only US civil zones are supported;
# any other label resolves to a fixed zero offset.
# =============================================================================

US_TIME_BANDS: MappingProxyType = MappingProxyType(
    {
        # Eastern
        "ET": "America/New_York",
        "EST": "America/New_York",
        "EDT": "America/New_York",
        # Central
        "CT": "America/Chicago",
        "CST": "America/Chicago",
        "CDT": "America/Chicago",
        # Mountain (Phoenix skips DST; Denver is the representative city)
        "MT": "America/Denver",
        "MST": "America/Denver",
        "MDT": "America/Denver",
        # Pacific
        "PT": "America/Los_Angeles",
        "PST": "America/Los_Angeles",
        "PDT": "America/Los_Angeles",
        # Alaska
        "AKT": "America/Anchorage",
        "AKST": "America/Anchorage",
        "AKDT": "America/Anchorage",
        # Hawaii
        "HST": "Pacific/Honolulu",
        "HDT": "Pacific/Honolulu",
        "HT": "Pacific/Honolulu",
    }
)


# =============================================================================
# MONTH NAMES
# =============================================================================

MONTH_NUMBERS: MappingProxyType = MappingProxyType(
    {
        "jan": 1,
        "feb": 2,
        "mar": 3,
        "apr": 4,
        "may": 5,
        "jun": 6,
        "jul": 7,
        "aug": 8,
        "sep": 9,
        "oct": 10,
        "nov": 11,
        "dec": 12,
    }
)


# =============================================================================
# TITLE CLEANSERS
# (substrings to replace, replacement) - applied in order to every title
# =============================================================================

HOME_AWAY_CLEANSERS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("| Home Stream", "(Home)"), "(H)"),
    (("| Away Stream", "(Away)"), "(A)"),
)
