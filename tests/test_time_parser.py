"""Tests for start time extraction.

Verifies that:
1. Each start time layout resolves to the right instant
2. US band labels follow daylight saving; unknown labels are UTC
3. Rounding lands on :00 / :30
4. Fallback year comes from the playlist path
5. Time tokens are stripped from titles
"""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest

from playlistarr.consumers.matching.time_parser import (
    WallClock,
    extract_fallback_year,
    parse_start_fragment,
    resolve_wall_clock,
    round_up_minutes,
    scan_title,
    strip_ordinals,
    strip_time_tokens,
    to_24h,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def utc():
    return ZoneInfo("UTC")


@pytest.fixture
def madrid():
    return ZoneInfo("Europe/Madrid")


# =============================================================================
# CONVERSION HELPERS
# =============================================================================


class TestConversionHelpers:
    @pytest.mark.parametrize(
        "hour,meridiem,expected",
        [
            (12, "AM", 0),
            (12, "PM", 12),
            (5, "PM", 17),
            ("7", "am", 7),
            (11, "pm", 23),
        ],
    )
    def test_to_24h(self, hour, meridiem, expected):
        assert to_24h(hour, meridiem) == expected

    @pytest.mark.parametrize(
        "minute,expected",
        [
            (55, 5),
            (50, 10),
            (59, 1),
            (25, 5),
            (20, 10),
            (10, 0),
            (30, 0),
            (49, 0),
            (0, 0),
        ],
    )
    def test_round_up_minutes(self, minute, expected):
        assert round_up_minutes(minute) == expected

    def test_strip_ordinals(self):
        assert strip_ordinals("Sat 3rd Jan 7:30PM ET") == "Sat 3 Jan 7:30PM ET"
        assert strip_ordinals("Tue 21st Oct") == "Tue 21 Oct"
        # Only when followed by a space
        assert strip_ordinals("4th,") == "4th,"


# =============================================================================
# LAYOUTS
# =============================================================================


class TestLayouts:
    """One test per recognized layout, all against a UTC viewer."""

    def test_start_token_is_utc(self, utc):
        result = scan_title("NBA 10 : Spurs x Cavs start:2025 12 30 00:10:00", 1999, utc)
        assert result == datetime(2025, 12, 30, 0, 10, tzinfo=UTC)

    def test_start_token_seconds_ignored(self, utc):
        result = parse_start_fragment("2025 12 30 00:10:59", 1999, utc)
        assert result == datetime(2025, 12, 30, 0, 10, tzinfo=UTC)

    def test_pipe_date_12h(self, utc):
        result = scan_title("NBA 5: Heat vs Magic | 12/23/2025 7:30 PM ET", 1999, utc)
        assert result == datetime(2025, 12, 24, 0, 30, tzinfo=UTC)

    def test_paren_12h_uses_fallback_year(self, utc):
        result = scan_title("NBA 27: Rockets vs Clippers (Home) (12.23 5:30PM ET)", 2025, utc)
        assert result == datetime(2025, 12, 23, 22, 30, tzinfo=UTC)

    def test_paren_24h(self, utc):
        result = scan_title("NBA 27: Rockets vs Clippers (12.23 17:30 ET)", 2025, utc)
        assert result == datetime(2025, 12, 23, 22, 30, tzinfo=UTC)

    def test_day_of_week(self, utc):
        result = scan_title("NBA 1: Lakers vs Suns | Tue 9th Dec 6:00PM ET", 2025, utc)
        assert result == datetime(2025, 12, 9, 23, 0, tzinfo=UTC)

    def test_day_of_week_fragment_with_ordinal(self, utc):
        result = parse_start_fragment("Sat 3rd Jan 7:30PM ET", 2026, utc)
        assert result == datetime(2026, 1, 4, 0, 30, tzinfo=UTC)

    def test_day_of_week_leading_zone(self, utc):
        result = parse_start_fragment("ET Fri 2 Jan 6:45pm", 2026, utc)
        assert result == datetime(2026, 1, 2, 23, 45, tzinfo=UTC)

    def test_fragment_without_delimiters(self, utc):
        result = parse_start_fragment("12.23 5:30PM ET", 2025, utc)
        assert result == datetime(2025, 12, 23, 22, 30, tzinfo=UTC)

    def test_fragment_with_delimiters(self, utc):
        result = parse_start_fragment("(12.23 5:30PM ET)", 2025, utc)
        assert result == datetime(2025, 12, 23, 22, 30, tzinfo=UTC)

    def test_start_token_wins_over_parens(self, utc):
        title = "NBA (12.23 5:30PM ET) start:2025 12 30 00:10:00"
        assert scan_title(title, 2025, utc) == datetime(2025, 12, 30, 0, 10, tzinfo=UTC)


# =============================================================================
# ZONES / ROUNDING
# =============================================================================


class TestZonesAndRounding:
    def test_daylight_saving_band(self, utc):
        # July: ET is EDT (-4)
        result = parse_start_fragment("07.04 7:00PM ET", 2025, utc)
        assert result == datetime(2025, 7, 4, 23, 0, tzinfo=UTC)

    def test_pacific_band(self, utc):
        result = parse_start_fragment("12.23 5:30PM PT", 2025, utc)
        assert result == datetime(2025, 12, 24, 1, 30, tzinfo=UTC)

    def test_unknown_band_is_utc(self, utc):
        result = parse_start_fragment("UK Fri 2 Jan 11:45pm", 2026, utc)
        assert result == datetime(2026, 1, 2, 23, 45, tzinfo=UTC)

    def test_missing_band_is_utc(self, utc):
        result = parse_start_fragment("Fri 2 Jan 6:45pm", 2026, utc)
        assert result == datetime(2026, 1, 2, 18, 45, tzinfo=UTC)

    def test_rounds_to_next_hour(self, utc):
        result = parse_start_fragment("12.23 5:55PM ET", 2025, utc)
        assert result == datetime(2025, 12, 23, 23, 0, tzinfo=UTC)

    def test_rounds_to_half_hour(self, utc):
        result = parse_start_fragment("12.23 5:25PM ET", 2025, utc)
        assert result == datetime(2025, 12, 23, 22, 30, tzinfo=UTC)

    def test_start_token_rounds(self, utc):
        result = parse_start_fragment("2025 12 30 00:50:00", 1999, utc)
        assert result == datetime(2025, 12, 30, 1, 0, tzinfo=UTC)

    def test_result_in_viewer_zone(self, madrid):
        result = parse_start_fragment("2025 12 30 00:50:00", 1999, madrid)
        assert result.tzinfo == madrid
        assert (result.hour, result.minute) == (2, 0)

    def test_wall_clock_rounding_crosses_midnight(self, utc):
        wall = WallClock(2025, 12, 31, 23, 55)
        assert resolve_wall_clock(wall, utc) == datetime(2026, 1, 1, 0, 0, tzinfo=UTC)


# =============================================================================
# ZONE LABEL CASE
# =============================================================================


class TestZoneLabelCase:
    @pytest.mark.parametrize(
        "text,fallback_year,expected",
        [
            ("| 12/23/2025 7:30 PM et", 2025, datetime(2025, 12, 24, 0, 30, tzinfo=UTC)),
            ("| 12/23/2025 7:30 pm Pst", 2025, datetime(2025, 12, 24, 3, 30, tzinfo=UTC)),
            ("(12.23 5:30pm et)", 2025, datetime(2025, 12, 23, 22, 30, tzinfo=UTC)),
            ("(12.23 5:30PM Pst)", 2025, datetime(2025, 12, 24, 1, 30, tzinfo=UTC)),
            ("(12.23 17:30 et)", 2025, datetime(2025, 12, 23, 22, 30, tzinfo=UTC)),
            ("(12.23 17:30 Pst)", 2025, datetime(2025, 12, 24, 1, 30, tzinfo=UTC)),
            ("Sat 3rd Jan 7:30pm et", 2026, datetime(2026, 1, 4, 0, 30, tzinfo=UTC)),
            ("Tue 9th Dec 6:00PM Pst", 2025, datetime(2025, 12, 10, 2, 0, tzinfo=UTC)),
        ],
    )
    def test_fragment_and_scan(self, utc, text, fallback_year, expected):
        assert parse_start_fragment(text, fallback_year, utc) == expected
        assert scan_title(f"NBA 1: Hawks vs Raptors {text}", fallback_year, utc) == expected

    def test_lower_case_leading_zone(self, utc):
        result = parse_start_fragment("et Fri 2 Jan 6:45pm", 2026, utc)
        assert result == datetime(2026, 1, 2, 23, 45, tzinfo=UTC)

    def test_word_after_clock_is_not_a_zone(self, utc):
        result = scan_title("NBA 1: Lakers vs Suns Tue 9th Dec 6:00PM Home", 2025, utc)
        assert result == datetime(2025, 12, 9, 18, 0, tzinfo=UTC)

    def test_team_name_before_weekday_is_not_a_zone(self, utc):
        result = scan_title("NBA 1: Lakers vs Suns Tue 9th Dec 6:00PM", 2025, utc)
        assert result == datetime(2025, 12, 9, 18, 0, tzinfo=UTC)


# =============================================================================
# NO RESULT
# =============================================================================


class TestNoResult:
    @pytest.mark.parametrize(
        "fragment",
        [
            "",
            "02.30 5:30PM ET",  # Feb 30
            "2025 13 01 10:00:00",  # month 13
            "12.23 25:30 ET",
            "tonight",
        ],
    )
    def test_fragment_unresolved(self, utc, fragment):
        assert parse_start_fragment(fragment, 2025, utc) is None

    def test_title_without_time(self, utc):
        assert scan_title("NBA 1: Lakers vs Suns", 2025, utc) is None
        assert scan_title("", 2025, utc) is None

    def test_scan_requires_delimiters(self, utc):
        # Bare "12.23 5:30PM ET" is only a fragment layout
        assert scan_title("Rockets 12.23 5:30PM ET", 2025, utc) is None


# =============================================================================
# FALLBACK YEAR
# =============================================================================


class TestFallbackYear:
    def test_from_file_name(self):
        assert extract_fallback_year("/data/playlist-2024-12-30.m3u") == 2024

    def test_from_directory(self):
        assert extract_fallback_year("/data/2023-01-05/list.m3u") == 2023

    def test_file_name_wins(self):
        assert extract_fallback_year("/data/2023-01-05/list-2024-02-02.m3u") == 2024

    def test_defaults_to_today(self):
        assert extract_fallback_year("/data/list.m3u", today=date(2026, 10, 19)) == 2026


# =============================================================================
# TOKEN STRIPPING
# =============================================================================


class TestStripTimeTokens:
    def test_paren_token(self):
        title = "NBA 27: Rockets vs Clippers (Home) (12.23 5:30PM ET)"
        assert strip_time_tokens(title) == "NBA 27: Rockets vs Clippers (Home)"

    def test_dangling_separator(self):
        title = "NBA 1: Lakers vs Suns | Tue 9th Dec 6:00PM ET"
        assert strip_time_tokens(title) == "NBA 1: Lakers vs Suns"

    def test_start_and_stop(self):
        title = "NBA 10 : Spurs x Cavs start:2025 12 30 00:50:00 stop:2025 12 30 04:50:00"
        assert strip_time_tokens(title) == "NBA 10 : Spurs x Cavs"

    def test_no_tokens(self):
        assert strip_time_tokens("NBA TV") == "NBA TV"

    def test_team_name_kept(self):
        title = "NBA 1: Lakers vs Suns Tue 9th Dec 6:00PM ET"
        assert strip_time_tokens(title) == "NBA 1: Lakers vs Suns"
