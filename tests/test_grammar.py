"""Tests for title grammar matching.

Verifies that:
1. Each title shape extracts channel / teams / start time
2. Shapes are tried in order and the first complete match wins
3. A structural match with an empty fragment falls through
"""

import pytest

from playlistarr.consumers.matching.grammar import (
    TITLE_SHAPES,
    TITLE_SHAPES_BY_NAME,
    match_shape,
    parse_title,
)


# =============================================================================
# SHAPES
# =============================================================================


class TestTitleShapes:
    """Test each provider layout."""

    def test_pipe(self):
        groups = parse_title(
            "USA | NBA 03: Atlanta Hawks vs Toronto Raptors | Sat 3rd Jan 7:30PM ET"
        )
        assert groups.shape == "pipe"
        assert groups.channel == "USA | NBA 03"
        assert groups.team1 == "Atlanta Hawks"
        assert groups.team2 == "Toronto Raptors"
        assert groups.start_time == "Sat 3rd Jan 7:30PM ET"

    def test_parenthesized(self):
        groups = parse_title("NBA 27: Rockets vs Clippers (Home) (12.23 5:30PM ET)")
        assert groups.shape == "parenthesized"
        assert groups.channel == "NBA 27"
        assert groups.team1 == "Rockets"
        assert groups.team2 == "Clippers"
        assert groups.stream_type == "Home"
        assert groups.start_time == "12.23 5:30PM ET"

    def test_start_stop(self):
        groups = parse_title(
            "NBA 10 : Spurs (SAS) x Cavaliers (CLE) "
            "start:2025 12 30 00:50:00 stop:2025 12 30 04:50:00"
        )
        assert groups.shape == "start_stop"
        assert groups.channel == "NBA 10"
        assert groups.team1 == "Spurs (SAS)"
        assert groups.team2 == "Cavaliers (CLE)"
        assert groups.start_time == "2025 12 30 00:50:00"
        assert groups.stop_time == "2025 12 30 04:50:00"

    def test_double_slash_uses_last_time(self):
        groups = parse_title(
            "NBA 02 : Brooklyn Nets @ Washington Wizards "
            "// UK Fri 2 Jan 11:45pm // ET Fri 2 Jan 6:45pm"
        )
        assert groups.shape == "double_slash"
        assert groups.team1 == "Brooklyn Nets"
        assert groups.team2 == "Washington Wizards"
        assert groups.alt_start_time == "UK Fri 2 Jan 11:45pm"
        assert groups.start_time == "ET Fri 2 Jan 6:45pm"

    def test_separator_case_insensitive(self):
        groups = parse_title("NBA 1: Lakers VS Suns | Tue 9th Dec 6:00PM ET")
        assert groups is not None
        assert groups.team1 == "Lakers"
        assert groups.team2 == "Suns"

    def test_every_shape_has_example(self):
        for shape in TITLE_SHAPES:
            assert match_shape(shape, shape.example) is not None, shape.name


# =============================================================================
# ORDER / FALL-THROUGH
# =============================================================================


class TestShapeOrder:
    """Test priority between overlapping shapes."""

    def test_pipe_shadows_pipe_stream(self):
        title = "NBA 27: Rockets vs Clippers | Away Stream | (12.23 5:30PM ET)"
        groups = parse_title(title)
        assert groups.shape == "pipe"
        assert groups.team2 == "Clippers | Away Stream"
        assert groups.start_time == "(12.23 5:30PM ET)"

    def test_pipe_stream_on_its_own(self):
        title = "NBA 27: Rockets vs Clippers | Away Stream | (12.23 5:30PM ET)"
        groups = match_shape(TITLE_SHAPES_BY_NAME["pipe_stream"], title)
        assert groups.team2 == "Clippers"
        assert groups.stream_type == "Away"
        assert groups.start_time == "(12.23 5:30PM ET)"

    def test_empty_fragment_falls_through(self):
        title = "NBA 27: Rockets vs Clippers (Home) (12.23 5:30PM ET) | "
        assert match_shape(TITLE_SHAPES_BY_NAME["pipe"], title) is None
        groups = parse_title(title)
        assert groups.shape == "parenthesized"
        assert groups.start_time == "12.23 5:30PM ET"


# =============================================================================
# NO MATCH
# =============================================================================


class TestNoMatch:
    @pytest.mark.parametrize(
        "title",
        [
            "",
            "NBA 1: Lakers vs Suns | ",
            "NBA 1: Lakers and Suns | Tue 9th Dec 6:00PM ET",
            "Lakers vs Suns | Tue 9th Dec 6:00PM ET",
            "NBA TV 24/7",
        ],
    )
    def test_unparseable(self, title):
        assert parse_title(title) is None
