# SPDX-License-Identifier: MIT
"""Unit tests for range parsing and matching."""

import pytest

from semver_range import (
    All,
    AnyOf,
    Just,
    MatchMode,
    ParseError,
    RangeUnit,
    is_valid_range,
    parse_range,
    parse_version,
    range_matches,
)
from semver_range.identifiers import MAX_NUMERIC


class TestParseRange:
    """Tests for parse_range assembly."""

    def test_single_unit(self):
        """Test that one unit parses to Just."""
        r = parse_range("1.2.3")
        assert isinstance(r, Just)
        assert str(r) == "1.2.3"

    def test_surrounding_spaces(self):
        """Test that leading and trailing spaces are ignored."""
        assert str(parse_range("   1.2.3    ")) == "1.2.3"

    def test_conjunction(self):
        """Test that space-separated units parse to All."""
        r = parse_range("1.2.3 <2.0.0")
        assert isinstance(r, All)
        assert len(r.units) == 2
        assert str(r) == "1.2.3 <2.0.0"

    def test_three_units(self):
        """Test a conjunction of three units."""
        assert str(parse_range("1.2.3 4.5.6 7.8.9")) == "1.2.3 4.5.6 7.8.9"

    def test_extra_spaces_between_units(self):
        """Test that runs of spaces between units collapse when rendered."""
        assert str(parse_range(">=1.0.0    <2.0.0")) == ">=1.0.0 <2.0.0"

    def test_disjunction(self):
        """Test that || parses to AnyOf."""
        r = parse_range("1.2.3 || 4.5.6")
        assert isinstance(r, AnyOf)
        assert str(r) == "1.2.3 || 4.5.6"

    def test_disjunction_of_groups(self):
        """Test that each || group keeps its own units."""
        r = parse_range("1.2.3 4.5.6 || 7.8.9")
        assert isinstance(r, AnyOf)
        assert [len(group) for group in r.groups] == [2, 1]
        assert str(r) == "1.2.3 4.5.6 || 7.8.9"

    def test_three_groups(self):
        """Test a disjunction of three groups."""
        assert str(parse_range("1.2.3 || 4.5.6 || 7.8.9")) == "1.2.3 || 4.5.6 || 7.8.9"

    def test_or_without_spaces(self):
        """Test that || needs no surrounding spaces."""
        assert str(parse_range("1.2.3||4.5.6")) == "1.2.3 || 4.5.6"

    def test_shorthands_rendered_expanded(self):
        """Test that shorthands render as their explicit bounds."""
        assert str(parse_range("^1.2.3 || 4.5.6")) == ">=1.2.3 <2.0.0-0 || 4.5.6"

    def test_hyphen_inside_group(self):
        """Test that a hyphen range may appear in an || group."""
        assert str(parse_range("1.2.3 - 2.3.4 || >3")) == ">=1.2.3 <=2.3.4 || >=4.0.0"

    def test_units_are_comparable_values(self):
        """Test that equal expansions compare equal."""
        assert parse_range("~1.2.3") == parse_range("~1.2.3")
        assert parse_range("~1.2.3") == Just(RangeUnit.parse("1.2.3 - 1.2")[0])

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "  ",
            "1.2.3 ???",
            "1.2.3 ||",
            "1.2.3 || ",
            "|| 1.2.3",
            "1.2.3 || || 4.5.6",
            "1.**",
            "1.2.3<2.0.0",
            ">*",
            "<*",
            "~*",
            "^*",
            "^1",
            "^1.2",
            ">1 - 2",
            "1.2.3 - 4.5.6 - 7.8.9",
            "1.2.3\t<2.0.0",
        ],
    )
    def test_rejected(self, text):
        """Test that malformed ranges raise ParseError and are not valid."""
        with pytest.raises(ParseError):
            parse_range(text)
        assert is_valid_range(text) is False

    def test_non_string(self):
        """Test that non-string input is rejected."""
        with pytest.raises(ParseError):
            parse_range(None)  # type: ignore
        assert is_valid_range(42) is False  # type: ignore

    def test_very_long_number(self):
        """Test that thousands of digits fail parsing instead of overflowing."""
        text = ">=" + "1" * 5000
        assert is_valid_range(text) is False
        with pytest.raises(ParseError):
            parse_range(text)

    @pytest.mark.parametrize(
        "text", [f"^{MAX_NUMERIC}.0.0", f"~1.{MAX_NUMERIC}.0", f"{MAX_NUMERIC}.x"]
    )
    def test_upper_edge_out_of_range(self, text):
        """Test that ranges needing a number past the 32-bit limit are rejected."""
        assert is_valid_range(text) is False
        with pytest.raises(ParseError):
            parse_range(text)

    def test_rendering_reparses_at_limit(self):
        """Test that an expansion reaching the limit renders valid text."""
        rendered = str(parse_range(f"^{MAX_NUMERIC - 1}.0.0"))
        assert is_valid_range(rendered) is True


class TestRangeMatches:
    """Tests for range_matches."""

    @pytest.mark.parametrize(
        "version, expected",
        [("1.2.3", True), ("1.9.9", True), ("2.0.0", False), ("1.2.2", False)],
    )
    def test_caret(self, version, expected):
        """Test the caret window for a major version above zero."""
        assert range_matches("^1.2.3", version) is expected

    @pytest.mark.parametrize(
        "text, inside, outside",
        [
            ("^0.1.2", "0.1.9", "0.2.0"),
            ("^0.0.1", "0.0.1", "0.0.2"),
            ("~1.2.3", "1.2.9", "1.3.0"),
        ],
    )
    def test_upper_bounds(self, text, inside, outside):
        """Test the upper edge of caret and tilde windows."""
        assert range_matches(text, inside) is True
        assert range_matches(text, outside) is False

    def test_hyphen_inclusive_upper(self):
        """Test that a full-version hyphen upper edge is inclusive."""
        assert range_matches("1.2.3 - 4.5.6", "4.5.6") is True
        assert range_matches("1.2.3 - 4.5.6", "4.5.7") is False
        assert range_matches("1.2.3 - 4.5.6", "1.2.2") is False

    def test_hyphen_partial_upper(self):
        """Test that a pattern hyphen upper edge covers the whole pattern."""
        assert range_matches("1.2.3 - 4.5", "4.5.99") is True
        assert range_matches("1.2.3 - 4.5", "4.6.0") is False
        assert range_matches("1.2.3 - 4.5", "5.0.0") is False

    def test_hyphen_open_upper(self):
        """Test that a wildcard hyphen upper edge is unbounded."""
        assert range_matches("1.2.3 - *", "999.0.0") is True
        assert range_matches("1.2.3 - *", "1.2.2") is False

    def test_and_group(self):
        """Test that every unit of a group must match."""
        r = parse_range("1.2.3 4.5.6 || 7.8.9")
        assert r.matches(parse_version("7.8.9")) is True
        assert r.matches(parse_version("1.2.3")) is False
        assert r.matches(parse_version("4.5.6")) is False

    @pytest.mark.parametrize("version", ["1.2.3", "4.5.6", "7.8.9"])
    def test_or_groups(self, version):
        """Test that any single group is enough to match."""
        assert range_matches("1.2.3 || 4.5.6 || 7.8.9", version) is True

    def test_or_groups_no_match(self):
        """Test that a version outside every group does not match."""
        assert range_matches("1.2.3 || 4.5.6 || 7.8.9", "5.0.0") is False

    def test_window(self):
        """Test an explicit lower and upper bound."""
        r = parse_range(">=1.0.0 <2.0.0")
        assert r.matches(parse_version("1.5.0")) is True
        assert r.matches(parse_version("2.0.0")) is False
        assert r.matches(parse_version("0.9.9")) is False

    def test_wildcard_matches_any_release(self):
        """Test that * and x match every release."""
        assert range_matches("*", "0.0.0") is True
        assert range_matches("x", "123.4.5") is True

    def test_wildcard_and_prereleases(self):
        """Test that * admits pre-releases only in classic mode."""
        assert range_matches("*", "1.0.0-rc.1") is False
        assert range_matches("*", "1.0.0-rc.1", MatchMode.CLASSIC) is True

    def test_build_ignored(self):
        """Test that build metadata does not affect matching."""
        assert range_matches("1.2.3", "1.2.3+build.7") is True


class TestMatchModes:
    """Tests for the difference between NODE and CLASSIC matching."""

    def test_prerelease_outside_core(self):
        """Test a pre-release whose core differs from the bound's."""
        assert range_matches(">=1.2.3", "1.2.4-0", MatchMode.NODE) is False
        assert range_matches(">=1.2.3", "1.2.4-0", MatchMode.CLASSIC) is True

    def test_prerelease_same_core(self):
        """Test a pre-release of the bound's own core."""
        assert range_matches(">=1.2.3-0", "1.2.3-0", MatchMode.NODE) is True
        assert range_matches(">=1.2.3-0", "1.2.3-0", MatchMode.CLASSIC) is True

    def test_default_mode_is_node(self):
        """Test that node mode applies when no mode is given."""
        assert range_matches(">=1.2.3", "1.2.4-0") is False

    def test_mode_by_name(self):
        """Test that the mode may be given by name."""
        assert range_matches(">=1.2.3", "1.2.4-0", "classic") is True

    def test_same_range_under_both_modes(self):
        """Test that one parsed range serves both modes unchanged."""
        r = parse_range(">=1.0.0")
        version = parse_version("1.5.0-beta")
        assert r.matches(version, MatchMode.CLASSIC) is True
        assert r.matches(version, MatchMode.NODE) is False
        assert r.matches(version, MatchMode.CLASSIC) is True

    def test_invalid_mode(self):
        """Test that an unknown mode name raises ValueError."""
        with pytest.raises(ValueError):
            range_matches(">=1.0.0", "1.0.0", "strict")
