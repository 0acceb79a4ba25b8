"""Tests for token resolution.

Validates resolve_part() and parse_pattern():
- Exact, case-sensitive matching against the closed vocabulary
- PartNotSupportedError carries the offending part and its offset
- Resolution stops at the first unsupported part
"""

import pytest
from hypothesis import given

from datepattern.diagnostics import DiagnosticCode, PartNotSupportedError
from datepattern.enums import Section, Separator
from datepattern.syntax import VOCABULARY, parse_pattern, resolve_part
from tests.strategies import unsupported_parts, valid_patterns


class TestVocabulary:
    """The vocabulary is closed and unambiguous."""

    def test_every_member_listed(self) -> None:
        assert set(VOCABULARY.values()) == set(Section) | set(Separator)

    def test_keys_are_canonical_spellings(self) -> None:
        for spelling, token in VOCABULARY.items():
            assert str(token) == spelling

    def test_spellings_pairwise_distinct(self) -> None:
        spellings = [str(token) for token in VOCABULARY.values()]
        assert len(spellings) == len(set(spellings))

    def test_full_name_sections_present(self) -> None:
        assert VOCABULARY["mmmm"] is Section.MMMM
        assert VOCABULARY["ddd"] is Section.DDD
        assert VOCABULARY["dddd"] is Section.DDDD


class TestResolvePart:
    """Test resolve_part()."""

    @pytest.mark.parametrize(
        ("part", "expected"),
        [
            ("yy", Section.YY),
            ("yyyy", Section.YYYY),
            ("m", Section.M),
            ("mm", Section.MM),
            ("mmm", Section.MMM),
            ("mmmm", Section.MMMM),
            ("d", Section.D),
            ("dd", Section.DD),
            ("ddd", Section.DDD),
            ("dddd", Section.DDDD),
            ("/", Separator.SLASH),
            (".", Separator.PERIOD),
            ("-", Separator.HYPHEN),
            (" ", Separator.SPACE),
        ],
    )
    def test_supported(self, part: str, expected: Section | Separator) -> None:
        assert resolve_part(part) is expected

    @pytest.mark.parametrize("part", ["YYYY", "Yy", "MM", "D", "yyy", "y", "mmmmm", "ddddd", "qq"])
    def test_unsupported(self, part: str) -> None:
        with pytest.raises(PartNotSupportedError) as exc_info:
            resolve_part(part)
        assert exc_info.value.part == part

    def test_error_reports_position(self) -> None:
        with pytest.raises(PartNotSupportedError) as exc_info:
            resolve_part("qq", position=7)
        error = exc_info.value
        assert error.position == 7
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.PART_NOT_SUPPORTED
        assert error.diagnostic.span is not None
        assert (error.diagnostic.span.start, error.diagnostic.span.end) == (7, 9)

    @given(part=unsupported_parts)
    def test_unsupported_part_reported_verbatim(self, part: str) -> None:
        with pytest.raises(PartNotSupportedError) as exc_info:
            resolve_part(part)
        assert exc_info.value.part == part
        assert str(exc_info.value) == f"Part not supported: {part}"


class TestParsePattern:
    """Test parse_pattern()."""

    def test_iso_pattern(self) -> None:
        assert parse_pattern("yyyy-mm-dd") == (
            Section.YYYY,
            Separator.HYPHEN,
            Section.MM,
            Separator.HYPHEN,
            Section.DD,
        )

    def test_double_separator(self) -> None:
        assert parse_pattern("yyyy--mm") == (
            Section.YYYY,
            Separator.HYPHEN,
            Separator.HYPHEN,
            Section.MM,
        )

    def test_empty_pattern_resolves_to_nothing(self) -> None:
        assert parse_pattern("") == ()

    def test_unsupported_part(self) -> None:
        with pytest.raises(PartNotSupportedError) as exc_info:
            parse_pattern("yy-qq")
        assert exc_info.value.part == "qq"
        assert exc_info.value.position == 3

    def test_first_failure_wins(self) -> None:
        """Parts after the first unsupported one are never examined."""
        with pytest.raises(PartNotSupportedError) as exc_info:
            parse_pattern("qq-zz-yy")
        assert exc_info.value.part == "qq"

    def test_comma_attached_to_section(self) -> None:
        with pytest.raises(PartNotSupportedError) as exc_info:
            parse_pattern("dddd, mmmm d, yyyy")
        assert exc_info.value.part == "dddd,"
        assert exc_info.value.position == 0

    @given(pattern=valid_patterns())
    def test_valid_patterns_round_trip_through_tokens(self, pattern: str) -> None:
        """Each token's spelling concatenates back to the pattern."""
        assert "".join(str(token) for token in parse_pattern(pattern)) == pattern
