"""Unit tests for suffix comparison primitives.

Tests verify character access, strict ordering, three-way key comparison and
common prefix measurement on offsets into a shared text. Each test has a
single assertion.
"""

from suffixpy.core.comparators import (
    END_OF_SUFFIX,
    char_at,
    common_prefix_length,
    compare,
    is_less_than,
)

# pylint: disable=missing-function-docstring

TEXT = "banana"


class TestCharAt:
    """Test char_at behavior inside and past the text."""

    def test_returns_code_point_inside_text(self) -> None:
        assert char_at(TEXT, 0) == ord("b")

    def test_returns_sentinel_past_end(self) -> None:
        assert char_at(TEXT, 6) == END_OF_SUFFIX

    def test_sentinel_sorts_below_every_character(self) -> None:
        assert END_OF_SUFFIX < ord("\x00")


class TestIsLessThan:
    """Test is_less_than ordering of two suffixes."""

    def test_shorter_prefix_suffix_is_less(self) -> None:
        """When one suffix is a prefix of the other, the shorter one is less."""
        assert is_less_than(TEXT, 5, 3, 0) is True

    def test_longer_suffix_is_not_less_than_its_prefix(self) -> None:
        assert is_less_than(TEXT, 3, 5, 0) is False

    def test_same_offset_is_not_less(self) -> None:
        assert is_less_than(TEXT, 1, 1, 0) is False

    def test_first_mismatch_decides(self) -> None:
        """When suffixes differ at the first character, that character decides."""
        assert is_less_than(TEXT, 0, 2, 0) is True

    def test_comparison_starts_at_depth(self) -> None:
        """When depth is given, comparison starts after the known-equal prefix."""
        assert is_less_than(TEXT, 3, 1, 1) is True

    def test_depth_does_not_flip_order(self) -> None:
        assert is_less_than(TEXT, 1, 3, 1) is False

    def test_orders_by_code_point_beyond_ascii(self) -> None:
        assert is_less_than("zé", 0, 1, 0) is True


class TestCompare:
    """Test compare of an external key against a suffix."""

    def test_equal_key_returns_zero(self) -> None:
        assert compare(TEXT, "ana", 3) == 0

    def test_key_prefix_of_suffix_is_negative(self) -> None:
        """When key runs out while the suffix continues, key is less."""
        assert compare(TEXT, "an", 3) < 0

    def test_suffix_prefix_of_key_is_positive(self) -> None:
        """When the suffix runs out while the key continues, key is greater."""
        assert compare(TEXT, "anaz", 3) > 0

    def test_mismatch_returns_code_point_difference(self) -> None:
        assert compare(TEXT, "a", 2) == ord("a") - ord("n")

    def test_greater_mismatch_is_positive(self) -> None:
        assert compare(TEXT, "b", 1) == 1

    def test_empty_key_is_less_than_nonempty_suffix(self) -> None:
        assert compare(TEXT, "", 0) < 0

    def test_empty_key_against_empty_text_is_equal(self) -> None:
        assert compare("", "", 0) == 0

    def test_key_against_empty_text_is_greater(self) -> None:
        assert compare("", "x", 0) > 0


class TestCommonPrefixLength:
    """Test common_prefix_length between two suffixes."""

    def test_counts_shared_characters(self) -> None:
        assert common_prefix_length(TEXT, 1, 3) == 3

    def test_zero_when_first_character_differs(self) -> None:
        assert common_prefix_length(TEXT, 0, 2) == 0

    def test_stops_at_end_of_text(self) -> None:
        assert common_prefix_length(TEXT, 2, 4) == 2

    def test_same_offset_shares_whole_suffix(self) -> None:
        assert common_prefix_length(TEXT, 3, 3) == 3
