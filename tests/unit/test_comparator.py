"""
Unit tests for comparators and formatting helpers
"""

import pytest

from functest.comparator import values_equal, sequences_equal, approx_equal
from functest.utils.formatting import pad_line, join_to_string, unspecified_to_string
from functest.utils.constants import UNSPECIFIED_TO_STRING


class TestComparators:
    """Test the stock comparators."""

    def test_values_equal(self):
        assert values_equal(3, 3) is True
        assert values_equal("a", "b") is False

    def test_sequences_equal(self):
        """Test element-wise comparison across sequence types."""
        assert sequences_equal([1, 13, 15], [1, 13, 15]) is True
        assert sequences_equal([1, 13, 99], [1, 13, 15]) is False
        assert sequences_equal((1, 2), [1, 2]) is True

    def test_sequences_equal_length_mismatch(self):
        """Test that a shorter or longer sequence never matches."""
        assert sequences_equal([1, 2], [1, 2, 3]) is False
        assert sequences_equal([1, 2, 3], [1, 2]) is False
        assert sequences_equal([], []) is True

    def test_approx_equal(self):
        compare = approx_equal(rel_tol=1e-6)
        assert compare(0.1 + 0.2, 0.3) is True
        assert compare(1.0, 1.1) is False

    def test_approx_equal_abs_tol(self):
        compare = approx_equal(abs_tol=0.01)
        assert compare(0.0, 0.005) is True

    def test_approx_equal_rejects_negative_tolerance(self):
        with pytest.raises(ValueError):
            approx_equal(rel_tol=-1.0)


class TestFormatting:
    """Test the report text helpers."""

    def test_pad_line(self):
        assert pad_line("ab", 5) == "ab..."
        assert pad_line("ab", 5, "-") == "ab---"

    def test_pad_line_never_truncates(self):
        assert pad_line("abcdef", 3) == "abcdef"
        assert pad_line("abc", 3) == "abc"

    def test_join_to_string(self):
        assert join_to_string([1, 13, 15]) == "1, 13, 15"
        assert join_to_string(["a", "b"], "|") == "a|b"
        assert join_to_string([]) == ""

    def test_unspecified_to_string(self):
        assert unspecified_to_string(object()) == UNSPECIFIED_TO_STRING
