"""
Result comparators for the function test harness.

A comparator takes (actual, expected) and returns True when the actual
result matches the expected one.
"""

import math
from typing import Any, Callable, Sequence

Comparator = Callable[[Any, Any], bool]


def values_equal(actual: Any, expected: Any) -> bool:
    """Compare two results with ``==``."""
    return bool(actual == expected)


def sequences_equal(actual: Sequence[Any], expected: Sequence[Any]) -> bool:
    """
    Compare two sequences element by element.

    Sequences of different lengths never match.

    Args:
        actual: Sequence returned by the function
        expected: Anticipated sequence

    Returns:
        True if both sequences have the same length and equal elements
    """
    if len(actual) != len(expected):
        return False
    return all(a == e for a, e in zip(actual, expected))


def approx_equal(rel_tol: float = 1e-9, abs_tol: float = 0.0) -> Comparator:
    """
    Build a comparator for floating point results.

    Args:
        rel_tol: Relative tolerance passed to math.isclose
        abs_tol: Absolute tolerance passed to math.isclose

    Returns:
        Comparator accepting (actual, expected)
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError("tolerances must be non-negative")

    def compare(actual: float, expected: float) -> bool:
        return math.isclose(actual, expected, rel_tol=rel_tol, abs_tol=abs_tol)

    return compare
