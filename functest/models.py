"""
Result types produced by the function test harness.
"""

from enum import Enum
from typing import Any, NamedTuple


class FailureKind(str, Enum):
    """Why a test invocation did not succeed."""
    MISMATCH = "MISMATCH"      # Comparator reported not-equal
    EXCEPTION = "EXCEPTION"    # Function raised an Exception subclass
    UNKNOWN = "UNKNOWN"        # Function raised some other BaseException


class TestOutcome(NamedTuple):
    """Outcome of a single test invocation: the success flag and the actual result."""
    success: bool
    actual: Any

    # Keep pytest from collecting this class as a test container.
    __test__ = False
