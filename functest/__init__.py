"""
Generic function test harness.
"""

from .harness import FunctionTest, HarnessProfile
from .models import TestOutcome, FailureKind
from .comparator import values_equal, sequences_equal, approx_equal
from .config import HarnessSettings
from .exceptions import FunctionTestError, ConfigurationError
from .utils.formatting import join_to_string, pad_line

__all__ = [
    "FunctionTest",
    "HarnessProfile",
    "TestOutcome",
    "FailureKind",
    "values_equal",
    "sequences_equal",
    "approx_equal",
    "HarnessSettings",
    "FunctionTestError",
    "ConfigurationError",
    "join_to_string",
    "pad_line"
]
