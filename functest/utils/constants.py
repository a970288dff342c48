"""
Constants for the function test harness.

This module provides named constants for the report tokens and defaults
used throughout the codebase.
"""

# Report line tokens
TEST_PREFIX = "TESTING "
OK_TOKEN = "OK"
FAILED_TOKEN = "FAILED"
EXCEPTION_TOKEN = "EXCEPTION"
UNKNOWN_EXCEPTION = "unknown"
RESULT_LABEL = " RESULT:   "
EXPECTED_LABEL = " EXPECTED: "
DETAIL_SEPARATOR = "."

# Placeholder emitted when no to-string function was supplied
UNSPECIFIED_TO_STRING = "<to-string function not specified>"

# Default settings
DEFAULT_OUTPUT_LINE_LENGTH = 60
DEFAULT_FILL_CHAR = "."
DEFAULT_SEPARATOR = ", "

# Logging
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
