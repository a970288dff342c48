"""
Function test harness.

FunctionTest invokes an arbitrary function with given arguments, compares
the return value to an anticipated value, measures the run-time of the call
and writes the outcome to a text stream.

Write test series as follows::

    def fun(i, j):
        return [1, i, j]

    tester = FunctionTest(fun, sequences_equal, join_to_string)
    tester.test("Run 1", [1, 13, 15], 13, 15)
    tester.test("Run 2", [1, 13, 15], 13, 99)
"""

import logging
import sys
import time
from enum import Enum
from typing import Any, Callable, Optional, TextIO

from .comparator import values_equal
from .config import HarnessSettings
from .exceptions import ConfigurationError
from .models import FailureKind, TestOutcome
from .utils.constants import (
    DEFAULT_FILL_CHAR, DEFAULT_OUTPUT_LINE_LENGTH, DETAIL_SEPARATOR, EXCEPTION_TOKEN,
    EXPECTED_LABEL, FAILED_TOKEN, OK_TOKEN, RESULT_LABEL, TEST_PREFIX, UNKNOWN_EXCEPTION
)
from .utils.formatting import pad_line, unspecified_to_string

logger = logging.getLogger(__name__)

# Marks a result that was never produced because the function raised.
_NO_RESULT = object()


class HarnessProfile(str, Enum):
    """How a harness was configured at construction."""
    FULL = "full"                    # Comparator and to-string function supplied
    NO_TO_STRING = "no_to_string"    # Comparator supplied, placeholder to-string
    MINIMAL = "minimal"              # Equality comparator and str()


def _require_callable(field: str, value: Any) -> None:
    if not callable(value):
        raise ConfigurationError(
            f"{field} must be callable, got {type(value).__name__}",
            field=field,
            subtype="not_callable"
        )


def _exception_message(error: BaseException) -> Optional[str]:
    """Render an exception's message, or None if neither str() nor repr() works."""
    try:
        return str(error)
    except Exception:
        pass
    try:
        return repr(error)
    except Exception:
        return None


class FunctionTest:
    """
    Unit testing harness for a single function.

    The function, comparator and to-string function are fixed for the
    lifetime of the harness. ``verbose``, ``output_line_length`` and
    ``fill_char`` stay writable and are read on every call to :meth:`test`;
    the latter two are validated on assignment.
    """

    def __init__(
        self,
        function: Callable[..., Any],
        comparator: Optional[Callable[[Any, Any], bool]] = None,
        to_string: Optional[Callable[[Any], str]] = None,
        output: Optional[TextIO] = None,
        *,
        verbose: Optional[bool] = None,
        output_line_length: int = DEFAULT_OUTPUT_LINE_LENGTH,
        fill_char: str = DEFAULT_FILL_CHAR,
        result_factory: Optional[Callable[[], Any]] = None
    ):
        """
        Initialize the function tester.

        The construction profile follows from the supplied callables:

        - comparator and to_string: full profile, verbose on.
        - comparator only: to_string becomes a placeholder, verbose off.
        - no comparator: ``==`` comparison and ``str`` (or the given
          to_string), verbose on. Use with simple return types.

        Args:
            function: The function under test; must return a value
            comparator: Compares (actual, expected) results
            to_string: Renders a result for failure details
            output: Writable text stream for the report (defaults to sys.stdout)
            verbose: Overrides the profile's verbose default
            output_line_length: Width the "TESTING <name>: " prefix is padded to
            fill_char: Character used for padding
            result_factory: Builds the result returned when the function raises

        Raises:
            ConfigurationError: If a callable argument is not callable or a
                setting is out of range
        """
        _require_callable("function", function)
        if comparator is None:
            profile = HarnessProfile.MINIMAL
            comparator = values_equal
            to_string = to_string if to_string is not None else str
            default_verbose = True
        elif to_string is None:
            profile = HarnessProfile.NO_TO_STRING
            to_string = unspecified_to_string
            default_verbose = False
        else:
            profile = HarnessProfile.FULL
            default_verbose = True
        _require_callable("comparator", comparator)
        _require_callable("to_string", to_string)
        if result_factory is not None:
            _require_callable("result_factory", result_factory)

        self._function = function
        self._comparator = comparator
        self._to_string = to_string
        self._output = output if output is not None else sys.stdout
        self._result_factory = result_factory
        self._profile = profile

        self.verbose = default_verbose if verbose is None else verbose
        self.output_line_length = output_line_length
        self.fill_char = fill_char

    @classmethod
    def from_settings(
        cls,
        function: Callable[..., Any],
        settings: HarnessSettings,
        comparator: Optional[Callable[[Any, Any], bool]] = None,
        to_string: Optional[Callable[[Any], str]] = None,
        output: Optional[TextIO] = None,
        result_factory: Optional[Callable[[], Any]] = None
    ) -> "FunctionTest":
        """Create a harness whose mutable settings come from a HarnessSettings model."""
        return cls(
            function,
            comparator,
            to_string,
            output,
            verbose=settings.verbose,
            output_line_length=settings.output_line_length,
            fill_char=settings.fill_char,
            result_factory=result_factory
        )

    @property
    def function(self) -> Callable[..., Any]:
        return self._function

    @property
    def comparator(self) -> Callable[[Any, Any], bool]:
        return self._comparator

    @property
    def to_string(self) -> Callable[[Any], str]:
        return self._to_string

    @property
    def output(self) -> TextIO:
        return self._output

    @property
    def profile(self) -> HarnessProfile:
        return self._profile

    @property
    def output_line_length(self) -> int:
        return self._output_line_length

    @output_line_length.setter
    def output_line_length(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigurationError(
                f"output_line_length must be a non-negative integer, got {value!r}",
                field="output_line_length"
            )
        self._output_line_length = value

    @property
    def fill_char(self) -> str:
        return self._fill_char

    @fill_char.setter
    def fill_char(self, value: str) -> None:
        if not isinstance(value, str) or len(value) != 1:
            raise ConfigurationError(
                f"fill_char must be exactly one character, got {value!r}",
                field="fill_char"
            )
        self._fill_char = value

    def test(self, test_name: str, expected_result: Any, *args: Any, **kwargs: Any) -> TestOutcome:
        """
        Run the function once and report whether it returned the expected result.

        Writes "TESTING <name>: " padded to ``output_line_length``, then times
        the call and writes OK, FAILED (with details when verbose) or
        EXCEPTION. Anything raised by the function, the comparator or the
        to-string function is reported, never propagated.

        Args:
            test_name: Human-readable alias of the test written into the stream
            expected_result: The anticipated return value of the function
            *args: Positional arguments passed to the function
            **kwargs: Keyword arguments passed to the function

        Returns:
            TestOutcome(success, actual). ``actual`` is the function's return
            value, or a default-valued result if the function raised.
        """
        out = self._output
        out.write(pad_line(TEST_PREFIX + test_name + ": ", self.output_line_length, self.fill_char) + " ")

        actual = _NO_RESULT
        try:
            clock_start = time.perf_counter_ns()
            actual = self._function(*args, **kwargs)
            elapsed_ms = (time.perf_counter_ns() - clock_start) // 1_000_000

            if self._comparator(actual, expected_result):
                out.write(f"{OK_TOKEN} ({elapsed_ms} ms)\n")
                logger.debug(f"{test_name}: passed in {elapsed_ms} ms")
                return TestOutcome(True, actual)

            out.write(f"{FAILED_TOKEN} ({elapsed_ms} ms)\n")
            if self.verbose:
                out.write(
                    f"{RESULT_LABEL}{self._to_string(actual)}\n"
                    f"{EXPECTED_LABEL}{self._to_string(expected_result)}\n"
                    f"{DETAIL_SEPARATOR}\n"
                )
            logger.debug(f"{test_name}: {FailureKind.MISMATCH.value} in {elapsed_ms} ms")
            return TestOutcome(False, actual)
        except Exception as e:
            message = _exception_message(e)
            if message is None:
                out.write(f"{EXCEPTION_TOKEN}\n{UNKNOWN_EXCEPTION}\n")
                logger.debug(f"{test_name}: {FailureKind.EXCEPTION.value} {type(e).__name__} (unprintable)")
            else:
                out.write(f"{EXCEPTION_TOKEN}\n{type(e).__name__}:\n{message}\n")
                logger.debug(f"{test_name}: {FailureKind.EXCEPTION.value} {type(e).__name__}: {message}")
        except BaseException as e:
            out.write(f"{EXCEPTION_TOKEN}\n{UNKNOWN_EXCEPTION}\n")
            logger.debug(f"{test_name}: {FailureKind.UNKNOWN.value} {type(e).__name__}")

        if actual is _NO_RESULT:
            actual = self._default_result(expected_result)
        return TestOutcome(False, actual)

    def _default_result(self, expected_result: Any) -> Any:
        """Build the default-valued result, falling back to None."""
        if self._result_factory is not None:
            try:
                return self._result_factory()
            except Exception as e:
                logger.warning(f"result_factory failed with {type(e).__name__}, using None")
                return None
        try:
            return type(expected_result)()
        except Exception as e:
            logger.debug(f"{type(expected_result).__name__} has no default value ({type(e).__name__}), using None")
            return None

    def __repr__(self) -> str:
        name = getattr(self._function, "__qualname__", repr(self._function))
        return f"<{self.__class__.__name__}: {name} ({self._profile.value})>"
