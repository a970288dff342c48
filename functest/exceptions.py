"""
Exception hierarchy for the function test harness.

These exceptions describe misuse of the harness itself. Failures raised by a
function under test are never wrapped in them; they are reported on the
output stream instead.
"""

from typing import Optional, Dict, Any


class FunctionTestError(Exception):
    """Base exception for all function test harness errors."""

    def __init__(
        self,
        message: str,
        subtype: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize function test error.

        Args:
            message: Human-readable error message
            subtype: Optional error subtype (e.g., "configuration", "not_callable")
            context: Optional additional context dictionary
        """
        super().__init__(message)
        self.message = message
        self.subtype = subtype
        self.context = context or {}

    def __str__(self) -> str:
        if self.subtype:
            return f"[{self.subtype}] {self.message}"
        return self.message


class ConfigurationError(FunctionTestError):
    """Exception raised for invalid harness arguments or settings files."""

    def __init__(
        self,
        message: str,
        config_path: Optional[str] = None,
        field: Optional[str] = None,
        **kwargs
    ):
        """
        Initialize configuration error.

        Args:
            message: Error message
            config_path: Path to settings file (if applicable)
            field: Argument or settings field that caused the error (if applicable)
            **kwargs: Additional arguments passed to base class
        """
        context = kwargs.pop("context", {})
        if config_path:
            context["config_path"] = config_path
        if field:
            context["field"] = field

        super().__init__(
            message,
            subtype=kwargs.pop("subtype", "configuration"),
            context=context,
            **kwargs
        )
        self.config_path = config_path
        self.field = field
