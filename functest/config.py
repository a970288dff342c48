"""
Pydantic models for harness settings.

This module provides a validated settings model for the mutable fields of a
FunctionTest harness, loadable from a YAML file.
"""

from typing import Optional
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator
import yaml

from .exceptions import ConfigurationError
from .utils.constants import DEFAULT_FILL_CHAR, DEFAULT_OUTPUT_LINE_LENGTH


class HarnessSettings(BaseModel):
    """Mutable harness settings."""
    verbose: Optional[bool] = None  # None keeps the profile default
    output_line_length: int = Field(DEFAULT_OUTPUT_LINE_LENGTH, ge=0)
    fill_char: str = DEFAULT_FILL_CHAR

    @field_validator("fill_char")
    @classmethod
    def validate_fill_char(cls, v: str) -> str:
        """Validate that the fill character is a single character."""
        if len(v) != 1:
            raise ValueError(f"fill_char must be exactly one character, got {v!r}")
        return v

    @classmethod
    def load_from_file(cls, config_path: str) -> "HarnessSettings":
        """
        Load settings from a YAML file.

        The settings may sit at the top level or under a ``harness`` key.

        Args:
            config_path: Path to settings YAML file

        Returns:
            Validated HarnessSettings instance

        Raises:
            ConfigurationError: If the file is missing, empty or invalid
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigurationError(
                f"Settings file not found: {config_path}",
                config_path=str(config_path)
            )

        with open(config_file, 'r') as f:
            try:
                raw_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML in settings file: {e}",
                    config_path=str(config_path)
                ) from e

        if raw_config is None:
            raise ConfigurationError("Settings file is empty", config_path=str(config_path))

        if isinstance(raw_config, dict) and "harness" in raw_config:
            raw_config = raw_config["harness"]

        try:
            return cls.model_validate(raw_config)
        except ValidationError as e:
            field = ".".join(str(p) for p in e.errors()[0]["loc"]) if e.errors() else None
            raise ConfigurationError(
                f"Invalid settings: {e}",
                config_path=str(config_path),
                field=field or None
            ) from e
