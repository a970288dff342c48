"""
Text helpers for the report stream.
"""

from typing import Any, Iterable

from .constants import DEFAULT_FILL_CHAR, DEFAULT_SEPARATOR, UNSPECIFIED_TO_STRING


def pad_line(text: str, width: int, fill: str = DEFAULT_FILL_CHAR) -> str:
    """
    Right-pad text with a fill character up to a given width.
    
    Text that already reaches the width is returned unchanged, never truncated.
    
    Args:
        text: Text to pad
        width: Target width in characters
        fill: Single fill character
        
    Returns:
        Padded text
    """
    return text.ljust(width, fill)


def join_to_string(values: Iterable[Any], separator: str = DEFAULT_SEPARATOR) -> str:
    """Render every element with str() and join them with a separator."""
    return separator.join(str(v) for v in values)


def unspecified_to_string(value: Any) -> str:
    """Placeholder to-string function that ignores its argument."""
    return UNSPECIFIED_TO_STRING
