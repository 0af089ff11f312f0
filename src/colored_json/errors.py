"""Exception hierarchy for colored-json.

Sink failures have no class here: whatever the caller's stream raises
(``OSError``, ``BrokenPipeError``, ...) reaches the caller unchanged.
"""

from __future__ import annotations

__all__ = [
    "ColoredJsonError",
    "DepthLimitError",
    "InvalidValueError",
    "ThemeConfigurationError",
]


class ColoredJsonError(Exception):
    """Base class for every error raised by colored-json itself."""


class InvalidValueError(ColoredJsonError, ValueError):
    """The input contains something that cannot be written as JSON text.

    Raised for non-finite floats, non-string object keys, malformed number
    literals and unsupported Python types.  Always raised before any byte of
    the affected render call reaches the sink.

    Attributes:
        path: JSON Pointer of the offending node ("" for the root).
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(f"{message} (at {path or '/'!r})")
        self.path = path


class DepthLimitError(InvalidValueError):
    """The input nests containers deeper than ``RenderOptions.max_depth``."""


class ThemeConfigurationError(ColoredJsonError, ValueError):
    """A Theme is incomplete or refers to an unknown color or attribute."""
