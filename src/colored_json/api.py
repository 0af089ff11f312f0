"""Public API functions for colored-json.

This module provides the user-facing free functions: to_colored_json,
to_colored_json_auto, write_colored_json, colorize_text and
write_colorized_text.  Each call creates a fresh ColoredFormatter, so no
state survives between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from colored_json.formatter import ColoredFormatter
from colored_json.options import RenderOptions
from colored_json.styles.theme import Theme

if TYPE_CHECKING:
    from colored_json.protocols import Sink

__all__ = [
    "colorize_text",
    "to_colored_json",
    "to_colored_json_auto",
    "write_colored_json",
    "write_colorized_text",
]


def to_colored_json(
    value: Any,
    options: RenderOptions | None = None,
    theme: Theme | None = None,
) -> str:
    """Return ``value`` rendered as (optionally colored) JSON text.

    A string has no terminal behind it, so ``ColorMode.AUTO`` (the default)
    produces plain text; request ``ColorMode.ALWAYS`` for escape codes.

    Args:
        value:   A parsed JSON value (dict, list, str, int, float, bool, None).
        options: Layout and color settings.  Defaults to ``RenderOptions()``.
        theme:   Token styles.  Defaults to ``DEFAULT_THEME``.

    Returns:
        The rendered text, without a trailing newline.

    Raises:
        InvalidValueError: If ``value`` contains something with no JSON form.
    """
    return ColoredFormatter(theme=theme, options=options).to_colored_json(value)


def to_colored_json_auto(value: Any, theme: Theme | None = None) -> str:
    """Return ``value`` as pretty JSON, colored iff standard output is a terminal."""
    return ColoredFormatter(theme=theme).to_colored_json_auto(value)


def write_colored_json(
    value: Any,
    sink: Sink,
    options: RenderOptions | None = None,
    theme: Theme | None = None,
) -> None:
    """Write ``value`` as (optionally colored) JSON text into ``sink``.

    ``ColorMode.AUTO`` is resolved against ``sink.isatty()``.  Failures of
    ``sink.write``/``sink.flush`` propagate unchanged.

    Args:
        value:   A parsed JSON value.
        sink:    Text or binary stream.
        options: Layout and color settings.  Defaults to ``RenderOptions()``.
        theme:   Token styles.  Defaults to ``DEFAULT_THEME``.
    """
    ColoredFormatter(theme=theme, options=options).write_colored_json(value, sink)


def colorize_text(
    text: str | bytes,
    options: RenderOptions | None = None,
    theme: Theme | None = None,
) -> str:
    """Parse serialized JSON ``text`` and return it re-rendered with colors.

    Number literals keep their original spelling.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON.
        InvalidValueError: If ``text`` uses NaN or Infinity.
    """
    return ColoredFormatter(theme=theme, options=options).colorize_text(text)


def write_colorized_text(
    text: str | bytes,
    sink: Sink,
    options: RenderOptions | None = None,
    theme: Theme | None = None,
) -> None:
    """Parse serialized JSON ``text`` and write it re-rendered into ``sink``."""
    ColoredFormatter(theme=theme, options=options).write_colorized_text(text, sink)
