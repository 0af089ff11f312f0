"""colored-json - ANSI-colored, pretty or compact rendering of parsed JSON values."""

from __future__ import annotations

import logging

from colored_json.api import (
    colorize_text,
    to_colored_json,
    to_colored_json_auto,
    write_colored_json,
    write_colorized_text,
)
from colored_json.color import ColorMode, enable_ansi_support
from colored_json.errors import (
    ColoredJsonError,
    DepthLimitError,
    InvalidValueError,
    ThemeConfigurationError,
)
from colored_json.formatter import ColoredFormatter
from colored_json.options import Layout, RenderOptions
from colored_json.styles import DEFAULT_THEME, Style, Theme, TokenClass
from colored_json.tree import JsonNumber

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "DEFAULT_THEME",
    "ColorMode",
    "ColoredFormatter",
    "ColoredJsonError",
    "DepthLimitError",
    "InvalidValueError",
    "JsonNumber",
    "Layout",
    "RenderOptions",
    "Style",
    "Theme",
    "ThemeConfigurationError",
    "TokenClass",
    "colorize_text",
    "enable_ansi_support",
    "to_colored_json",
    "to_colored_json_auto",
    "write_colored_json",
    "write_colorized_text",
]
