"""Styles subpackage: token classes, styles and themes.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.
"""

from __future__ import annotations

from colored_json.styles.theme import (
    DEFAULT_THEME,
    RESET_SEQUENCE,
    Style,
    Theme,
    TokenClass,
    style_for,
)

__all__ = ["DEFAULT_THEME", "RESET_SEQUENCE", "Style", "Theme", "TokenClass", "style_for"]
