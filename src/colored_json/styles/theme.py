"""TokenClass, Style and Theme: the table that maps each token class to a look.

A ``Theme`` is an immutable, complete mapping from every ``TokenClass`` to a
``Style``.  Completeness is checked once, in the constructor, so a render
never has to cope with a missing entry.

Example::

    from colored_json.styles import DEFAULT_THEME, Style

    theme = DEFAULT_THEME.replace(object_key=Style(fg="green"))
    theme.style_for(TokenClass.OBJECT_KEY).paint('"name"')
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from types import MappingProxyType

from termcolor import ATTRIBUTES, COLORS, HIGHLIGHTS, colored

from colored_json.errors import ThemeConfigurationError

__all__ = ["DEFAULT_THEME", "RESET_SEQUENCE", "Style", "Theme", "TokenClass", "style_for"]

# SGR reset; termcolor closes every painted span with it.
RESET_SEQUENCE = "\033[0m"


class TokenClass(StrEnum):
    """Semantic category of one span of rendered text."""

    OBJECT_KEY = auto()
    STRING_VALUE = auto()
    NUMBER_VALUE = auto()
    BOOL_VALUE = auto()
    NULL_VALUE = auto()
    ARRAY_BRACKET = auto()
    OBJECT_BRACE = auto()
    COMMA = auto()
    COLON = auto()


@dataclass(frozen=True, slots=True)
class Style:
    """A foreground/background color plus intensity attributes.

    Colors are termcolor names ("blue", "light_green", "dark_grey", ...).
    A Style with nothing set is *plain*: painting with it returns the text
    unchanged, without any escape sequence.

    Raises:
        ThemeConfigurationError: If ``fg`` or ``bg`` is not a known color.
    """

    fg: str | None = None
    bg: str | None = None
    bold: bool = False
    dim: bool = False
    underline: bool = False

    def __post_init__(self) -> None:
        if self.fg is not None and self.fg not in COLORS:
            msg = f"unknown foreground color {self.fg!r}"
            raise ThemeConfigurationError(msg)
        if self.bg is not None and f"on_{self.bg}" not in HIGHLIGHTS:
            msg = f"unknown background color {self.bg!r}"
            raise ThemeConfigurationError(msg)

    @property
    def is_plain(self) -> bool:
        return not (self.fg or self.bg or self.bold or self.dim or self.underline)

    @property
    def attrs(self) -> list[str]:
        flags = (("bold", self.bold), ("dark", self.dim), ("underline", self.underline))
        return [name for name, enabled in flags if enabled and name in ATTRIBUTES]

    def paint(self, text: str) -> str:
        """Wrap ``text`` in this style's start sequence and a single reset."""
        if self.is_plain:
            return text
        return colored(
            text,
            self.fg,
            f"on_{self.bg}" if self.bg else None,
            attrs=self.attrs or None,
            force_color=True,
        )


class Theme(Mapping[TokenClass, Style]):
    """Immutable, complete mapping from TokenClass to Style.

    Args:
        styles: A mapping keyed by TokenClass members or their string values
            ("object_key", "comma", ...).  Every TokenClass must be present.

    Raises:
        ThemeConfigurationError: If a TokenClass is missing, a key is not a
            TokenClass, or a value is not a Style.
    """

    __slots__ = ("_styles",)

    def __init__(self, styles: Mapping[TokenClass | str, Style]) -> None:
        resolved: dict[TokenClass, Style] = {}
        for key, style in styles.items():
            try:
                token = TokenClass(key)
            except ValueError:
                msg = f"{key!r} is not a token class"
                raise ThemeConfigurationError(msg) from None
            if not isinstance(style, Style):
                msg = f"style for {token} must be a Style, got {type(style).__name__}"
                raise ThemeConfigurationError(msg)
            resolved[token] = style

        missing = [token.value for token in TokenClass if token not in resolved]
        if missing:
            msg = f"theme has no style for: {', '.join(missing)}"
            raise ThemeConfigurationError(msg)

        self._styles: Mapping[TokenClass, Style] = MappingProxyType(resolved)

    def __getitem__(self, token: TokenClass) -> Style:
        return self._styles[token]

    def __iter__(self) -> Iterator[TokenClass]:
        return iter(self._styles)

    def __len__(self) -> int:
        return len(self._styles)

    def __repr__(self) -> str:
        return f"Theme({dict(self._styles)!r})"

    def style_for(self, token: TokenClass) -> Style:
        return self._styles[token]

    def replace(self, **overrides: Style) -> Theme:
        """Return a new Theme with some token classes restyled.

        Keyword names are TokenClass values, e.g.
        ``theme.replace(object_key=Style(fg="green"), comma=Style(dim=True))``.
        """
        return Theme({**self._styles, **overrides})


def style_for(theme: Theme, token: TokenClass) -> Style:
    """Look up the Style for ``token``; total for every constructed Theme."""
    return theme.style_for(token)


DEFAULT_THEME = Theme(
    {
        TokenClass.OBJECT_KEY: Style(fg="blue", bold=True),
        TokenClass.STRING_VALUE: Style(fg="green"),
        TokenClass.NUMBER_VALUE: Style(fg="cyan"),
        TokenClass.BOOL_VALUE: Style(fg="yellow"),
        TokenClass.NULL_VALUE: Style(fg="magenta"),
        TokenClass.ARRAY_BRACKET: Style(),
        TokenClass.OBJECT_BRACE: Style(),
        TokenClass.COMMA: Style(),
        TokenClass.COLON: Style(),
    }
)
