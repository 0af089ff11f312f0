"""RenderOptions and Layout for a single render call.

RenderOptions is a frozen (immutable) dataclass holding every knob that
affects output.  Layout selects multi-line indented output or a single
whitespace-free line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from colored_json.color import ColorMode
from colored_json.tree.builder import DEFAULT_MAX_DEPTH

__all__ = ["Layout", "RenderOptions"]


class Layout(StrEnum):
    """How whitespace is laid out around tokens.

    - PRETTY:  One element or key/value pair per line, indented, ``": "``.
    - COMPACT: No whitespace at all, ``{"a":1,"b":[2,3]}``.
    """

    PRETTY = auto()
    COMPACT = auto()


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Immutable configuration for one render call.

    Attributes:
        color_mode: Requested ColorMode, resolved against the sink per call.
        layout: PRETTY or COMPACT.
        indent: Spaces per nesting level in PRETTY layout (>= 0).  Ignored in
            COMPACT layout.
        ensure_ascii: When True, non-ASCII characters in strings and keys are
            written as ``\\uXXXX`` escapes.  Default False.
        max_depth: Maximum container nesting accepted before DepthLimitError.
    """

    color_mode: ColorMode = ColorMode.AUTO
    layout: Layout = Layout.PRETTY
    indent: int = 2
    ensure_ascii: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        # Accept plain strings ("always", "compact") from callers and config files.
        object.__setattr__(self, "color_mode", ColorMode(self.color_mode))
        object.__setattr__(self, "layout", Layout(self.layout))
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            msg = f"indent must be an int, got {type(self.indent).__name__}"
            raise TypeError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)

    @property
    def compact(self) -> bool:
        return self.layout is Layout.COMPACT
