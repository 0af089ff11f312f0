"""Color-capability resolution: decide once per render whether to emit ANSI codes.

The decision is a pure function of the requested ``ColorMode``, whether the
destination is an interactive terminal, and a read-only snapshot of the
environment.  Anything unknown resolves to "no color".
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any

__all__ = ["ColorMode", "enable_ansi_support", "resolve", "sink_is_terminal"]


class ColorMode(StrEnum):
    """Whether styling escape sequences are emitted.

    - AUTO:   Only when the sink is a terminal and no "no color" override is set.
    - ALWAYS: Unconditionally, even into files and pipes.
    - NEVER:  Never.
    - OFF:    Alias of NEVER kept for callers that think in on/off terms.
    """

    AUTO = auto()
    ALWAYS = auto()
    NEVER = auto()
    OFF = auto()


def _no_color_requested(env: Mapping[str, str]) -> bool:
    # https://no-color.org: any non-empty value disables color.
    if env.get("NO_COLOR"):
        return True
    if "ANSI_COLORS_DISABLED" in env:
        return True
    return env.get("TERM") == "dumb"


def resolve(
    mode: ColorMode | str,
    sink_is_terminal: bool,
    env: Mapping[str, str] | None = None,
) -> bool:
    """Return True if styling should be emitted for this render call.

    Args:
        mode:             Requested ColorMode (member or its string value).
        sink_is_terminal: Whether the destination is an interactive terminal.
        env:              Environment to inspect for overrides.  Defaults to
                          ``os.environ``; only consulted in AUTO mode.

    Returns:
        The resolved "styling enabled" flag.
    """
    mode = ColorMode(mode)
    if mode is ColorMode.ALWAYS:
        return True
    if mode in (ColorMode.NEVER, ColorMode.OFF):
        return False
    if not sink_is_terminal:
        return False
    return not _no_color_requested(os.environ if env is None else env)


def sink_is_terminal(stream: Any) -> bool:
    """True if ``stream`` reports itself as an interactive terminal.

    Streams without ``isatty``, closed files and anything else that fails
    the check count as non-terminals.
    """
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (ValueError, OSError):
        return False


def enable_ansi_support() -> None:
    """Turn on ANSI escape processing for legacy Windows consoles.

    A no-op on every other platform, and on Windows terminals that already
    understand ANSI sequences.
    """
    if sys.platform != "win32":
        return
    import colorama

    colorama.just_fix_windows_console()
