"""ColoredFormatter: wires TreeBuilder + color resolution + TreeWalker + SinkAdapter.

This is the central wiring layer between the renderer and the public API.

Architecture:
- Every call builds the JsonNode tree first.  Invalid shapes and excessive
  nesting are therefore reported before a single byte is produced.
- The color mode is resolved exactly once per call: against "not a
  terminal" for in-memory rendering, against the sink's own ``isatty()``
  for stream rendering.  The resulting flag is fixed inside a fresh
  TreeWalker for the rest of the call.
- Theme and RenderOptions are immutable, so one formatter can be shared
  across threads writing to independent sinks.
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import TYPE_CHECKING, Any

from colored_json.color import ColorMode, resolve, sink_is_terminal
from colored_json.options import RenderOptions
from colored_json.parsing import loads
from colored_json.sink import DEFAULT_BUFFER_SIZE, SinkAdapter
from colored_json.styles.theme import DEFAULT_THEME, Theme
from colored_json.tree.builder import TreeBuilder
from colored_json.tree.nodes import JsonNode
from colored_json.walker import TreeWalker

if TYPE_CHECKING:
    from colored_json.protocols import Sink

__all__ = ["ColoredFormatter"]

logger = logging.getLogger(__name__)


class ColoredFormatter:
    """Renders JSON values as colored text with a fixed Theme and RenderOptions.

    Example::

        from colored_json import DEFAULT_THEME, ColoredFormatter, Layout, RenderOptions, Style

        fmt = ColoredFormatter(
            theme=DEFAULT_THEME.replace(object_key=Style(fg="green")),
            options=RenderOptions(layout=Layout.COMPACT),
        )
        print(fmt.to_colored_json({"name": "John", "age": 31}, mode="always"))
    """

    def __init__(
        self,
        theme: Theme | None = None,
        options: RenderOptions | None = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> None:
        """Initialise the formatter.

        Args:
            theme:   Styles per token class.  Defaults to ``DEFAULT_THEME``.
            options: Layout and color settings.  Defaults to ``RenderOptions()``.
            buffer_size: Characters buffered before each write to a sink.
                This is an I/O parameter, not part of ``RenderOptions``.
        """
        self._theme: Theme = theme if theme is not None else DEFAULT_THEME
        self._options: RenderOptions = options if options is not None else RenderOptions()
        self._builder = TreeBuilder(max_depth=self._options.max_depth)
        self._buffer_size = buffer_size

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def options(self) -> RenderOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def to_colored_json(self, value: Any, mode: ColorMode | str | None = None) -> str:
        """Render ``value`` to a string.

        There is no terminal behind a string, so AUTO resolves to no color;
        pass ``mode=ColorMode.ALWAYS`` to get escape codes.

        Args:
            value: A parsed JSON value (dict, list, str, int, float, bool, None).
            mode:  Overrides ``options.color_mode`` for this call.

        Raises:
            InvalidValueError: If ``value`` cannot be written as JSON text.
        """
        return self._render(value, mode, terminal=False)

    def to_colored_json_auto(self, value: Any) -> str:
        """Render ``value`` to a string meant for ``sys.stdout``.

        AUTO is resolved against standard output, so the string is colored
        exactly when printing it would reach a terminal.
        """
        return self._render(value, ColorMode.AUTO, terminal=sink_is_terminal(sys.stdout))

    def write_colored_json(
        self, value: Any, sink: Sink, mode: ColorMode | str | None = None
    ) -> None:
        """Render ``value`` straight into ``sink`` and flush it.

        Args:
            value: A parsed JSON value.
            sink:  Text or binary stream (see ``protocols.Sink``).
            mode:  Overrides ``options.color_mode`` for this call.

        Raises:
            InvalidValueError: Before anything is written, if ``value`` cannot
                be written as JSON text.
            Exception: Whatever ``sink.write``/``sink.flush`` raises, unchanged.
        """
        node = self._builder.build(value)
        styled = self._resolve(mode, sink_is_terminal(sink))
        adapter = SinkAdapter(sink, styled=styled, buffer_size=self._buffer_size)
        adapter.write_all(self._walker(styled).chunks(node))
        adapter.flush()

    def colorize_text(self, text: str | bytes, mode: ColorMode | str | None = None) -> str:
        """Parse serialized JSON ``text`` and render it like ``to_colored_json``.

        Raises:
            json.JSONDecodeError: If ``text`` is not valid JSON.
        """
        return self.to_colored_json(loads(text), mode)

    def write_colorized_text(
        self, text: str | bytes, sink: Sink, mode: ColorMode | str | None = None
    ) -> None:
        """Parse serialized JSON ``text`` and write it like ``write_colored_json``."""
        self.write_colored_json(loads(text), sink, mode)

    def render_node(self, node: JsonNode, styled: bool) -> str:
        """Render an already built JsonNode tree with an explicit styling flag."""
        return self._walker(styled).render(node)

    def with_options(self, **changes: Any) -> ColoredFormatter:
        """Return a formatter sharing this theme with some options replaced."""
        return ColoredFormatter(
            self._theme, dataclasses.replace(self._options, **changes), self._buffer_size
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _render(self, value: Any, mode: ColorMode | str | None, terminal: bool) -> str:
        node = self._builder.build(value)
        return self.render_node(node, self._resolve(mode, terminal))

    def _resolve(self, mode: ColorMode | str | None, terminal: bool) -> bool:
        requested = self._options.color_mode if mode is None else ColorMode(mode)
        styled = resolve(requested, terminal)
        logger.debug(
            "color mode %s resolved to styled=%s (terminal=%s)", requested, styled, terminal
        )
        return styled

    def _walker(self, styled: bool) -> TreeWalker:
        return TreeWalker(self._theme, self._options, styled)
