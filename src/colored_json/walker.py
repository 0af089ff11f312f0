"""TreeWalker: recursive renderer from a JsonNode tree to styled text chunks.

The walker is the only place that decides what text is emitted and how it
is styled; every public entry point funnels through it.  It performs no I/O:
``chunks()`` yields strings and the caller decides where they go.

Chunk contract:
    Each yielded chunk is the whitespace that precedes one token followed by
    that token, fully painted (start codes, text, reset).  A token is never
    split across chunks, so a consumer that stops after any chunk leaves no
    style open.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from json.encoder import encode_basestring, encode_basestring_ascii

from colored_json.classifier import Role, classify, classify_punctuation
from colored_json.options import RenderOptions
from colored_json.styles.theme import Theme, TokenClass
from colored_json.tree.nodes import JsonNode, NodeKind

__all__ = ["TreeWalker"]

_DELIMITERS: dict[NodeKind, tuple[str, str]] = {
    NodeKind.ARRAY: ("[", "]"),
    NodeKind.OBJECT: ("{", "}"),
}

# Surrogate code points survive json.loads but cannot be encoded to UTF-8.
_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _quote_unicode(text: str) -> str:
    return _SURROGATE_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", encode_basestring(text))


class TreeWalker:
    """Renders JsonNode trees according to a Theme and RenderOptions.

    Args:
        theme:   Complete Theme used to look up each token's Style.
        options: Layout, indentation and string escaping settings.
        styled:  The resolved "styling enabled" flag.  Fixed for the walker's
                 lifetime, never re-evaluated mid-render.

    Example::

        walker = TreeWalker(DEFAULT_THEME, RenderOptions(layout="compact"), styled=False)
        walker.render(TreeBuilder().build({"a": [1, 2]}))
        # '{"a":[1,2]}'
    """

    def __init__(self, theme: Theme, options: RenderOptions, styled: bool) -> None:
        self._theme = theme
        self._options = options
        self._styled = styled
        self._quote = encode_basestring_ascii if options.ensure_ascii else _quote_unicode
        self._pretty = not options.compact
        self._colon_gap = " " if self._pretty else ""

    @property
    def styled(self) -> bool:
        return self._styled

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def chunks(self, node: JsonNode) -> Iterator[str]:
        """Yield the rendering of ``node`` as self-contained styled chunks."""
        yield from self._walk(node, 0, "")

    def render(self, node: JsonNode) -> str:
        """Return the full rendering of ``node`` as one string."""
        return "".join(self._walk(node, 0, ""))

    # ------------------------------------------------------------------
    # Recursive descent
    # ------------------------------------------------------------------

    def _walk(self, node: JsonNode, level: int, lead: str) -> Iterator[str]:
        if node.kind.is_container:
            yield from self._walk_container(node, level, lead)
        elif node.kind is NodeKind.STRING:
            yield lead + self._paint(self._quote(node.text), classify(node))
        else:
            yield lead + self._paint(node.text, classify(node))

    def _walk_container(self, node: JsonNode, level: int, lead: str) -> Iterator[str]:
        opening, closing = _DELIMITERS[node.kind]
        if not node.children:
            yield lead + self._paint(opening + closing, classify(node))
            return

        yield lead + self._punct(opening)
        inner = level + 1
        is_object = node.kind is NodeKind.OBJECT
        for idx, child in enumerate(node.children):
            if idx:
                yield self._punct(",")
            if is_object:
                key = child.key if child.key is not None else ""
                yield self._newline(inner) + self._paint(
                    self._quote(key), classify(child, Role.KEY)
                )
                yield self._punct(":")
                yield from self._walk(child, inner, self._colon_gap)
            else:
                yield from self._walk(child, inner, self._newline(inner))
        yield self._newline(level) + self._punct(closing)

    # ------------------------------------------------------------------
    # Token helpers
    # ------------------------------------------------------------------

    def _newline(self, level: int) -> str:
        if not self._pretty:
            return ""
        return "\n" + " " * (self._options.indent * level)

    def _punct(self, char: str) -> str:
        return self._paint(char, classify_punctuation(char))

    def _paint(self, text: str, token: TokenClass) -> str:
        if not self._styled:
            return text
        return self._theme.style_for(token).paint(text)
