"""JsonNode dataclass and NodeKind StrEnum: the closed value model rendered by the walker.

A parsed JSON document is converted into a tree of ``JsonNode`` objects by
``TreeBuilder`` before any output is produced.  The walker then only has to
dispatch over the six ``NodeKind`` members.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto

__all__ = ["JsonNode", "JsonNumber", "NodeKind"]


class NodeKind(StrEnum):
    """The six JSON value shapes.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOL    -> "bool"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_container(self) -> bool:
        return self in (NodeKind.ARRAY, NodeKind.OBJECT)


class JsonNumber(str):
    """A JSON number kept in its original textual form.

    ``parsing.loads`` produces these for every number literal so that
    ``4398798674962568`` or ``3.14159260`` render exactly as written.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"JsonNumber({str.__repr__(self)})"


@dataclass(slots=True)
class JsonNode:
    """A node in the renderable JSON tree.

    Attributes:
        kind:      Which JSON shape this node is (see NodeKind).
        text:      Literal JSON text for NULL/BOOL/NUMBER ("null", "true",
                   "12.5"); the unescaped string for STRING; empty for
                   containers.
        path:      JSON Pointer (RFC 6901) of this node, e.g. "/user/0".
        key:       Object key under which this node is stored, or None when
                   the parent is an array or this is the root.
        children:  Child nodes in document order.
    """

    kind: NodeKind
    text: str = ""
    path: str = ""
    key: str | None = None
    children: list[JsonNode] = field(default_factory=list)
