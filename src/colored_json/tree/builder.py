"""TreeBuilder: converts a parsed JSON value into a validated JsonNode tree.

Uses recursive dispatch over the Python rendition of JSON (dict, list, str,
int, float, bool, None).  Every shape the renderer cannot express as JSON
text is rejected here, so a render call fails before a single byte has been
written to the sink.

JSON Pointer paths (RFC 6901) are built during traversal:
- Root is "" (empty string)
- Each level appends "/{key_or_index}", with "~" and "/" escaped in keys
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from colored_json.errors import DepthLimitError, InvalidValueError
from colored_json.tree.nodes import JsonNode, JsonNumber, NodeKind

__all__ = ["DEFAULT_MAX_DEPTH", "JsonValue", "TreeBuilder"]

# Deep enough for real documents, shallow enough to stay clear of the recursion limit.
DEFAULT_MAX_DEPTH = 128

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | tuple[Any, ...] | str | int | float | bool | None

_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def _pointer(parent: str, token: str | int) -> str:
    escaped = str(token).replace("~", "~0").replace("/", "~1")
    return f"{parent}/{escaped}"


@dataclass(frozen=True, slots=True)
class TreeBuilder:
    """Converts any valid JSON value into a JsonNode tree.

    The dispatch order is critical:
    - bool MUST be checked before int (``isinstance(True, int)`` is True).
    - JsonNumber MUST be checked before str (it subclasses str).

    Numbers keep a canonical textual form: JsonNumber renders verbatim, int
    through ``int.__repr__`` and float through ``float.__repr__``, which is
    what the stdlib ``json`` module writes.

    Attributes:
        max_depth: Maximum number of nested containers.  ``[1]`` has depth 1,
            ``{"a": [1]}`` depth 2.  Exceeding it raises DepthLimitError.

    Example::
        tree = TreeBuilder().build({"id": 7})
        # tree: OBJECT -> NUMBER("7", key="id", path="/id")
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def build(self, value: JsonValue, path: str = "", depth: int = 0) -> JsonNode:
        """Convert a JSON value to a JsonNode tree.

        Args:
            value: Any valid JSON value.
            path:  JSON Pointer path to this node. Defaults to "" (root).
            depth: Number of containers enclosing ``value``.

        Returns:
            The JsonNode for ``value`` with all descendants built.

        Raises:
            InvalidValueError: If ``value`` (or anything inside it) cannot be
                expressed as JSON text.
            DepthLimitError: If containers nest deeper than ``max_depth``.
        """
        # bool MUST be checked before int: bool subclasses int
        if isinstance(value, bool):
            return JsonNode(NodeKind.BOOL, "true" if value else "false", path)

        if value is None:
            return JsonNode(NodeKind.NULL, "null", path)

        if isinstance(value, JsonNumber):
            if not _NUMBER_RE.fullmatch(value):
                raise InvalidValueError(f"malformed number literal {str(value)!r}", path)
            return JsonNode(NodeKind.NUMBER, str(value), path)

        if isinstance(value, str):
            return JsonNode(NodeKind.STRING, str(value), path)

        if isinstance(value, int):
            return JsonNode(NodeKind.NUMBER, int.__repr__(value), path)

        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidValueError(f"non-finite number {value!r} has no JSON form", path)
            return JsonNode(NodeKind.NUMBER, float.__repr__(value), path)

        if isinstance(value, Mapping):
            self._check_depth(depth, path)
            return self._build_object(value, path, depth + 1)

        if isinstance(value, (list, tuple)):
            self._check_depth(depth, path)
            return self._build_array(value, path, depth + 1)

        raise InvalidValueError(f"unsupported JSON value type {type(value).__name__!r}", path)

    def _check_depth(self, depth: int, path: str) -> None:
        if depth >= self.max_depth:
            raise DepthLimitError(f"nesting exceeds max_depth={self.max_depth}", path)

    def _build_object(self, obj: Mapping[Any, Any], path: str, depth: int) -> JsonNode:
        """Build an OBJECT node whose children carry their key, in stored order."""
        object_node = JsonNode(NodeKind.OBJECT, path=path)

        for key, val in obj.items():
            if not isinstance(key, str):
                raise InvalidValueError(
                    f"object key {key!r} is {type(key).__name__}, not str", path
                )
            child = self.build(val, _pointer(path, key), depth)
            child.key = key
            object_node.children.append(child)

        return object_node

    def _build_array(self, arr: list[Any] | tuple[Any, ...], path: str, depth: int) -> JsonNode:
        """Build an ARRAY node with one child per element."""
        array_node = JsonNode(NodeKind.ARRAY, path=path)

        for idx, item in enumerate(arr):
            array_node.children.append(self.build(item, _pointer(path, idx), depth))

        return array_node
