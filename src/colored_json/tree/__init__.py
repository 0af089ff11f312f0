"""Tree subpackage: the closed JSON value model the walker renders.

Re-exports the public API for the tree module:
- JsonNode: dataclass representing a node in the JSON tree
- NodeKind: StrEnum of the six JSON shapes
- JsonNumber: str subclass holding a number in its original textual form
- TreeBuilder: converts any valid JSON value into a validated JsonNode tree
"""

from colored_json.tree.builder import DEFAULT_MAX_DEPTH, TreeBuilder
from colored_json.tree.nodes import JsonNode, JsonNumber, NodeKind

__all__ = ["DEFAULT_MAX_DEPTH", "JsonNode", "JsonNumber", "NodeKind", "TreeBuilder"]
