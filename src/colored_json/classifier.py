"""Token classification: which TokenClass a node or punctuation mark belongs to."""

from __future__ import annotations

from enum import StrEnum, auto

from colored_json.styles.theme import TokenClass
from colored_json.tree.nodes import JsonNode, NodeKind

__all__ = ["Role", "classify", "classify_punctuation"]


class Role(StrEnum):
    """Structural position of a rendered node: an object key or a value."""

    KEY = auto()
    VALUE = auto()


_VALUE_CLASSES: dict[NodeKind, TokenClass] = {
    NodeKind.NULL: TokenClass.NULL_VALUE,
    NodeKind.BOOL: TokenClass.BOOL_VALUE,
    NodeKind.NUMBER: TokenClass.NUMBER_VALUE,
    NodeKind.STRING: TokenClass.STRING_VALUE,
    NodeKind.ARRAY: TokenClass.ARRAY_BRACKET,
    NodeKind.OBJECT: TokenClass.OBJECT_BRACE,
}

_PUNCTUATION_CLASSES: dict[str, TokenClass] = {
    "[": TokenClass.ARRAY_BRACKET,
    "]": TokenClass.ARRAY_BRACKET,
    "{": TokenClass.OBJECT_BRACE,
    "}": TokenClass.OBJECT_BRACE,
    ",": TokenClass.COMMA,
    ":": TokenClass.COLON,
}


def classify(node: JsonNode, role: Role = Role.VALUE) -> TokenClass:
    """Return the TokenClass of ``node`` in the given structural role.

    A key is always OBJECT_KEY whatever its text looks like; a value is
    classified by its kind, containers by their delimiter class.
    """
    if role is Role.KEY:
        return TokenClass.OBJECT_KEY
    return _VALUE_CLASSES[node.kind]


def classify_punctuation(char: str) -> TokenClass:
    """Return the TokenClass of a structural character.

    Raises:
        ValueError: If ``char`` is not one of ``[ ] { } , :``.
    """
    try:
        return _PUNCTUATION_CLASSES[char]
    except KeyError:
        msg = f"{char!r} is not JSON punctuation"
        raise ValueError(msg) from None
