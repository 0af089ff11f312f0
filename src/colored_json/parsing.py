"""Raw JSON text -> value, through the stdlib ``json`` parser.

colored-json never lexes JSON itself.  This module only configures the
stdlib parser so that number literals keep their original spelling
(as JsonNumber) and the non-standard NaN/Infinity constants are refused.
"""

from __future__ import annotations

import json
from typing import NoReturn

from colored_json.errors import InvalidValueError
from colored_json.tree.builder import JsonValue
from colored_json.tree.nodes import JsonNumber

__all__ = ["loads"]


def _reject_constant(name: str) -> NoReturn:
    raise InvalidValueError(f"{name} is not a JSON value")


def loads(text: str | bytes | bytearray) -> JsonValue:
    """Parse serialized JSON text into a value the renderer accepts.

    Args:
        text: A JSON document.  Bytes are decoded as UTF-8/16/32 the same way
            ``json.loads`` does.

    Returns:
        The parsed value; every number is a JsonNumber holding its literal.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON.
        InvalidValueError: If ``text`` uses ``NaN``, ``Infinity`` or ``-Infinity``.
    """
    return json.loads(
        text,
        parse_int=JsonNumber,
        parse_float=JsonNumber,
        parse_constant=_reject_constant,
    )
