"""Sink Protocol: the structural interface of an output stream.

Anything with a ``write`` method satisfies it: files opened in text or
binary mode, ``sys.stdout``, ``io.StringIO``, ``io.BytesIO``, socket
``makefile()`` wrappers.  ``isatty`` and ``flush`` are optional and are
looked up with ``getattr``.

Example::

    import io
    from colored_json.protocols import Sink

    assert isinstance(io.BytesIO(), Sink)  # True: structural conformance
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["Sink"]


@runtime_checkable
class Sink(Protocol):
    """Structural protocol for render destinations.

    Text sinks (``io.TextIOBase`` or anything exposing ``encoding``) receive
    ``str``; every other sink receives UTF-8 encoded ``bytes``.
    """

    def write(self, data: Any, /) -> Any: ...
