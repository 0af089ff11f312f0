"""SinkAdapter: buffered, chunk-preserving writes to a caller's stream.

Chunks produced by the walker are accumulated and written in batches of
roughly ``buffer_size`` characters.  A batch boundary always falls between
chunks, never inside one, so every write carries only complete
(start-style, text, reset) units.

When a write or flush fails while styling is enabled, one reset sequence is
attempted so the terminal is not left colored; the original exception is
then re-raised unchanged.  After a failure the adapter refuses further
writes.
"""

from __future__ import annotations

import contextlib
import errno
import io
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from colored_json.styles.theme import RESET_SEQUENCE

if TYPE_CHECKING:
    from colored_json.protocols import Sink

__all__ = ["DEFAULT_BUFFER_SIZE", "SinkAdapter"]

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 8192


def _is_text_sink(sink: Sink) -> bool:
    if isinstance(sink, io.TextIOBase):
        return True
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return False
    return hasattr(sink, "encoding")


class SinkAdapter:
    """Buffers rendered chunks and writes them to a text or byte sink.

    Args:
        sink: Text or byte stream satisfying ``protocols.Sink``.
        styled: Whether the chunks carry escape sequences; enables the reset
            attempt on failure.
        buffer_size: Approximate number of characters held before a write.
            ``0`` writes every chunk immediately.
        encoding: Encoding used for byte sinks.
    """

    def __init__(
        self,
        sink: Sink,
        styled: bool = False,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        encoding: str = "utf-8",
    ) -> None:
        if buffer_size < 0:
            msg = f"buffer_size must be >= 0, got {buffer_size}"
            raise ValueError(msg)
        self._sink = sink
        self._styled = styled
        self._buffer_size = buffer_size
        self._encoding = encoding
        self._text = _is_text_sink(sink)
        self._raw = isinstance(sink, io.RawIOBase)
        self._pending: list[str] = []
        self._pending_len = 0
        self._failed = False

    @property
    def failed(self) -> bool:
        return self._failed

    def write(self, chunk: str) -> None:
        """Queue one chunk, writing the batch once the buffer is full."""
        if self._failed:
            msg = "sink already failed; refusing further writes"
            raise RuntimeError(msg)
        self._pending.append(chunk)
        self._pending_len += len(chunk)
        if self._pending_len >= self._buffer_size:
            self._drain()

    def write_all(self, chunks: Iterable[str]) -> None:
        for chunk in chunks:
            self.write(chunk)

    def flush(self) -> None:
        """Write everything still buffered, then flush the sink if it can."""
        if self._failed:
            msg = "sink already failed; refusing further writes"
            raise RuntimeError(msg)
        self._drain()
        flush = getattr(self._sink, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except Exception:
            self._on_failure()
            raise

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _drain(self) -> None:
        if not self._pending:
            return
        data = "".join(self._pending)
        self._pending.clear()
        self._pending_len = 0
        try:
            self._emit(data)
        except Exception:
            self._on_failure()
            raise

    def _emit(self, data: str) -> None:
        if self._text:
            self._sink.write(data)
            return
        payload = data.encode(self._encoding)
        while payload:
            written = self._sink.write(payload)
            if written is None:
                # Raw streams return None when they would block; other
                # sinks returning None have taken the whole payload.
                if self._raw:
                    msg = f"sink would block with {len(payload)} bytes pending"
                    raise BlockingIOError(errno.EAGAIN, msg)
                break
            if not isinstance(written, int) or written >= len(payload):
                break
            if written <= 0:
                msg = f"sink accepted no bytes with {len(payload)} pending"
                raise OSError(errno.EIO, msg)
            payload = payload[written:]

    def _on_failure(self) -> None:
        self._failed = True
        self._pending.clear()
        self._pending_len = 0
        if not self._styled:
            return
        logger.debug("sink write failed; attempting style reset before re-raising")
        # The original error is what the caller sees, even if this fails too.
        with contextlib.suppress(Exception):
            self._emit(RESET_SEQUENCE)
