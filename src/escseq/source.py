"""Character sources with one-slot pushback.

The lexer pulls one code point at a time and occasionally pushes the last
one back before handing off to a run scanner. Every source here keeps the
last returned code point in a single slot to make that possible.

Sources:
- StringSource: in-memory str
- TextStreamSource: text file objects (``read(n)`` returns str)
- ByteStreamSource: binary file objects, decoded incrementally so that
  multi-byte characters split across reads come out whole

Usage:
    >>> src = StringSource("ab")
    >>> src.read_rune()
    'a'
    >>> src.unread_rune()
    >>> src.read_rune()
    'a'

"""

from __future__ import annotations

import codecs
import errno
import io
from typing import Any, BinaryIO, TextIO

from escseq.config import get_lexer_config
from escseq.errors import EndOfStream, EscSeqError, UnderlyingIOError
from escseq.protocols import RuneSource
from escseq.utils.logger import get_logger

logger = get_logger(__name__)


class _BufferedSource:
    """Shared read/unread logic over a refillable str buffer.

    Subclasses implement ``_fill`` to return the next chunk of decoded
    text, or an empty string at end of input.
    """

    __slots__ = ("_buffer", "_pos", "_last", "_pushed", "_offset")

    def __init__(self, initial: str = "") -> None:
        self._buffer = initial
        self._pos = 0
        self._last = ""  # Slot for unread_rune; empty when nothing to push back
        self._pushed = False
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    def _fill(self) -> str:
        return ""

    def read_rune(self) -> str:
        if self._pushed:
            self._pushed = False
            self._offset += 1
            return self._last

        if self._pos >= len(self._buffer):
            try:
                chunk = self._fill()
            except (OSError, UnicodeDecodeError) as exc:
                self._last = ""
                logger.debug("Source read failed at offset %d: %s", self._offset, exc)
                raise UnderlyingIOError(str(exc)) from exc
            self._buffer = chunk
            self._pos = 0
            if not chunk:
                self._last = ""
                raise EndOfStream()

        char = self._buffer[self._pos]
        self._pos += 1
        self._last = char
        self._offset += 1
        return char

    def unread_rune(self) -> None:
        if self._pushed or not self._last:
            raise EscSeqError("unread_rune called without a preceding read_rune")
        self._pushed = True
        self._offset -= 1


class StringSource(_BufferedSource):
    """Character source over an in-memory string."""

    __slots__ = ()

    def __init__(self, text: str) -> None:
        super().__init__(text)


class TextStreamSource(_BufferedSource):
    """Character source over a text file object.

    Args:
        stream: Object with a ``read(n) -> str`` method. A non-blocking
            stream that returns None surfaces as UnderlyingIOError caused
            by BlockingIOError; reading may be retried once data arrives.
        chunk_size: Characters requested per read (defaults to active config)
    """

    __slots__ = ("_stream", "_chunk_size")

    def __init__(self, stream: TextIO, chunk_size: int | None = None) -> None:
        super().__init__()
        self._stream = stream
        self._chunk_size = chunk_size if chunk_size is not None else get_lexer_config().chunk_size

    def _fill(self) -> str:
        text = self._stream.read(self._chunk_size)
        if text is None:
            raise BlockingIOError(errno.EAGAIN, "no data available from non-blocking stream")
        return text


class ByteStreamSource(_BufferedSource):
    """Character source over a binary file object.

    Bytes are decoded with an incremental decoder. With the default
    ``errors="replace"`` malformed input becomes U+FFFD rather than a
    read failure; with ``errors="strict"`` it surfaces as
    UnderlyingIOError.

    Args:
        stream: Object with a ``read(n) -> bytes`` method. ``read1`` is
            preferred when present so interactive streams are not blocked
            waiting for a full chunk. None from a non-blocking stream is
            not end of input (see TextStreamSource).
        encoding: Codec name (defaults to active config)
        errors: Codec error handler (defaults to active config)
        chunk_size: Bytes requested per read (defaults to active config)
    """

    __slots__ = ("_read", "_decoder", "_chunk_size", "_exhausted")

    def __init__(
        self,
        stream: BinaryIO,
        encoding: str | None = None,
        errors: str | None = None,
        chunk_size: int | None = None,
    ) -> None:
        super().__init__()
        config = get_lexer_config()
        self._read = getattr(stream, "read1", stream.read)
        self._decoder = codecs.getincrementaldecoder(encoding or config.encoding)(
            errors=errors or config.errors
        )
        self._chunk_size = chunk_size if chunk_size is not None else config.chunk_size
        self._exhausted = False

    def _fill(self) -> str:
        # A read may end inside a multi-byte character and decode to nothing
        while not self._exhausted:
            data = self._read(self._chunk_size)
            if data is None:
                raise BlockingIOError(errno.EAGAIN, "no data available from non-blocking stream")
            if not data:
                self._exhausted = True
                return self._decoder.decode(b"", final=True)
            text = self._decoder.decode(data)
            if text:
                return text
        return ""


def open_source(obj: Any) -> RuneSource:
    """Wrap obj in the matching character source.

    Args:
        obj: A RuneSource (returned unchanged), str, bytes-like object,
            or readable text or binary file object

    Returns:
        A RuneSource reading from obj

    Raises:
        TypeError: obj is none of the supported inputs
    """
    if isinstance(obj, RuneSource):
        return obj
    if isinstance(obj, str):
        return StringSource(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return ByteStreamSource(io.BytesIO(bytes(obj)))
    if isinstance(obj, io.TextIOBase):
        return TextStreamSource(obj)
    if isinstance(obj, (io.RawIOBase, io.BufferedIOBase)):
        return ByteStreamSource(obj)
    if callable(getattr(obj, "read", None)):
        probe = obj.read(0)
        if isinstance(probe, (bytes, bytearray)):
            return ByteStreamSource(obj)
        return TextStreamSource(obj)
    raise TypeError(f"Cannot read characters from {type(obj).__name__!r}")


__all__ = [
    "ByteStreamSource",
    "RuneSource",
    "StringSource",
    "TextStreamSource",
    "open_source",
]
