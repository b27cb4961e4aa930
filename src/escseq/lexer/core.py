"""State-machine lexer for ANSI/ECMA-48 escape sequences.

Pulls one code point at a time from a character source and classifies it
according to the current mode. Multi-character digit and private-marker
runs are pushed back and re-read by dedicated run scanners.

Malformed input never aborts tokenization: unrecognized code points come
out as UNKNOWN tokens and the lexer drops back to DEFAULT.

Thread Safety:
Lexer instances are single-use and single-consumer. Create one per stream.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from escseq.errors import EndOfStream, SourceError, UnderlyingIOError
from escseq.lexer.modes import LexerMode
from escseq.lexer.scanners import (
    CsiScannerMixin,
    RunScannerMixin,
    TextScannerMixin,
)
from escseq.source import open_source
from escseq.tokens import Token, TokenType
from escseq.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Run scanners first so they override the stubs declared by CsiScannerMixin
    RunScannerMixin,
    TextScannerMixin,
    CsiScannerMixin,
):
    """State-machine lexer producing one Token per read.

    Tracks the current mode and the mode held before the most recent
    transition. The previous mode is what tells the first byte after
    ``ESC [`` apart from later bytes in the same range, so a private
    marker is only recognized in first position.

    Usage:
            >>> lexer = Lexer("\\x1b[1m")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(ESC, '\\x1b', 0)
        Token(FE, '[', 1)
        Token(PARAM_DIGITS, '1', 2)
        Token(FINAL, 'm', 3)

    Thread Safety:
        Lexer instances are single-use. Create one per stream.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_name",  # Optional label for log messages
        "_mode",
        "_last_mode",  # Mode before the most recent transition
    )

    def __init__(self, source: Any, *, source_name: str | None = None) -> None:
        """Initialize lexer over a character source.

        Args:
            source: A RuneSource, str, bytes-like object, or readable text
                or binary file object
            source_name: Optional label used in log messages
        """
        self._source = open_source(source)
        self._source_name = source_name
        self._mode = LexerMode.DEFAULT
        self._last_mode = LexerMode.DEFAULT

    @property
    def mode(self) -> LexerMode:
        return self._mode

    @property
    def last_mode(self) -> LexerMode:
        return self._last_mode

    @property
    def offset(self) -> int:
        """Code points consumed from the source so far."""
        return self._source.offset

    def read_token(self) -> Token:
        """Read exactly one token from the source.

        Returns:
            The next Token

        Raises:
            EndOfStream: The source is exhausted.
            UnderlyingIOError: The source failed.

            Both carry ``exc.token``: a NONE token if nothing was consumed
            by this call, or the partial run token if the source ran out
            in the middle of a digit or private-marker run. A partial
            token with a non-empty value holds real input and must not
            be dropped.
        """
        start = self._source.offset
        try:
            char = self._source.read_rune()
        except SourceError as exc:
            exc.token = self._make_token(TokenType.NONE, "", start)
            raise
        return self._dispatch_mode(char, start)

    def tokenize(self) -> Iterator[Token]:
        """Read tokens until the source is exhausted.

        A partial run token attached to the terminating error is yielded
        before stopping, so no consumed input is lost.

        Yields:
            Token objects one at a time

        Raises:
            UnderlyingIOError: The source failed. Any partial token is
                yielded first.
        """
        while True:
            try:
                token = self.read_token()
            except EndOfStream as exc:
                if exc.token is not None and exc.token.value:
                    yield exc.token
                return
            except UnderlyingIOError as exc:
                if exc.token is not None and exc.token.value:
                    yield exc.token
                raise
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def _dispatch_mode(self, char: str, start: int) -> Token:
        """Dispatch to the scanner for the current mode."""
        match self._mode:
            case LexerMode.DEFAULT:
                return self._scan_default(char, start)
            case LexerMode.ESCAPE:
                return self._scan_escape(char, start)
            case LexerMode.CSI_PARAM:
                return self._scan_csi_param(char, start)
            case LexerMode.CSI_INTERMEDIATE:
                return self._scan_csi_intermediate(char, start)

    # =========================================================================
    # State and token helpers
    # =========================================================================

    def _set_mode(self, mode: LexerMode) -> None:
        """Transition to mode, remembering the mode being left.

        Self-transitions are recorded too.
        """
        self._last_mode = self._mode
        self._mode = mode

    def _make_token(self, token_type: TokenType, value: str, start: int) -> Token:
        return Token(type=token_type, value=value, offset=start)

    def _make_unknown(self, char: str, start: int) -> Token:
        logger.debug(
            "Unknown code point %r at offset %d in %s mode%s",
            char,
            start,
            self._mode.name,
            f" ({self._source_name})" if self._source_name else "",
        )
        return self._make_token(TokenType.UNKNOWN, char, start)

    def _fallback(self, char: str, start: int) -> Token:
        """Handle a code point no rule of the current mode accepts.

        Resets to DEFAULT. Whether the next ESC starts a trustworthy
        sequence is left to the consumer.
        """
        token = self._make_unknown(char, start)
        self._set_mode(LexerMode.DEFAULT)
        return token
