"""
escseq — ANSI/ECMA-48 escape sequence lexer for Python

Splits terminal output into plain text, escape introducers, Fe sequences,
and CSI sequences broken down into parameters, separators, private markers,
intermediates and final bytes. Lossless: the token values concatenate back
to the exact input. Zero runtime dependencies.

Quick Start:
    >>> from escseq import tokenize
    >>> for token in tokenize("\\x1b[1;31mred"):
    ...     print(token)
    Token(ESC, '\\x1b', 0)
    Token(FE, '[', 1)
    Token(PARAM_DIGITS, '1', 2)
    Token(PARAM_SEP, ';', 3)
    Token(PARAM_DIGITS, '31', 4)
    Token(FINAL, 'm', 6)
    Token(TEXT, 'r', 7)
    Token(TEXT, 'e', 8)
    Token(TEXT, 'd', 9)

Streaming:
    >>> from escseq import Lexer, EndOfStream
    >>> lexer = Lexer(sys.stdin.buffer)
    >>> while True:
    ...     try:
    ...         token = lexer.read_token()
    ...     except EndOfStream as exc:
    ...         if exc.token.value:  # truncated run at end of input
    ...             handle(exc.token)
    ...         break
    ...     handle(token)

Interpreting sequences (cursor moves, colors, modes) is left to consumers.
"""

from typing import Any

from escseq.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from escseq.errors import EndOfStream, EscSeqError, SourceError, UnderlyingIOError
from escseq.lexer import Lexer, LexerMode
from escseq.protocols import RuneSource
from escseq.source import ByteStreamSource, StringSource, TextStreamSource, open_source
from escseq.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(source: Any, *, source_name: str | None = None) -> list[Token]:
    """Tokenize a whole source into a list.

    Args:
        source: str, bytes-like object, readable file object, or RuneSource
        source_name: Optional label used in log messages

    Returns:
        Every token up to end of stream, including a truncated final run

    Raises:
        UnderlyingIOError: The source failed before end of stream
    """
    return list(Lexer(source, source_name=source_name).tokenize())


__all__ = [
    # Lexer
    "Lexer",
    "LexerMode",
    "tokenize",
    # Tokens
    "Token",
    "TokenType",
    # Sources
    "ByteStreamSource",
    "RuneSource",
    "StringSource",
    "TextStreamSource",
    "open_source",
    # Configuration
    "LexerConfig",
    "get_lexer_config",
    "lexer_config_context",
    "reset_lexer_config",
    "set_lexer_config",
    # Errors
    "EndOfStream",
    "EscSeqError",
    "SourceError",
    "UnderlyingIOError",
    "__version__",
]
