"""Exception classes for escseq.

Provides standardized exceptions for error handling throughout escseq.

Unrecognized input is never an error: the lexer reports it as an
UNKNOWN token and keeps going. Exceptions are reserved for the
character source running dry or failing underneath the lexer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from escseq.tokens import Token


class EscSeqError(Exception):
    """Base exception for all escseq errors.

    Also raised directly when a character source is misused
    (e.g. unreading twice without an intervening read).
    """

    pass


class SourceError(EscSeqError):
    """A read failure reported by a character source.

    The lexer attaches the token it was building when the failure
    happened. Before any code point was consumed that is a NONE token
    with an empty value; during a digit or private-marker run it is
    the partial run token, which may carry real (truncated) data.

    Attributes:
        token: Token in progress at the time of failure, or None if the
            error was raised by a source outside of a lexer call
    """

    def __init__(self, message: str, token: Token | None = None) -> None:
        self.token = token
        super().__init__(message)


class EndOfStream(SourceError):
    """The character source has no further input.

    Normal termination signal, not a defect.
    """

    def __init__(self, message: str = "end of stream", token: Token | None = None) -> None:
        super().__init__(message, token)


class UnderlyingIOError(SourceError):
    """The transport beneath a character source failed.

    The original exception is available as ``__cause__``.
    """

    pass
