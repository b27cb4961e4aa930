"""Protocols for escseq.

Defines the contract for character sources consumed by the lexer.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RuneSource(Protocol):
    """Sequential supply of code points with a single pushback slot.

    Thread Safety:
        Sources hold mutable position state and must be owned by one
        consumer. Wrap them in external locking for shared use.

    """

    @property
    def offset(self) -> int:
        """Number of code points consumed so far, net of pushback."""
        ...

    def read_rune(self) -> str:
        """Return the next code point as a one-character string.

        Raises:
            EndOfStream: No further input exists
            UnderlyingIOError: The underlying transport failed
        """
        ...

    def unread_rune(self) -> None:
        """Un-consume the code point most recently returned by read_rune.

        Only one code point can be pushed back at a time.

        Raises:
            EscSeqError: Nothing to push back
        """
        ...
