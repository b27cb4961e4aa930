"""Token and TokenType definitions for the escseq lexer.

The lexer produces a stream of Token objects describing plain text and
ANSI/ECMA-48 escape sequences. Each Token has a type, the exact code
points it was built from, and its offset in the stream.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category for clarity:
    - Stream structure (NONE, UNKNOWN, TEXT)
    - Escape introducer and Fe sequences
    - CSI parameters, intermediates and final byte

    """

    # Stream structure
    NONE = auto()  # No code point consumed (read failure)
    UNKNOWN = auto()  # Code point outside every recognized class
    TEXT = auto()  # Plain text outside an escape sequence

    # Escape sequences
    ESC = auto()  # \x1b
    FE = auto()  # ESC + 0x40-0x5F, '[' opens a CSI

    # CSI parameters
    PRIVATE_PARAM = auto()  # <=>? marker run right after ESC [
    PARAM_DIGITS = auto()  # 0-9 run
    PARAM_SUB_SEP = auto()  # :
    PARAM_SEP = auto()  # ;

    # CSI tail
    INTERMEDIATE = auto()  # 0x20-0x2F
    FINAL = auto()  # 0x40-0x7E, closes the CSI


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Concatenating ``value`` across every token read from a drained
    source reproduces the input exactly.

    Attributes:
        type: The token type (from TokenType enum)
        value: The code points consumed for this token. One code point
            for single-character tokens, the whole run for run tokens,
            empty for NONE.
        offset: Zero-based code point offset of the first code point.
            Excluded from comparison so tokens from different positions
            compare by content.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    value: str
    offset: int = field(default=0, compare=False)

    @property
    def end_offset(self) -> int:
        """Offset one past the last code point of this token."""
        return self.offset + len(self.value)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.offset})"
