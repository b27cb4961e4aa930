"""Modular state-machine lexer for ANSI/ECMA-48 escape sequences.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (mixin composition + mode state)
├── modes.py             # LexerMode enum, byte-range constants
├── charsets.py          # Frozenset character classes
└── scanners/            # Mode-specific scanners
    ├── text.py          # DEFAULT and ESCAPE modes
    ├── csi.py           # CSI_PARAM and CSI_INTERMEDIATE modes
    └── run.py           # Digit and private-marker runs

Usage:
    >>> from escseq.lexer import Lexer
    >>> for token in Lexer("a\\x1b[?25h").tokenize():
    ...     print(token)
Token(TEXT, 'a', 0)
Token(ESC, '\\x1b', 1)
Token(FE, '[', 2)
Token(PRIVATE_PARAM, '?25', 3)
Token(FINAL, 'h', 6)

"""

from escseq.lexer.core import Lexer
from escseq.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]
