"""Lexer operating modes and byte-range constants.

This module defines the finite state machine modes for the lexer
and the ECMA-48 code point ranges used to classify input.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - DEFAULT: Plain text, waiting for ESC
    - ESCAPE: Right after ESC, expecting an Fe byte
    - CSI_PARAM: Inside ESC [, scanning parameter bytes
    - CSI_INTERMEDIATE: Past the parameters, scanning intermediates

    DEFAULT is both the initial mode and the resting mode after every
    completed or abandoned sequence. There is no terminal mode.

    """

    DEFAULT = auto()
    ESCAPE = auto()
    CSI_PARAM = auto()
    CSI_INTERMEDIATE = auto()


ESC = "\x1b"
CSI_OPENER = "["
PARAM_SUB_SEP = ":"
PARAM_SEP = ";"

# Inclusive (low, high) code point ranges
FE_RANGE = (0x40, 0x5F)
FINAL_RANGE = (0x40, 0x7E)
PARAM_RANGE = (0x30, 0x3F)
PRIVATE_MARKER_RANGE = (0x3C, 0x3F)  # < = > ?
INTERMEDIATE_RANGE = (0x20, 0x2F)
DIGIT_RANGE = (0x30, 0x39)
