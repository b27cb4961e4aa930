"""Character classes for escape sequence bytes.

All sets are frozensets for O(1) membership testing. Code points outside
the ASCII range never belong to any class, so a set lookup replaces the
range comparison entirely.

Usage:
    from escseq.lexer.charsets import FINAL_BYTES

    if char in FINAL_BYTES:  # O(1) lookup
        ...
"""

from escseq.lexer.modes import (
    DIGIT_RANGE,
    FE_RANGE,
    FINAL_RANGE,
    INTERMEDIATE_RANGE,
    PARAM_RANGE,
    PRIVATE_MARKER_RANGE,
)


def _char_range(bounds: tuple[int, int]) -> frozenset[str]:
    low, high = bounds
    return frozenset(chr(cp) for cp in range(low, high + 1))


# ESC followed by one of these is a complete Fe sequence ('[' starts a CSI)
FE_BYTES: frozenset[str] = _char_range(FE_RANGE)

# Terminates a CSI sequence
FINAL_BYTES: frozenset[str] = _char_range(FINAL_RANGE)

# Any CSI parameter byte: digits, separators and private markers
PARAM_BYTES: frozenset[str] = _char_range(PARAM_RANGE)

# < = > ? are only private markers directly after ESC [
PRIVATE_MARKER_BYTES: frozenset[str] = _char_range(PRIVATE_MARKER_RANGE)

INTERMEDIATE_BYTES: frozenset[str] = _char_range(INTERMEDIATE_RANGE)

# ASCII digits only; str.isdigit() would accept other scripts
DIGITS: frozenset[str] = _char_range(DIGIT_RANGE)
