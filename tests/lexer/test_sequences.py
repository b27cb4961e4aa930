"""Tests for escape sequence classification.

Covers every rule of the four lexer modes: plain text, ESC, Fe bytes,
CSI parameters, separators, private markers, intermediates and finals.
"""

from __future__ import annotations

import pytest

from escseq.lexer import Lexer
from escseq.tokens import TokenType

T = TokenType


def _pairs(source: str) -> list[tuple[TokenType, str]]:
    return [(t.type, t.value) for t in Lexer(source).tokenize()]


class TestPlainText:
    """Text outside escape sequences."""

    def test_plain_text_passthrough(self) -> None:
        assert _pairs("ab") == [(T.TEXT, "a"), (T.TEXT, "b")]

    def test_empty_source(self) -> None:
        assert _pairs("") == []

    def test_non_ascii_text(self) -> None:
        """Each code point is its own TEXT token, whatever its width."""
        assert _pairs("é→😀") == [(T.TEXT, "é"), (T.TEXT, "→"), (T.TEXT, "😀")]

    def test_control_characters_are_text(self) -> None:
        assert _pairs("\r\n\t") == [(T.TEXT, "\r"), (T.TEXT, "\n"), (T.TEXT, "\t")]


class TestFeSequences:
    """ESC followed by a byte in 0x40-0x5F."""

    @pytest.mark.parametrize("char", ["@", "D", "M", "P", "\\", "]", "^", "_"])
    def test_fe_byte(self, char: str) -> None:
        assert _pairs(f"\x1b{char}") == [(T.ESC, "\x1b"), (T.FE, char)]

    def test_fe_returns_to_default(self) -> None:
        """Only '[' keeps the sequence open; text after other Fe bytes is TEXT."""
        assert _pairs("\x1bM1") == [(T.ESC, "\x1b"), (T.FE, "M"), (T.TEXT, "1")]

    @pytest.mark.parametrize("char", ["7", "8", "(", "`", "a", "~"])
    def test_non_fe_byte_after_esc_is_unknown(self, char: str) -> None:
        assert _pairs(f"\x1b{char}x") == [(T.ESC, "\x1b"), (T.UNKNOWN, char), (T.TEXT, "x")]

    def test_double_escape(self) -> None:
        """A second ESC directly after the first is not a new introducer."""
        assert _pairs("\x1b\x1b[") == [(T.ESC, "\x1b"), (T.UNKNOWN, "\x1b"), (T.TEXT, "[")]


class TestCsiParameters:
    """Parameter section of CSI sequences."""

    def test_separators(self) -> None:
        assert _pairs("\x1b[1;2:3m") == [
            (T.ESC, "\x1b"),
            (T.FE, "["),
            (T.PARAM_DIGITS, "1"),
            (T.PARAM_SEP, ";"),
            (T.PARAM_DIGITS, "2"),
            (T.PARAM_SUB_SEP, ":"),
            (T.PARAM_DIGITS, "3"),
            (T.FINAL, "m"),
        ]

    def test_multi_digit_run(self) -> None:
        assert _pairs("\x1b[38;5;208m")[2:] == [
            (T.PARAM_DIGITS, "38"),
            (T.PARAM_SEP, ";"),
            (T.PARAM_DIGITS, "5"),
            (T.PARAM_SEP, ";"),
            (T.PARAM_DIGITS, "208"),
            (T.FINAL, "m"),
        ]

    def test_no_parameters(self) -> None:
        assert _pairs("\x1b[m") == [(T.ESC, "\x1b"), (T.FE, "["), (T.FINAL, "m")]

    def test_leading_separators(self) -> None:
        assert _pairs("\x1b[;;H")[2:] == [
            (T.PARAM_SEP, ";"),
            (T.PARAM_SEP, ";"),
            (T.FINAL, "H"),
        ]

    def test_leading_sub_separator(self) -> None:
        assert _pairs("\x1b[:1m")[2:] == [
            (T.PARAM_SUB_SEP, ":"),
            (T.PARAM_DIGITS, "1"),
            (T.FINAL, "m"),
        ]

    @pytest.mark.parametrize("final", ["@", "A", "H", "`", "m", "~"])
    def test_final_byte_range(self, final: str) -> None:
        assert _pairs(f"\x1b[2{final}")[-1] == (T.FINAL, final)


class TestPrivateMarkers:
    """Private-use markers (< = > ?) directly after ESC [."""

    def test_private_marker_run(self) -> None:
        """The private run takes the whole parameter range, digits included."""
        assert _pairs("\x1b[<1m") == [
            (T.ESC, "\x1b"),
            (T.FE, "["),
            (T.PRIVATE_PARAM, "<1"),
            (T.FINAL, "m"),
        ]

    def test_cursor_visibility(self) -> None:
        assert _pairs("\x1b[?25h")[2:] == [(T.PRIVATE_PARAM, "?25"), (T.FINAL, "h")]

    def test_private_run_includes_separators(self) -> None:
        assert _pairs("\x1b[?1;2h")[2:] == [(T.PRIVATE_PARAM, "?1;2"), (T.FINAL, "h")]

    @pytest.mark.parametrize("marker", ["<", "=", ">", "?"])
    def test_bare_marker(self, marker: str) -> None:
        assert _pairs(f"\x1b[{marker}c")[2:] == [(T.PRIVATE_PARAM, marker), (T.FINAL, "c")]

    def test_marker_rejected_in_non_first_position(self) -> None:
        assert _pairs("\x1b[1<m") == [
            (T.ESC, "\x1b"),
            (T.FE, "["),
            (T.PARAM_DIGITS, "1"),
            (T.UNKNOWN, "<"),
            (T.FINAL, "m"),
        ]

    def test_marker_after_separator_rejected(self) -> None:
        assert _pairs("\x1b[;?m")[2:] == [
            (T.PARAM_SEP, ";"),
            (T.UNKNOWN, "?"),
            (T.FINAL, "m"),
        ]

    def test_rejected_marker_keeps_sequence_open(self) -> None:
        """A misplaced marker is UNKNOWN but parameters continue after it."""
        assert _pairs("\x1b[1>2m")[2:] == [
            (T.PARAM_DIGITS, "1"),
            (T.UNKNOWN, ">"),
            (T.PARAM_DIGITS, "2"),
            (T.FINAL, "m"),
        ]

    def test_private_run_then_intermediate(self) -> None:
        assert _pairs("\x1b[?$p")[2:] == [
            (T.PRIVATE_PARAM, "?"),
            (T.INTERMEDIATE, "$"),
            (T.FINAL, "p"),
        ]


class TestIntermediates:
    """Intermediate bytes between parameters and final byte."""

    def test_intermediate_byte(self) -> None:
        assert _pairs("\x1b[1$p")[2:] == [
            (T.PARAM_DIGITS, "1"),
            (T.INTERMEDIATE, "$"),
            (T.FINAL, "p"),
        ]

    def test_multiple_intermediates(self) -> None:
        assert _pairs("\x1b[ !q")[2:] == [
            (T.INTERMEDIATE, " "),
            (T.INTERMEDIATE, "!"),
            (T.FINAL, "q"),
        ]

    def test_parameter_after_intermediate_is_unknown(self) -> None:
        """Parameters cannot follow intermediates; the sequence is abandoned."""
        assert _pairs("\x1b[$1m")[2:] == [
            (T.INTERMEDIATE, "$"),
            (T.UNKNOWN, "1"),
            (T.TEXT, "m"),
        ]


class TestFallback:
    """Unmatched code points reset to DEFAULT as UNKNOWN tokens."""

    @pytest.mark.parametrize("char", ["\n", "\x00", "\x7f", "é"])
    def test_unmatched_in_csi_params(self, char: str) -> None:
        assert _pairs(f"\x1b[1{char}m")[2:] == [
            (T.PARAM_DIGITS, "1"),
            (T.UNKNOWN, char),
            (T.TEXT, "m"),
        ]

    def test_escape_inside_csi_is_unknown(self) -> None:
        assert _pairs("\x1b[\x1b[m")[2:] == [(T.UNKNOWN, "\x1b"), (T.TEXT, "["), (T.TEXT, "m")]

    def test_unmatched_in_intermediates(self) -> None:
        assert _pairs("\x1b[$\nx")[2:] == [
            (T.INTERMEDIATE, "$"),
            (T.UNKNOWN, "\n"),
            (T.TEXT, "x"),
        ]


class TestSequenceBoundaries:
    """A FINAL byte closes the sequence; the next one starts fresh."""

    def test_text_after_final(self) -> None:
        assert _pairs("\x1b[0mx")[-1] == (T.TEXT, "x")

    def test_back_to_back_sequences(self) -> None:
        assert _pairs("\x1b[1m\x1b[?7l") == [
            (T.ESC, "\x1b"),
            (T.FE, "["),
            (T.PARAM_DIGITS, "1"),
            (T.FINAL, "m"),
            (T.ESC, "\x1b"),
            (T.FE, "["),
            (T.PRIVATE_PARAM, "?7"),
            (T.FINAL, "l"),
        ]

    def test_sgr_in_text(self) -> None:
        tokens = _pairs("a\x1b[31mb\x1b[0mc")
        text = "".join(v for t, v in tokens if t is T.TEXT)
        assert text == "abc"
