"""Default and escape mode scanner mixin."""

from escseq.lexer.charsets import FE_BYTES
from escseq.lexer.modes import CSI_OPENER, ESC, LexerMode
from escseq.tokens import Token, TokenType


class TextScannerMixin:
    """Mixin providing DEFAULT and ESCAPE mode scanning logic.

    Classifies plain text, the ESC introducer, and the byte that follows
    it.

    """

    def _set_mode(self, mode: LexerMode) -> None:
        """Record a transition. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, start: int) -> Token:
        """Create token at offset. Implemented by Lexer."""
        raise NotImplementedError

    def _fallback(self, char: str, start: int) -> Token:
        """Reset to DEFAULT and emit UNKNOWN. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_default(self, char: str, start: int) -> Token:
        if char == ESC:
            self._set_mode(LexerMode.ESCAPE)
            return self._make_token(TokenType.ESC, char, start)
        return self._make_token(TokenType.TEXT, char, start)

    def _scan_escape(self, char: str, start: int) -> Token:
        """Classify the code point after ESC.

        Any Fe byte completes a two-character sequence, except '[' which
        opens a CSI sequence.
        """
        if char in FE_BYTES:
            if char == CSI_OPENER:
                self._set_mode(LexerMode.CSI_PARAM)
            else:
                self._set_mode(LexerMode.DEFAULT)
            return self._make_token(TokenType.FE, char, start)
        return self._fallback(char, start)
