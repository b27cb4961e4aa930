"""CSI sequence scanner mixin."""

from escseq.lexer.charsets import FINAL_BYTES, INTERMEDIATE_BYTES, PARAM_BYTES, PRIVATE_MARKER_BYTES
from escseq.lexer.modes import PARAM_SEP, PARAM_SUB_SEP, LexerMode
from escseq.protocols import RuneSource
from escseq.tokens import Token, TokenType


class CsiScannerMixin:
    """Mixin providing CSI_PARAM and CSI_INTERMEDIATE mode scanning logic.

    A CSI sequence is ``ESC [`` followed by parameter bytes, then
    intermediate bytes, then a final byte:

        ESC [ <private marker> <digits> ; <digits> : <digits> <intermediate> <final>

    Digit and private-marker runs are handed off to the run scanners by
    pushing the first code point back onto the source.

    """

    # These will be set by the Lexer class
    _source: RuneSource
    _mode: LexerMode
    _last_mode: LexerMode

    def _set_mode(self, mode: LexerMode) -> None:
        """Record a transition. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, start: int) -> Token:
        """Create token at offset. Implemented by Lexer."""
        raise NotImplementedError

    def _make_unknown(self, char: str, start: int) -> Token:
        """Create and log an UNKNOWN token. Implemented by Lexer."""
        raise NotImplementedError

    def _fallback(self, char: str, start: int) -> Token:
        """Reset to DEFAULT and emit UNKNOWN. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_param_digits(self) -> Token:
        """Scan a digit run. Implemented by RunScannerMixin."""
        raise NotImplementedError

    def _scan_private_param(self) -> Token:
        """Scan a private-marker run. Implemented by RunScannerMixin."""
        raise NotImplementedError

    def _scan_csi_param(self, char: str, start: int) -> Token:
        """Classify a code point inside the CSI parameter section.

        Order matters: the final-byte check comes first, and the private
        marker check must precede the generic parameter range, which
        also contains the marker bytes.
        """
        if char in FINAL_BYTES:
            self._set_mode(LexerMode.DEFAULT)
            return self._make_token(TokenType.FINAL, char, start)

        # _last_mode is ESCAPE only for the first byte after ESC [
        if self._last_mode is LexerMode.ESCAPE and char in PRIVATE_MARKER_BYTES:
            self._source.unread_rune()
            return self._scan_private_param()

        if char in PARAM_BYTES:
            self._set_mode(LexerMode.CSI_PARAM)
            if char in PRIVATE_MARKER_BYTES:
                return self._make_unknown(char, start)
            if char == PARAM_SUB_SEP:
                return self._make_token(TokenType.PARAM_SUB_SEP, char, start)
            if char == PARAM_SEP:
                return self._make_token(TokenType.PARAM_SEP, char, start)
            self._source.unread_rune()
            return self._scan_param_digits()

        if char in INTERMEDIATE_BYTES:
            self._set_mode(LexerMode.CSI_INTERMEDIATE)
            return self._make_token(TokenType.INTERMEDIATE, char, start)

        return self._fallback(char, start)

    def _scan_csi_intermediate(self, char: str, start: int) -> Token:
        if char in FINAL_BYTES:
            self._set_mode(LexerMode.DEFAULT)
            return self._make_token(TokenType.FINAL, char, start)
        if char in INTERMEDIATE_BYTES:
            self._set_mode(LexerMode.CSI_INTERMEDIATE)
            return self._make_token(TokenType.INTERMEDIATE, char, start)
        return self._fallback(char, start)
