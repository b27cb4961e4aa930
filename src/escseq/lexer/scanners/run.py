"""Run scanners for multi-character CSI parameter tokens."""

from escseq.errors import SourceError
from escseq.lexer.charsets import DIGITS, PARAM_BYTES
from escseq.protocols import RuneSource
from escseq.tokens import Token, TokenType


class RunScannerMixin:
    """Mixin providing run scanners for digit and private-marker runs.

    Both scanners expect the caller to have pushed the first code point
    of the run back onto the source. They never change lexer mode.

    """

    # These will be set by the Lexer class
    _source: RuneSource

    def _make_token(self, token_type: TokenType, value: str, start: int) -> Token:
        """Create token at offset. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_run(self, token_type: TokenType, accepted: frozenset[str]) -> Token:
        """Consume code points while they are in accepted.

        The first code point outside the class is pushed back, not
        consumed. An empty run still produces a token.

        Raises:
            SourceError: The source failed mid-run. The partial run token,
                possibly empty, is attached as ``exc.token``.
        """
        start = self._source.offset
        chars: list[str] = []
        try:
            while True:
                char = self._source.read_rune()
                if char not in accepted:
                    self._source.unread_rune()
                    break
                chars.append(char)
        except SourceError as exc:
            exc.token = self._make_token(token_type, "".join(chars), start)
            raise
        return self._make_token(token_type, "".join(chars), start)

    def _scan_param_digits(self) -> Token:
        return self._scan_run(TokenType.PARAM_DIGITS, DIGITS)

    def _scan_private_param(self) -> Token:
        # Markers and digits after the leading marker stay in one run
        return self._scan_run(TokenType.PRIVATE_PARAM, PARAM_BYTES)
