"""ContextVar-based lexer configuration for escseq.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Character sources read the active config when they are constructed, so
settings apply to every Lexer created in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from escseq.config import LexerConfig, lexer_config_context

    with lexer_config_context(LexerConfig(encoding="latin-1")):
        tokens = list(Lexer(raw_bytes).tokenize())

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Only byte-oriented sources consult encoding and errors; text sources
    already yield code points.

    Attributes:
        encoding: Codec used to decode binary streams
        errors: Codec error handler. The default "replace" maps malformed
            input to U+FFFD instead of failing the read.
        chunk_size: Number of bytes or characters pulled from a stream per
            underlying read

    """

    encoding: str = "utf-8"
    errors: str = "replace"
    chunk_size: int = 4096

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from dictionary.

        Only includes keys that are valid LexerConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexerConfig.from_dict({
            ...     "encoding": "latin-1",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.encoding
            'latin-1'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get current lexer configuration (thread-local)."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexerConfig instance to use for this context.

    """
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: LexerConfig to use within the context.

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
