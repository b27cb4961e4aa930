"""Logger naming for escseq.

Every module logs through a standard library logger under the ``escseq``
namespace. Nothing is emitted above DEBUG and no handlers are installed,
so applications opt in:

    >>> import logging
    >>> logging.basicConfig()
    >>> logging.getLogger("escseq").setLevel(logging.DEBUG)

The lexer then reports each UNKNOWN token on ``escseq.lexer.core`` and
sources report wrapped read failures on ``escseq.source``.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name inside the ``escseq`` namespace.

    Names already in the namespace are used as given.

    >>> get_logger("escseq.source").name
    'escseq.source'
    >>> get_logger("replay").name
    'escseq.replay'
    """
    if not (name == "escseq" or name.startswith("escseq.")):
        name = f"escseq.{name}"
    return logging.getLogger(name)
