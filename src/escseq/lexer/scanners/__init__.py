"""Mode-specific scanners for the escseq lexer.

Each scanner is a mixin that provides scanning logic for one or more
lexer modes (DEFAULT and ESCAPE, CSI_PARAM and CSI_INTERMEDIATE), plus
the run scanners the CSI scanner hands off to.
"""

from __future__ import annotations

from escseq.lexer.scanners.csi import CsiScannerMixin
from escseq.lexer.scanners.run import RunScannerMixin
from escseq.lexer.scanners.text import TextScannerMixin

__all__ = [
    "CsiScannerMixin",
    "RunScannerMixin",
    "TextScannerMixin",
]
