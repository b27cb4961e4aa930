"""Utility modules for escseq.

Provides:
- logger: get_logger for logging
"""

from escseq.utils.logger import get_logger

__all__ = [
    "get_logger",
]
