"""Shared utilities"""

from .logging import get_logger
from .clock import now_ms

__all__ = [
    "get_logger",
    "now_ms",
]
