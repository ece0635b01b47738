"""Utility modules for crosslist."""

from crosslist.utils.logging import setup_logging

__all__ = [
    "setup_logging",
]
