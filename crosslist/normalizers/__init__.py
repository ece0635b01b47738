"""
Display name normalization.

Social profile names carry emoji, punctuation and decoration; these helpers
reduce them to a single given name before classification.
"""

from .names import normalize_display_name, strip_decorations

__all__ = [
    'normalize_display_name',
    'strip_decorations',
]
