"""
Terminal output for Asset Sync.
"""

from . import display

__all__ = [
    "display",
]
