"""
Core utilities shared across Asset Sync modules.
"""

from .hashing import calculate_hash, hash_file
from .paths import resolve_local_path

__all__ = [
    "calculate_hash",
    "hash_file",
    "resolve_local_path",
]
