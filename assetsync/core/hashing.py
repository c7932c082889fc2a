"""
Content digests for cache-hit detection.
"""

import hashlib
from pathlib import Path

from .constants import HASH_PREFIX


def calculate_hash(data: bytes) -> str:
    """Digest bytes in the manifest's format: "sha256:" + lowercase hex."""
    return HASH_PREFIX + hashlib.sha256(data).hexdigest()


def hash_file(path: Path) -> str:
    """Hash the full contents of a local file."""
    return calculate_hash(path.read_bytes())
