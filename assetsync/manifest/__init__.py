"""
Manifest management for Asset Sync.

The manifest is a JSON file listing every asset with its source URL,
local path and content hash.
"""

from .manifest import Manifest, AssetEntry
from .fetch import load_manifest, fetch_remote_manifest

__all__ = [
    "Manifest",
    "AssetEntry",
    "load_manifest",
    "fetch_remote_manifest",
]
