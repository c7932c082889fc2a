"""
Sync operations module.

Handles the per-asset skip/download decision and the HTTP downloader.
"""

from .driver import SyncResult, is_cached, sync_asset, sync_assets
from .fetcher import AssetFetcher, redirect_target

__all__ = [
    # Driver
    "SyncResult",
    "is_cached",
    "sync_asset",
    "sync_assets",
    # Fetcher
    "AssetFetcher",
    "redirect_target",
]
