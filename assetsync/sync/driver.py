"""
Sync driver for Asset Sync.

Walks the manifest in order and decides, per asset, whether to skip it,
report it (dry run) or download it.
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path

from ..config import SyncConfig
from ..core.hashing import hash_file
from ..core.paths import resolve_local_path
from ..manifest import Manifest, AssetEntry
from ..ui import display


@dataclass
class SyncResult:
    """Tallies for one sync run."""
    downloaded: int = 0
    skipped: int = 0
    errors: int = 0

    @property
    def exit_code(self) -> int:
        return 1 if self.errors > 0 else 0


def is_cached(local_path: Path, asset: AssetEntry) -> bool:
    """True if local_path holds exactly the content the manifest expects."""
    if not local_path.is_file():
        return False
    return hash_file(local_path) == asset.hash


async def sync_asset(key: str, asset: AssetEntry, config: SyncConfig, fetcher, result: SyncResult):
    """Resolve one asset and record the outcome in result."""
    local_path = resolve_local_path(config.output_dir, asset.local_path)

    if not config.force and is_cached(local_path, asset):
        if config.verbose:
            display.asset_cached(key)
        result.skipped += 1
        return

    if config.check_only:
        # Counted as downloaded so the dry-run summary matches a real run
        display.asset_would_download(key)
        result.downloaded += 1
        return

    try:
        await fetcher.fetch(asset.url, local_path)
    except asyncio.CancelledError:
        raise
    except Exception as e:
        display.asset_error(key, e)
        result.errors += 1
        return

    display.asset_downloaded(key)
    result.downloaded += 1


async def sync_assets(manifest: Manifest, config: SyncConfig, fetcher=None) -> SyncResult:
    """
    Sync every asset in the manifest, one after another.

    Args:
        manifest: Parsed manifest
        config: Run configuration (output dir and mode flags)
        fetcher: Object with an async fetch(url, dest) method; may be None
            in check mode, which never downloads

    Returns:
        SyncResult with downloaded/skipped/error counts
    """
    result = SyncResult()

    if not manifest.assets:
        display.no_assets()
        return result

    for key, asset in manifest.assets.items():
        await sync_asset(key, asset, config, fetcher, result)

    display.summary(result.downloaded, result.skipped, result.errors, check_only=config.check_only)
    return result
