"""
User-facing messages for Asset Sync.

Progress goes to stdout, failures go to stderr.
"""

import sys


def _err(msg: str):
    print(msg, file=sys.stderr)


# ============================================================================
# Run header
# ============================================================================


def header(version: str, project_name: str, asset_count: int):
    print(f"OpenSystem Asset Sync v{version}")
    print(f"Project: {project_name}")
    print(f"Found {asset_count} assets in manifest")
    print()


def no_assets():
    print("No assets to sync.")


# ============================================================================
# Per-asset lines
# ============================================================================


def asset_cached(key: str):
    print(f"✓ {key} (cached)")


def asset_would_download(key: str):
    print(f"↓ Would download: {key}")


def asset_downloaded(key: str):
    print(f"↓ {key}")


def asset_error(key: str, error: Exception):
    _err(f"✗ {key}: {error}")


def summary(downloaded: int, skipped: int, errors: int, check_only: bool = False):
    label = "Would sync" if check_only else "Synced"
    print()
    print(f"{label}: {downloaded} downloaded, {skipped} cached, {errors} errors")


# ============================================================================
# Fatal errors
# ============================================================================


def error_missing_manifest(path):
    _err(f"Manifest not found: {path}")
    _err('Run "git pull" to fetch the latest manifest.')


def error_sync_failed(error: Exception):
    _err(f"Sync failed: {error}")


def cancelled():
    print("\n\nCancelled by user.")
