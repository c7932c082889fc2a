"""
Asset Sync - Download design-system assets listed in a manifest.

Files whose local content already matches the manifest hash are left alone;
missing or stale files are fetched over HTTP(S).

Import from submodules directly:
    from assetsync.config import SyncConfig
    from assetsync.manifest import Manifest
    from assetsync.sync import AssetFetcher, sync_assets
    from assetsync.ui import display
"""


def _get_version():
    """Read version from installed package metadata, then the VERSION file."""
    from importlib.metadata import version, PackageNotFoundError
    from pathlib import Path
    try:
        return version("assetsync")
    except PackageNotFoundError:
        pass
    # Source checkout without an install
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


__version__ = _get_version()
