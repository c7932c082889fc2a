"""
Command-line entry point for Asset Sync.

Usage:
    python sync.py            # Sync all assets
    python sync.py --check    # Dry run, show what would change
    python sync.py --force    # Re-download all files
"""

import argparse
import asyncio
import sys
from typing import Optional

from . import __version__
from .config import SyncConfig
from .errors import MissingManifestError
from .manifest import load_manifest
from .sync import AssetFetcher, SyncResult, sync_assets
from .ui import display

# Conventional status for a run stopped by SIGINT
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asset-sync",
        description="Asset Sync - Download assets listed in the assets manifest",
        epilog="Environment: MANIFEST_PATH (manifest file or URL), ASSETS_OUTPUT_DIR (output root)",
    )
    parser.add_argument(
        "-c", "--check",
        action="store_true",
        help="Dry run, show what would change without downloading"
    )
    parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="Re-download every asset, ignoring cached files"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Also list assets that are already up to date"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


async def _run_sync(manifest, config: SyncConfig, fetcher=None) -> SyncResult:
    """Run the driver, opening an HTTP session only when downloads can happen."""
    if fetcher is not None or config.check_only:
        return await sync_assets(manifest, config, fetcher)

    async with AssetFetcher.from_config(config) as fetcher:
        return await sync_assets(manifest, config, fetcher)


def run(config: SyncConfig, fetcher=None) -> int:
    """
    Load the manifest and sync it.

    Args:
        config: Run configuration
        fetcher: Optional downloader to use instead of an AssetFetcher

    Returns:
        Process exit code
    """
    manifest = load_manifest(config)
    display.header(manifest.version, manifest.project_name, len(manifest))

    result = asyncio.run(_run_sync(manifest, config, fetcher))
    return result.exit_code


def main(argv: Optional[list] = None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)
    config = SyncConfig.from_env(
        check_only=args.check,
        force=args.force,
        verbose=args.verbose,
    )

    try:
        return run(config)
    except MissingManifestError as e:
        display.error_missing_manifest(e.path)
        return 1
    except Exception as e:
        display.error_sync_failed(e)
        return 1


def console_main():
    """Console script wrapper."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        display.cancelled()
        sys.exit(EXIT_INTERRUPTED)
