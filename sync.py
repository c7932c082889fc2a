#!/usr/bin/env python3
"""
Asset Sync - Download design-system assets from the assets manifest.

Keeps ./design-system/assets in step with assets-manifest.json, downloading
only files that are missing or whose content hash has changed.
"""

from assetsync.app import console_main


if __name__ == "__main__":
    console_main()
