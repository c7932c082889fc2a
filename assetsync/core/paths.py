"""
Local path resolution for manifest entries.
"""

from pathlib import Path

from .constants import ASSETS_PREFIX


def resolve_local_path(output_dir: Path, local_path: str) -> Path:
    """
    Map a manifest localPath onto the output directory.

    The manifest records paths relative to the repo ("assets/icons/x.svg")
    while the output directory already is the assets folder, so a single
    leading "assets/" is dropped.

    Args:
        output_dir: Root directory for synced assets
        local_path: localPath value from the manifest

    Returns:
        Destination path under output_dir
    """
    relative = local_path
    if relative.startswith(ASSETS_PREFIX):
        relative = relative[len(ASSETS_PREFIX):]
    # Keep absolute-looking paths under output_dir
    return Path(output_dir) / relative.lstrip("/")
