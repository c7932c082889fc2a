"""
Run configuration for Asset Sync.

Built once by the entry point from CLI flags and environment variables,
then handed to the loader, driver and fetcher.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .core.constants import (
    MANIFEST_PATH_ENV,
    OUTPUT_DIR_ENV,
    DEFAULT_MANIFEST_PATH,
    DEFAULT_OUTPUT_DIR,
    MAX_REDIRECTS,
    CONNECT_TIMEOUT,
    READ_TIMEOUT,
)


@dataclass(frozen=True)
class SyncConfig:
    """Everything a sync run needs to know."""
    manifest_path: str = DEFAULT_MANIFEST_PATH
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    check_only: bool = False
    force: bool = False
    verbose: bool = False
    max_redirects: int = MAX_REDIRECTS
    connect_timeout: float = CONNECT_TIMEOUT
    read_timeout: float = READ_TIMEOUT

    @property
    def manifest_is_remote(self) -> bool:
        return self.manifest_path.startswith(("http://", "https://"))

    @classmethod
    def from_env(
        cls,
        check_only: bool = False,
        force: bool = False,
        verbose: bool = False,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "SyncConfig":
        """
        Build a config from mode flags and environment overrides.

        Empty environment values fall back to the defaults.
        """
        if environ is None:
            environ = os.environ
        return cls(
            manifest_path=environ.get(MANIFEST_PATH_ENV) or DEFAULT_MANIFEST_PATH,
            output_dir=Path(environ.get(OUTPUT_DIR_ENV) or DEFAULT_OUTPUT_DIR),
            check_only=check_only,
            force=force,
            verbose=verbose,
        )
