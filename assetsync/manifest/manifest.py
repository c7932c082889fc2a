"""
Manifest classes for Asset Sync.
"""

import json
from pathlib import Path
from dataclasses import dataclass, field

from ..core.constants import DEFAULT_MANIFEST_VERSION, DEFAULT_PROJECT_NAME
from ..errors import MissingManifestError, ManifestParseError


@dataclass(frozen=True)
class AssetEntry:
    """A single asset in the manifest."""
    url: str
    local_path: str
    hash: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "AssetEntry":
        return cls(
            url=data.get("url", ""),
            local_path=data.get("localPath", ""),
            hash=data.get("hash", ""),
        )


@dataclass
class Manifest:
    """
    Parsed assets manifest.

    The manifest contains:
    - version: Manifest version string
    - project.name: Display name of the owning project
    - assets: Mapping of asset key to AssetEntry, in document order
    """
    version: str = DEFAULT_MANIFEST_VERSION
    project_name: str = DEFAULT_PROJECT_NAME
    assets: dict[str, AssetEntry] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.assets)

    @classmethod
    def from_dict(cls, data: dict) -> "Manifest":
        project = data.get("project") or {}
        assets = data.get("assets") or {}
        return cls(
            version=data.get("version") or DEFAULT_MANIFEST_VERSION,
            project_name=project.get("name") or DEFAULT_PROJECT_NAME,
            assets={key: AssetEntry.from_dict(entry) for key, entry in assets.items()},
        )

    @classmethod
    def from_json(cls, text: str, source: str = "<manifest>") -> "Manifest":
        """Parse manifest JSON text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ManifestParseError(source, e) from e
        # Non-object documents carry no assets
        if not isinstance(data, dict):
            data = {}
        return cls.from_dict(data)

    @classmethod
    def load(cls, path: Path) -> "Manifest":
        """
        Load manifest from file.

        Args:
            path: Path to the manifest JSON

        Returns:
            Loaded Manifest instance

        Raises:
            MissingManifestError: If the file does not exist
            ManifestParseError: If the file is not valid JSON
        """
        if not Path(path).exists():
            raise MissingManifestError(path)
        return cls.from_json(Path(path).read_text(encoding="utf-8"), source=str(path))
