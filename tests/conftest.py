"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from assetsync.config import SyncConfig


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "network: tests that start a local HTTP server on loopback"
    )


class FakeFetcher:
    """Records fetch calls and writes canned content instead of hitting the network."""

    def __init__(self, content: bytes = b"downloaded", errors: dict = None):
        self.content = content
        self.errors = errors or {}
        self.calls = []

    async def fetch(self, url: str, dest: Path):
        self.calls.append((url, Path(dest)))
        if url in self.errors:
            raise self.errors[url]
        dest = Path(dest)
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(self.content)


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def output_dir(tmp_path):
    path = tmp_path / "assets"
    path.mkdir()
    return path


@pytest.fixture
def write_manifest(tmp_path):
    """Write a manifest dict to disk and return its path."""
    def _write(data: dict) -> Path:
        path = tmp_path / "assets-manifest.json"
        path.write_text(json.dumps(data))
        return path
    return _write


@pytest.fixture
def make_config(tmp_path, output_dir):
    """Build a SyncConfig rooted in the temp dir."""
    def _make(**kwargs) -> SyncConfig:
        kwargs.setdefault("manifest_path", str(tmp_path / "assets-manifest.json"))
        kwargs.setdefault("output_dir", output_dir)
        return SyncConfig(**kwargs)
    return _make


@pytest.fixture
def make_fetcher():
    """Factory for FakeFetcher with custom content or per-URL errors."""
    return FakeFetcher
