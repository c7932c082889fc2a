"""
Manifest source resolution for Asset Sync.

A manifest location is either a local file path or an http(s) URL.
"""

import requests

from ..config import SyncConfig
from ..core.constants import MANIFEST_FETCH_TIMEOUT
from ..errors import ManifestFetchError
from .manifest import Manifest


def fetch_remote_manifest(url: str, timeout: float = MANIFEST_FETCH_TIMEOUT) -> Manifest:
    """
    Download and parse a manifest served over HTTP(S).

    Raises:
        ManifestFetchError: On connection failure, timeout or HTTP error
        ManifestParseError: If the body is not valid JSON
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.HTTPError as e:
        raise ManifestFetchError(url, f"HTTP {e.response.status_code}") from e
    except requests.Timeout as e:
        raise ManifestFetchError(url, "connection timed out") from e
    except requests.RequestException as e:
        raise ManifestFetchError(url, e) from e

    return Manifest.from_json(response.text, source=url)


def load_manifest(config: SyncConfig) -> Manifest:
    """Load the manifest named by the config, local or remote."""
    if config.manifest_is_remote:
        return fetch_remote_manifest(config.manifest_path)
    return Manifest.load(config.manifest_path)
