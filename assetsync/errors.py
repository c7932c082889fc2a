"""
Exceptions raised by Asset Sync.

Manifest errors abort the whole run. Download errors are caught per asset
by the sync driver and counted.
"""


class AssetSyncError(Exception):
    """Base class for Asset Sync failures."""


class MissingManifestError(AssetSyncError):
    """The manifest file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Manifest not found: {path}")


class ManifestParseError(AssetSyncError):
    """The manifest is not valid JSON."""

    def __init__(self, source, reason):
        self.source = source
        super().__init__(f"Invalid manifest JSON in {source}: {reason}")


class ManifestFetchError(AssetSyncError):
    """A remote manifest could not be downloaded."""

    def __init__(self, url, reason):
        self.url = url
        super().__init__(f"Could not fetch manifest from {url}: {reason}")


class HttpStatusError(AssetSyncError):
    """Server answered with a status other than 200 or a redirect."""

    def __init__(self, status: int, url: str = ""):
        self.status = status
        self.url = url
        super().__init__(f"HTTP {status}")


class TooManyRedirectsError(AssetSyncError):
    """Redirect chain is longer than the configured limit."""

    def __init__(self, url: str, limit: int):
        self.url = url
        self.limit = limit
        super().__init__(f"Too many redirects (more than {limit}) starting at {url}")


class InvalidRedirectError(AssetSyncError):
    """Redirect Location is missing or not an absolute http(s) URL."""

    def __init__(self, location):
        self.location = location
        super().__init__(f"Invalid redirect location: {location!r}")
