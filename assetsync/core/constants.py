"""
Shared constants for Asset Sync.
"""

# Environment overrides read once by the entry point
MANIFEST_PATH_ENV = "MANIFEST_PATH"
OUTPUT_DIR_ENV = "ASSETS_OUTPUT_DIR"

DEFAULT_MANIFEST_PATH = "./design-system/assets/assets-manifest.json"
DEFAULT_OUTPUT_DIR = "./design-system/assets"

# Manifest fallbacks
DEFAULT_MANIFEST_VERSION = "1.0.0"
DEFAULT_PROJECT_NAME = "Unknown"

# Prefix stripped from manifest localPath values
ASSETS_PREFIX = "assets/"

HASH_PREFIX = "sha256:"

# HTTP
REDIRECT_STATUSES = {301, 302}
MAX_REDIRECTS = 5
CONNECT_TIMEOUT = 10
READ_TIMEOUT = 120
MANIFEST_FETCH_TIMEOUT = 10
CHUNK_SIZE = 32768
