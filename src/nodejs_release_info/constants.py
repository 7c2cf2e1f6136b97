"""
Constants and configuration values for nodejs-release-info.

This module contains the release server defaults, manifest names, timeouts,
and logging settings used throughout the package.
"""

# Release server defaults
DEFAULT_PROTOCOL = "https:"
DEFAULT_HOST = "nodejs.org"
DEFAULT_PATH_PREFIX = "/download/release"

# Manifest published next to every release's artifacts
MANIFEST_FILENAME = "SHASUMS256.txt"

# Leading token of every artifact filename (e.g. "node-v20.6.1-linux-x64.tar.gz")
PRODUCT_NAME = "node"

# Network timeouts (in seconds)
DEFAULT_REQUEST_TIMEOUT = 30

# HTTP statuses at or above this value mean the version is not published
HTTP_STATUS_ERROR_THRESHOLD = 400

# Configuration
APP_NAME = "nodejs-release-info"
CONFIG_FILE_NAME = "config.yaml"
CONFIG_KEY_PROTOCOL = "PROTOCOL"
CONFIG_KEY_HOST = "HOST"
CONFIG_KEY_PATH_PREFIX = "PATH_PREFIX"
CONFIG_KEY_REQUEST_TIMEOUT = "REQUEST_TIMEOUT"

# Logging
LOGGER_NAME = "nodejs_release_info"
LOG_FILE_NAME = "nodejs-release-info.log"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
INFO_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s: %(message)s"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_FILE_BACKUP_COUNT = 5
LOG_LEVEL_ENV_VAR = "NODEJS_RELEASE_INFO_LOG_LEVEL"
