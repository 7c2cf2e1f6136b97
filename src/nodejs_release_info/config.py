"""
Configuration loading.

Settings are read from an optional YAML file, by default ``config.yaml`` in
the per-user configuration directory. Recognised keys:

    PROTOCOL: "https:"
    HOST: "nodejs.org"
    PATH_PREFIX: "/download/release"
    REQUEST_TIMEOUT: 30

Every key is optional; missing keys fall back to the public release server.
"""

import os
from typing import Any, Dict, Optional

import platformdirs
import yaml

from nodejs_release_info.constants import (
    APP_NAME,
    CONFIG_FILE_NAME,
    CONFIG_KEY_HOST,
    CONFIG_KEY_PATH_PREFIX,
    CONFIG_KEY_PROTOCOL,
    CONFIG_KEY_REQUEST_TIMEOUT,
    DEFAULT_REQUEST_TIMEOUT,
)
from nodejs_release_info.exceptions import ConfigFileError
from nodejs_release_info.log_utils import logger
from nodejs_release_info.urls import URLFormatter


def get_config_file() -> str:
    """Return the default configuration file path inside the user config directory."""
    return os.path.join(platformdirs.user_config_dir(APP_NAME), CONFIG_FILE_NAME)


def load_config(path: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """
    Load the YAML configuration.

    Parameters:
        path (str | None): Explicit configuration file; the platformdirs location when None.

    Returns:
        dict | None: The parsed configuration, or None if the file does not exist.
        An empty file yields an empty dict.

    Raises:
        ConfigFileError: If the file cannot be read, is not valid YAML, or does
            not contain a mapping.
    """
    config_path = path or get_config_file()
    if not os.path.exists(config_path):
        logger.debug("No configuration file at %s", config_path)
        return None

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigFileError(
            "Cannot read configuration file", path=config_path, details=str(exc)
        ) from exc
    except yaml.YAMLError as exc:
        raise ConfigFileError(
            "Invalid YAML in configuration file", path=config_path, details=str(exc)
        ) from exc

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigFileError(
            "Configuration file must contain a mapping",
            path=config_path,
            details=f"got {type(config).__name__}",
        )

    logger.debug("Loaded configuration from %s", config_path)
    return config


def build_url_formatter(config: Optional[Dict[str, Any]]) -> URLFormatter:
    """Build a URLFormatter, overriding the defaults with any configured values."""
    overrides: Dict[str, str] = {}
    for key, field_name in (
        (CONFIG_KEY_PROTOCOL, "protocol"),
        (CONFIG_KEY_HOST, "host"),
        (CONFIG_KEY_PATH_PREFIX, "path_prefix"),
    ):
        value = (config or {}).get(key)
        if value is None:
            continue
        if not isinstance(value, str) or (field_name != "path_prefix" and not value):
            logger.warning("Ignoring invalid %s value %r", key, value)
            continue
        overrides[field_name] = value
    return URLFormatter(**overrides)


def get_request_timeout(config: Optional[Dict[str, Any]]) -> float:
    """
    Return the configured request timeout in seconds.

    Invalid or non-positive values log a warning and fall back to the default.
    """
    value = (config or {}).get(CONFIG_KEY_REQUEST_TIMEOUT)
    if value is None:
        return float(DEFAULT_REQUEST_TIMEOUT)
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        logger.warning(
            "Invalid %s value %r; using default of %d",
            CONFIG_KEY_REQUEST_TIMEOUT,
            value,
            DEFAULT_REQUEST_TIMEOUT,
        )
        return float(DEFAULT_REQUEST_TIMEOUT)
    if timeout <= 0:
        logger.warning(
            "%s must be > 0; using default of %d",
            CONFIG_KEY_REQUEST_TIMEOUT,
            DEFAULT_REQUEST_TIMEOUT,
        )
        return float(DEFAULT_REQUEST_TIMEOUT)
    return timeout
