"""YAML configuration loader.

The packaged ``mimewire.conf.yml`` provides defaults; a user file with the
same name in the working directory (or any explicit path) is deep-merged on
top of it. The result is exposed as a :class:`box.Box` so sections can be
read with attribute access (``config.mail.builder.boundary``).

Examples:
    >>> from mimewire.config import get_config
    >>> config = get_config()  # doctest: +SKIP
    >>> config.mail.builder.boundary  # doctest: +SKIP
    ''
"""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Any

import yaml
from box import Box

from mimewire.config.exceptions import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigNotLoadedError,
)

log = logging.getLogger(__name__)

#: Name of the configuration file looked up in the working directory.
CONFIG_FILENAME = "mimewire.conf.yml"

#: Environment variable pointing to a configuration file.
CONFIG_ENV_VAR = "MIMEWIRE_CONFIG"

_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / CONFIG_FILENAME

# Cached configuration and the monotonic time it was loaded at
_config_cache: Box | None = None
_config_loaded_at: float = 0.0


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Parse a YAML file into a dictionary.

    Args:
        path: File to read.

    Returns:
        Parsed mapping (empty for an empty file).

    Raises:
        ConfigFileNotFoundError: If the file does not exist.
        ConfigFormatError: If the YAML is invalid or not a mapping.
    """
    if not path.is_file():
        raise ConfigFileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise ConfigFormatError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFormatError(f"Config root in {path} must be a mapping, got {type(data).__name__}")
    return data


def _load_default_config() -> dict[str, Any]:
    """Return the configuration shipped inside the package."""
    return _load_yaml_file(_DEFAULT_CONFIG_PATH)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, recursing into mappings."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config(filename: str = CONFIG_FILENAME, path: str | Path | None = None) -> Box:
    """Load the configuration and merge it over the packaged defaults.

    Args:
        filename: File name searched in the current working directory.
        path: Explicit file path; takes precedence over ``filename``.

    Returns:
        Merged configuration as a Box.

    Raises:
        ConfigFileNotFoundError: If ``path`` is given and does not exist.
        ConfigFormatError: If a file cannot be parsed.
    """
    data = _load_default_config()

    if path is not None:
        user_path = Path(path)
        data = _deep_merge(data, _load_yaml_file(user_path))
        log.debug("Loaded configuration from %s", user_path)
    else:
        user_path = Path.cwd() / filename
        if user_path.is_file():
            data = _deep_merge(data, _load_yaml_file(user_path))
            log.debug("Loaded configuration from %s", user_path)
        else:
            log.debug("No %s in %s, using packaged defaults", filename, Path.cwd())

    return Box(data)


def load_from_file(path: str | Path) -> Box:
    """Load configuration from an explicit file.

    Args:
        path: Path to a YAML configuration file.

    Returns:
        Merged configuration as a Box.
    """
    return load_config(path=path)


def load_from_env(var: str = CONFIG_ENV_VAR) -> Box:
    """Load configuration from the file named by an environment variable.

    Args:
        var: Environment variable holding the file path.

    Returns:
        Merged configuration as a Box.

    Raises:
        ConfigFileNotFoundError: If the variable is unset or empty.
    """
    value = os.environ.get(var, "").strip()
    if not value:
        raise ConfigFileNotFoundError(f"Environment variable {var} is not set")
    return load_config(path=value)


def get_config(*, force_reload: bool = False, max_age: float | None = None) -> Box:
    """Return the cached configuration, loading it on first use.

    Args:
        force_reload: Reload even if a cached configuration exists.
        max_age: Reload when the cache is older than this many seconds.

    Returns:
        The configuration Box.
    """
    global _config_cache, _config_loaded_at  # pylint: disable=global-statement

    expired = max_age is not None and (time.monotonic() - _config_loaded_at) > max_age
    if _config_cache is None or force_reload or expired:
        _config_cache = load_config()
        _config_loaded_at = time.monotonic()
    return _config_cache


def require_config() -> Box:
    """Return the cached configuration without loading it.

    Raises:
        ConfigNotLoadedError: If no configuration has been loaded yet.
    """
    if _config_cache is None:
        raise ConfigNotLoadedError("Configuration not loaded yet")
    return _config_cache


def clear_config() -> None:
    """Drop the cached configuration."""
    global _config_cache, _config_loaded_at  # pylint: disable=global-statement
    _config_cache = None
    _config_loaded_at = 0.0


__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "clear_config",
    "get_config",
    "load_config",
    "load_from_env",
    "load_from_file",
    "require_config",
]
