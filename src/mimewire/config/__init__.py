"""Configuration loading for mimewire.

Defaults ship with the package in ``mimewire.conf.yml``; a file with the
same name in the working directory overrides them key by key.
"""

from mimewire.config.exceptions import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigNotLoadedError,
    MimewireError,
)
from mimewire.config.loader import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    clear_config,
    get_config,
    load_config,
    load_from_env,
    load_from_file,
    require_config,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigNotLoadedError",
    "MimewireError",
    "clear_config",
    "get_config",
    "load_config",
    "load_from_env",
    "load_from_file",
    "require_config",
]
