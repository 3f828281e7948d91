"""Exceptions raised by the mimewire.config module.

Exception hierarchy::

    MimewireError (root of every library error)
        ConfigError (base for configuration errors)
            ConfigFileNotFoundError (also FileNotFoundError)
            ConfigFormatError (also ValueError)
            ConfigNotLoadedError (also RuntimeError)
"""

from __future__ import annotations


class MimewireError(Exception):
    """Base exception for every error raised by mimewire."""


class ConfigError(MimewireError):
    """Base exception for configuration loading errors."""


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """The requested configuration file does not exist."""


class ConfigFormatError(ConfigError, ValueError):
    """The configuration file could not be parsed or has the wrong shape."""


class ConfigNotLoadedError(ConfigError, RuntimeError):
    """Configuration was required before anything was loaded."""


__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigNotLoadedError",
    "MimewireError",
]
