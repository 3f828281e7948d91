"""Logger factory with presets and a custom TRACE level.

``LogManager`` is a :class:`logging.Logger` that wires its own handlers
from a preset name or a config mapping shaped like the ``logger`` section
of ``mimewire.conf.yml``::

    logger:
      preset: dev
      console:
        level: INFO
      file:
        level: DEBUG
        path: mimewire.log

Console output goes through :class:`rich.logging.RichHandler`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import SimpleNamespace
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

#: Wire-level detail, below DEBUG.
TRACE_LEVEL = 5

#: Completed operations worth reporting, between INFO and WARNING.
SUCCESS_LEVEL = 25

logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")

LOGGING_LEVEL = SimpleNamespace(
    TRACE=TRACE_LEVEL,
    DEBUG=logging.DEBUG,
    INFO=logging.INFO,
    SUCCESS=SUCCESS_LEVEL,
    WARNING=logging.WARNING,
    ERROR=logging.ERROR,
    CRITICAL=logging.CRITICAL,
)

#: Presets used when no configuration file provides one.
FALLBACK_PRESETS: dict[str, dict[str, Any]] = {
    "dev": {"output": "console", "console": {"level": "DEBUG"}},
    "prod": {"output": "file", "file": {"level": "INFO", "path": "mimewire.log"}},
    "debug": {
        "output": "both",
        "console": {"level": "TRACE"},
        "file": {"level": "TRACE", "path": "mimewire.log"},
    },
}

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _parse_level(value: str | int | None, default: int) -> int:
    """Translate a level name or number into a logging level."""
    if value is None:
        return default
    if isinstance(value, int):
        return value
    level = getattr(LOGGING_LEVEL, str(value).upper(), None)
    if level is None:
        raise ValueError(f"Unknown log level: {value!r}")
    return int(level)


class LogManager(logging.Logger):
    """Logger configured from a preset or an explicit config mapping.

    The logger itself accepts every level; handlers do the filtering.

    Args:
        name: Logger name.
        preset: One of ``dev``, ``prod`` or ``debug``.
        config: Mapping overriding the preset (``output``, ``console``, ``file``).

    Examples:
        >>> logger = LogManager(name="demo", preset="dev")
        >>> logger.level == TRACE_LEVEL
        True
    """

    def __init__(
        self,
        name: str = "mimewire",
        *,
        preset: str | None = None,
        config: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(name, TRACE_LEVEL)
        self._settings = self._resolve_settings(preset, config)
        self._install_handlers()

    @property
    def settings(self) -> dict[str, Any]:
        """Return the effective handler settings."""
        return dict(self._settings)

    @staticmethod
    def _resolve_settings(preset: str | None, config: Mapping[str, Any] | None) -> dict[str, Any]:
        if config is None and preset is None:
            from mimewire.config import get_config  # pylint: disable=import-outside-toplevel

            logger_section = get_config().get("logger") or {}
            preset = logger_section.get("preset")
            config = {k: v for k, v in logger_section.items() if k != "preset"}

        settings: dict[str, Any] = {}
        if preset is not None:
            if preset not in FALLBACK_PRESETS:
                raise ValueError(f"Unknown logging preset: {preset!r}")
            settings = {k: dict(v) if isinstance(v, dict) else v for k, v in FALLBACK_PRESETS[preset].items()}
        for key, value in (config or {}).items():
            if isinstance(value, Mapping) and isinstance(settings.get(key), dict):
                settings[key] = {**settings[key], **value}
            else:
                settings[key] = dict(value) if isinstance(value, Mapping) else value
        settings.setdefault("output", "console")
        return settings

    def _install_handlers(self) -> None:
        output = self._settings["output"]
        if output not in ("console", "file", "both"):
            raise ValueError(f"Unknown logging output: {output!r}")

        if output in ("console", "both"):
            console_cfg = self._settings.get("console", {})
            handler: logging.Handler = RichHandler(
                console=Console(stderr=True),
                show_path=False,
                markup=False,
            )
            handler.setLevel(_parse_level(console_cfg.get("level"), logging.INFO))
            self.addHandler(handler)

        if output in ("file", "both"):
            file_cfg = self._settings.get("file", {})
            path = Path(file_cfg.get("path", "mimewire.log"))
            path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(path, encoding="utf-8")
            handler.setFormatter(logging.Formatter(_FILE_FORMAT))
            handler.setLevel(_parse_level(file_cfg.get("level"), logging.DEBUG))
            self.addHandler(handler)

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log ``msg`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, **kwargs)

    def success(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log ``msg`` at SUCCESS level."""
        if self.isEnabledFor(SUCCESS_LEVEL):
            self._log(SUCCESS_LEVEL, msg, args, **kwargs)


__all__ = [
    "FALLBACK_PRESETS",
    "LOGGING_LEVEL",
    "SUCCESS_LEVEL",
    "TRACE_LEVEL",
    "LogManager",
]
