"""Tests for the mimewire.logging.manager module."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from rich.logging import RichHandler

from mimewire.logging import LogManager
from mimewire.logging.manager import (
    FALLBACK_PRESETS,
    LOGGING_LEVEL,
    SUCCESS_LEVEL,
    TRACE_LEVEL,
)

# pylint: disable=redefined-outer-name


@pytest.fixture
def managers() -> Iterator[list[LogManager]]:
    """Collect created loggers and close their handlers afterwards."""
    created: list[LogManager] = []
    yield created
    for logger in created:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)


class TestLogLevels:
    """Tests for custom log levels."""

    def test_trace_level_value(self) -> None:
        """TRACE_LEVEL is below DEBUG and registered by name."""
        assert TRACE_LEVEL == 5
        assert logging.getLevelName(TRACE_LEVEL) == "TRACE"

    def test_success_level_value(self) -> None:
        """SUCCESS_LEVEL sits between INFO and WARNING."""
        assert logging.INFO < SUCCESS_LEVEL < logging.WARNING
        assert logging.getLevelName(SUCCESS_LEVEL) == "SUCCESS"

    def test_logging_level_namespace_order(self) -> None:
        """The namespace lists levels in increasing order."""
        assert LOGGING_LEVEL.TRACE < LOGGING_LEVEL.DEBUG < LOGGING_LEVEL.INFO < LOGGING_LEVEL.SUCCESS
        assert LOGGING_LEVEL.SUCCESS < LOGGING_LEVEL.WARNING < LOGGING_LEVEL.ERROR < LOGGING_LEVEL.CRITICAL


class TestLogManager:
    """Handler wiring from presets and config."""

    def test_dev_preset_uses_rich_console(self, managers: list[LogManager]) -> None:
        """The dev preset installs a single Rich console handler."""
        logger = LogManager(name="test_dev", preset="dev")
        managers.append(logger)

        assert isinstance(logger, logging.Logger)
        assert logger.level == TRACE_LEVEL
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.handlers[0].level == logging.DEBUG

    def test_prod_preset_writes_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, managers: list[LogManager]
    ) -> None:
        """The prod preset logs to a file at INFO."""
        monkeypatch.chdir(tmp_path)
        logger = LogManager(name="test_prod", preset="prod")
        managers.append(logger)

        logger.debug("hidden")
        logger.info("visible")
        for handler in logger.handlers:
            handler.flush()

        content = (tmp_path / FALLBACK_PRESETS["prod"]["file"]["path"]).read_text(encoding="utf-8")
        assert "visible" in content
        assert "hidden" not in content

    def test_config_overrides_preset(self, tmp_path: Path, managers: list[LogManager]) -> None:
        """Explicit config entries are merged over the preset."""
        log_path = tmp_path / "nested" / "trace.log"
        logger = LogManager(
            name="test_custom",
            preset="debug",
            config={"output": "file", "file": {"path": str(log_path)}},
        )
        managers.append(logger)

        logger.trace("wire detail %s", 42)
        for handler in logger.handlers:
            handler.flush()

        assert logger.settings["file"]["level"] == "TRACE"
        assert "wire detail 42" in log_path.read_text(encoding="utf-8")

    def test_reads_logger_section_from_config(
        self, copy_fixture, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, managers: list[LogManager]
    ) -> None:
        """Without arguments the ``logger`` config section is used."""
        copy_fixture("config", "logger.yml", dest_name="mimewire.conf.yml")
        monkeypatch.chdir(tmp_path)
        logger = LogManager(name="test_from_config")
        managers.append(logger)

        assert logger.settings["output"] == "file"
        assert logger.handlers[0].level == logging.WARNING
        assert (tmp_path / "logs").is_dir()

    def test_success_level(self, tmp_path: Path, managers: list[LogManager]) -> None:
        """``success`` records use the SUCCESS level."""
        log_path = tmp_path / "success.log"
        logger = LogManager(name="test_success", config={"output": "file", "file": {"path": str(log_path)}})
        managers.append(logger)

        logger.success("sent")
        for handler in logger.handlers:
            handler.flush()

        assert "SUCCESS" in log_path.read_text(encoding="utf-8")

    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"preset": "nope"}, "Unknown logging preset"),
            ({"config": {"output": "syslog"}}, "Unknown logging output"),
            ({"config": {"console": {"level": "LOUD"}}}, "Unknown log level"),
        ],
    )
    def test_invalid_settings(self, kwargs: dict, match: str) -> None:
        """Bad presets, outputs and levels raise ValueError."""
        with pytest.raises(ValueError, match=match):
            LogManager(name="test_invalid", **kwargs)
