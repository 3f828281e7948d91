"""Shared pytest fixtures for the mimewire test suite."""

from __future__ import annotations

# Disable Rich colors BEFORE any imports, Rich checks these at import time
import os

os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"

import pathlib
import shutil
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest

# Import private internals for testing purposes
import mimewire.config.loader as _cfg_loader
from mimewire.mail import MessageBuilder

# pylint: disable=redefined-outer-name

#: Instant used by the fixed clock, rendered as ``Mon, 02 May 2022 16:38:28 +0200``.
FIXED_NOW = datetime(2022, 5, 2, 16, 38, 28, tzinfo=timezone(timedelta(hours=2)))


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return the root directory containing persistent test fixtures."""

    return pathlib.Path(__file__).parent / "fixtures"


@pytest.fixture
def copy_fixture(fixtures_root: Path, tmp_path: Path) -> Callable[..., Path]:
    """Copy a fixture file into the pytest temp directory."""

    def _copy(subdir: str, fixture_name: str, dest_name: str | None = None) -> Path:
        """Copy the requested fixture file and return the destination path."""

        src = fixtures_root / subdir / fixture_name
        dst = tmp_path / (dest_name or fixture_name)
        shutil.copyfile(src, dst)
        return dst

    return _copy


@pytest.fixture
def cfg_loader() -> Any:
    """Expose the config loader module to test its private helpers."""

    return _cfg_loader


@pytest.fixture(autouse=True)
def _reset_config_cache() -> Iterator[None]:
    """Make sure no test sees configuration cached by another one."""

    _cfg_loader.clear_config()
    yield
    _cfg_loader.clear_config()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Return a clock that always reports :data:`FIXED_NOW`."""

    return lambda: FIXED_NOW


@pytest.fixture
def builder(fixed_clock: Callable[[], datetime]) -> MessageBuilder:
    """Provide a builder with a deterministic Date header."""

    return MessageBuilder(clock=fixed_clock)
