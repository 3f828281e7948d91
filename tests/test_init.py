"""Tests for mimewire package initialization.

These tests verify that the package can be imported correctly and that
all public APIs are accessible.
"""

import importlib

import mimewire

# pylint: disable=import-outside-toplevel


def test_package_imports() -> None:
    """Test that all public APIs can be imported from mimewire."""
    from mimewire import (
        DEFAULT_BOUNDARY,
        HeaderSet,
        LogManager,
        MessageBuilder,
        get_config,
        load_config,
        require_config,
    )
    from mimewire.meta import __version__

    assert DEFAULT_BOUNDARY == "110000000000863a1705ddeb4f86"
    assert HeaderSet is not None
    assert LogManager is not None
    assert MessageBuilder is not None
    assert get_config is not None
    assert load_config is not None
    assert require_config is not None
    assert __version__ == mimewire.__version__


def test_all_exports_resolve() -> None:
    """Every name listed in ``__all__`` exists on the package."""
    for name in mimewire.__all__:
        assert hasattr(mimewire, name), name


def test_reload_is_safe() -> None:
    """Reloading the package keeps the public API intact."""
    module = importlib.reload(mimewire)
    assert module.__app_name__ == "mimewire"
