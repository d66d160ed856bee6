"""Tests for the EngineLoader."""

import json
import time

import pytest

from temper.errors import ModuleUnavailableError
from temper.loader import EngineLoader

from conftest import FakeModules, wait_until


def test_load_returns_and_caches_module():
    modules = FakeModules("jinja2")
    loader = EngineLoader(modules)

    first = loader.load("jinja2")
    second = loader.load("jinja2")

    assert first is modules.available["jinja2"]
    assert second is first
    assert modules.calls == ["jinja2"]
    assert "jinja2" in loader
    loader.destroy()


def test_load_uses_importlib_by_default():
    loader = EngineLoader()
    assert loader.load("json") is json
    loader.destroy()


def test_html_needs_no_module():
    modules = FakeModules()
    loader = EngineLoader(modules)

    assert loader.load("html") is None
    assert loader.load("html") is None
    assert "html" in loader
    assert modules.calls == []
    loader.destroy()


def test_missing_module_raises_and_is_not_cached():
    modules = FakeModules()
    loader = EngineLoader(modules)

    with pytest.raises(ModuleUnavailableError) as exc_info:
        loader.load("cowdoodlesack", ".moo")

    err = exc_info.value
    assert err.name == "cowdoodlesack"
    assert "cowdoodlesack" in str(err)
    assert "pip install" in str(err)
    assert ".moo" in str(err)
    assert isinstance(err.__cause__, ImportError)
    assert "cowdoodlesack" not in loader

    # Failures are retried on the next call.
    with pytest.raises(ModuleUnavailableError):
        loader.load("cowdoodlesack")
    assert modules.calls == ["cowdoodlesack", "cowdoodlesack"]
    loader.destroy()


def test_real_missing_module():
    loader = EngineLoader()
    with pytest.raises(ModuleUnavailableError):
        loader.load("cowdoodlesack")
    loader.destroy()


def test_module_is_dropped_after_ttl_and_reloaded():
    modules = FakeModules("jinja2")
    loader = EngineLoader(modules, ttl=0.05)

    loader.load("jinja2")
    assert wait_until(lambda: "jinja2" not in loader)

    loader.load("jinja2")
    assert modules.calls == ["jinja2", "jinja2"]
    loader.destroy()


def test_ttl_counts_from_load_not_from_last_use():
    modules = FakeModules("jinja2")
    loader = EngineLoader(modules, ttl=0.5)

    started = time.monotonic()
    loader.load("jinja2")
    time.sleep(0.3)
    loader.load("jinja2")

    assert wait_until(lambda: "jinja2" not in loader)
    # Evicted half a second after loading, not half a second after the last use.
    assert time.monotonic() - started < 0.75
    assert modules.calls == ["jinja2"]
    loader.destroy()
