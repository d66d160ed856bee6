"""Tests for engine discovery."""

import pytest

from temper.errors import NoEngineAvailableError, UnsupportedExtensionError
from temper.loader import EngineLoader
from temper.registry import SUPPORTED_ENGINES, EngineRegistry

from conftest import FakeModules


@pytest.fixture
def registry():
    loader = EngineLoader()
    yield EngineRegistry(loader)
    loader.destroy()


def test_has_list_with_supported_types(registry):
    for extname in (".mustache", ".jinja", ".jinja2", ".j2", ".mako", ".html"):
        assert extname in registry.supported

    assert registry.candidates(".mustache") == ("chevron", "pystache")
    assert "jinja2" in registry.candidates(".jinja")
    assert "mako" in registry.candidates(".mako")
    assert registry.candidates(".trololol") == ()


def test_supported_is_read_only(registry):
    with pytest.raises(TypeError):
        registry.supported[".new"] = ("jinja2",)  # type: ignore[index]
    with pytest.raises(TypeError):
        SUPPORTED_ENGINES[".new"] = ("jinja2",)  # type: ignore[index]


def test_returns_the_correct_engine(registry):
    assert registry.resolve("foo.jinja") == "jinja2"
    assert registry.resolve("foo.j2") == "jinja2"
    assert registry.resolve("foo.html") == "html"


def test_unknown_extension_raises(registry):
    with pytest.raises(UnsupportedExtensionError) as exc_info:
        registry.resolve("/care/bear/path/template.trololol")

    message = str(exc_info.value)
    assert "trololol" in message
    assert "unsupported" in message.lower()
    assert exc_info.value.extname == ".trololol"


def test_first_loadable_candidate_wins():
    modules = FakeModules("chevron", "pystache")
    loader = EngineLoader(modules)
    registry = EngineRegistry(
        loader, supported={".mustache": ["mako", "chevron", "pystache"]}
    )

    assert registry.resolve("x.mustache") == "chevron"
    # pystache is never loaded once chevron worked.
    assert modules.calls == ["mako", "chevron"]
    assert registry.installed == {".mustache": "chevron"}
    loader.destroy()


def test_binding_is_sticky():
    """A better ranked engine installed later doesn't change the binding."""
    modules = FakeModules("chevron")
    loader = EngineLoader(modules)
    registry = EngineRegistry(
        loader, supported={".mustache": ["mako", "chevron", "pystache"]}
    )

    assert registry.resolve("x.mustache") == "chevron"
    modules.install("mako")

    assert registry.resolve("x.mustache") == "chevron"
    assert registry.resolve("other/y.mustache") == "chevron"
    assert modules.calls == ["mako", "chevron"]
    loader.destroy()


def test_no_engine_available():
    modules = FakeModules()
    loader = EngineLoader(modules)
    registry = EngineRegistry(loader, supported={".mustache": ["mako", "chevron"]})

    with pytest.raises(NoEngineAvailableError) as exc_info:
        registry.resolve("x.mustache")

    err = exc_info.value
    assert err.extname == ".mustache"
    assert err.tried == ["mako", "chevron"]
    assert "pip install mako" in str(err)
    assert registry.installed == {}

    # Nothing was memoized, so the next call probes again.
    with pytest.raises(NoEngineAvailableError):
        registry.resolve("x.mustache")
    assert modules.calls == ["mako", "chevron", "mako", "chevron"]
    loader.destroy()


def test_empty_candidate_list_is_unsupported():
    loader = EngineLoader(FakeModules())
    registry = EngineRegistry(loader, supported={".none": []})

    with pytest.raises(UnsupportedExtensionError):
        registry.resolve("x.none")
    loader.destroy()


def test_configured_candidates_extend_defaults():
    loader = EngineLoader()
    registry = EngineRegistry(loader, supported={".tpl": ["jinja2"]})

    assert registry.resolve("page.tpl") == "jinja2"
    assert registry.resolve("page.html") == "html"
    loader.destroy()


def test_discover_is_resolve(registry):
    assert registry.discover("foo.html") == "html"


def test_candidates_without_an_adapter_are_skipped():
    """An importable module that temper can't compile with is never bound."""
    modules = FakeModules("json", "jinja2")
    loader = EngineLoader(modules)
    registry = EngineRegistry(loader, supported={".tpl": ["json", "jinja2"]})

    assert registry.resolve("page.tpl") == "jinja2"
    assert registry.installed == {".tpl": "jinja2"}
    assert modules.calls == ["jinja2"]
    assert "json" not in loader
    loader.destroy()
