"""Engine adapters.

Each supported engine module name maps to one adapter:
- html: plain HTML with {key} placeholders (no module needed)
- jinja2: Jinja2 templates
- mako: Mako templates
- chevron / pystache: Mustache templates
"""

from __future__ import annotations

from temper.engines.base import CLIENT_PLACEHOLDER, EngineAdapter, EngineOutput
from temper.engines.html import HtmlEngine, substitute
from temper.engines.jinja import JinjaEngine
from temper.engines.mako import MakoEngine
from temper.engines.mustache import ChevronEngine, PystacheEngine
from temper.errors import UnsupportedEngineError

_BUILTIN_ENGINES: dict[str, EngineAdapter] = {
    "html": HtmlEngine(),
    "jinja2": JinjaEngine(),
    "mako": MakoEngine(),
    "chevron": ChevronEngine(),
    "pystache": PystacheEngine(),
}


def get_adapter(name: str) -> EngineAdapter:
    """Get the adapter for an engine module name."""
    if name in _BUILTIN_ENGINES:
        return _BUILTIN_ENGINES[name]
    raise UnsupportedEngineError(name)


def list_engines() -> list[str]:
    """List all engine names with an adapter."""
    return list(_BUILTIN_ENGINES.keys())


__all__ = [
    "CLIENT_PLACEHOLDER",
    "EngineAdapter",
    "EngineOutput",
    "get_adapter",
    "list_engines",
    "substitute",
]
