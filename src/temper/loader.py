"""EngineLoader - lazily imports template engine modules and keeps them for a while."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from types import ModuleType
from typing import Any

from temper.cache import TimedCache
from temper.errors import ModuleUnavailableError

log = logging.getLogger(__name__)

# The pass-through engine needs no module at all.
PASSTHROUGH_ENGINE = "html"

DEFAULT_ENGINE_TTL = 5 * 60.0

_MISSING = object()


class EngineLoader:
    """Import engine modules on demand.

    Loaded modules are cached for ``ttl`` seconds from the moment they were
    loaded; reading them does not extend that window. Failed imports are
    never cached so the next call tries again.
    """

    def __init__(
        self,
        load_module: Callable[[str], Any] | None = None,
        ttl: float = DEFAULT_ENGINE_TTL,
    ):
        self.load_module = load_module or importlib.import_module
        self.ttl = ttl
        self.required: TimedCache[str, ModuleType | None] = TimedCache(
            on_evict=self._evicted
        )

    def load(self, name: str, extname: str | None = None) -> ModuleType | None:
        """Return the engine module, importing it if it isn't cached.

        Args:
            name: Module name of the engine (e.g. ``jinja2``).
            extname: Extension we're loading for, used in error messages.

        Returns:
            The module, or None for the pass-through engine.

        Raises:
            ModuleUnavailableError: If the module cannot be imported.
        """
        cached = self.required.get(name, _MISSING)
        if cached is not _MISSING:
            return cached

        if name == PASSTHROUGH_ENGINE:
            module = None
        else:
            try:
                module = self.load_module(name)
            except Exception as e:
                log.debug("failed to load engine %s: %s", name, e)
                raise ModuleUnavailableError(name, extname) from e

        log.debug("loaded engine %s", name)
        self.required.set(name, module, self.ttl)
        return module

    def destroy(self) -> bool:
        return self.required.destroy()

    def __contains__(self, name: object) -> bool:
        return name in self.required

    def _evicted(self, name: str) -> None:
        log.debug("removing cached engine (%s) to reduce memory", name)
