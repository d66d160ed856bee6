"""EngineRegistry - picks a working template engine for each file extension."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from temper.engines import list_engines
from temper.errors import (
    ModuleUnavailableError,
    NoEngineAvailableError,
    UnsupportedExtensionError,
)
from temper.loader import EngineLoader

log = logging.getLogger(__name__)

# Extension -> engine modules, in order of preference. The names are also the
# packages that should be installed to compile that template language.
SUPPORTED_ENGINES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        ".mustache": ("chevron", "pystache"),
        ".jinja": ("jinja2",),
        ".jinja2": ("jinja2",),
        ".j2": ("jinja2",),
        ".mako": ("mako",),
        ".html": ("html",),
    }
)


class EngineRegistry:
    """Resolves file paths to engine names.

    The first candidate that loads becomes the engine for that extension for
    the rest of this registry's life. Later calls never probe again, even if
    a better ranked engine gets installed in the meantime. Candidates without
    an engine adapter are skipped without being imported.
    """

    def __init__(
        self,
        loader: EngineLoader,
        supported: Mapping[str, list[str] | tuple[str, ...]] | None = None,
    ):
        self.loader = loader
        candidates = dict(SUPPORTED_ENGINES)
        for extname, names in (supported or {}).items():
            candidates[extname] = tuple(names)
        self._supported: Mapping[str, tuple[str, ...]] = MappingProxyType(candidates)
        self.installed: dict[str, str] = {}

    @property
    def supported(self) -> Mapping[str, tuple[str, ...]]:
        return self._supported

    def candidates(self, extname: str) -> tuple[str, ...]:
        return self._supported.get(extname, ())

    def resolve(self, path: str | os.PathLike[str]) -> str:
        """Discover which template engine we need for the given file path.

        Args:
            path: The template file name.

        Returns:
            Name of the template engine.

        Raises:
            UnsupportedExtensionError: No engines are configured for the extension.
            NoEngineAvailableError: None of the configured engines could be loaded.
        """
        extname = Path(path).suffix

        # Already found a working engine, don't go probing again.
        if extname in self.installed:
            return self.installed[extname]

        candidates = self.candidates(extname)
        if not candidates:
            log.debug("file %s requires a template engine we're not supporting", path)
            raise UnsupportedExtensionError(extname)

        adapters = list_engines()
        for engine in candidates:
            if engine not in adapters:
                log.debug("no adapter for %s to compile %s, searching for another", engine, path)
                continue

            try:
                self.loader.load(engine, extname)
            except ModuleUnavailableError:
                log.debug("failed to load %s to compile %s, searching for another", engine, path)
                continue

            self.installed[extname] = engine
            return engine

        log.debug("failed to compile %s, missing template engines %s", path, ", ".join(candidates))
        raise NoEngineAvailableError(extname, list(candidates))

    discover = resolve

    def clear(self) -> None:
        self.installed.clear()
