"""Temper - compiles templates to server side render functions and client side source.

A single Temper instance owns every cache it uses:
- engine modules (expire after engine_ttl seconds)
- raw file contents (expire after file_ttl seconds)
- extension -> engine bindings (live as long as the instance)
- compiled artifacts (live as long as the instance, if caching is enabled)

Instances never share state. destroy() cancels all pending timers.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from types import ModuleType
from typing import Any

from temper.artifact import CompiledArtifact, CompileOptions
from temper.config import TemperConfig
from temper.errors import TemperError
from temper.files import FileStore
from temper.hashing import digest
from temper.loader import EngineLoader
from temper.naming import normalize_name
from temper.pipeline import CompilationPipeline, transform
from temper.registry import EngineRegistry

log = logging.getLogger(__name__)


class Temper:
    """Template compiler front-end.

    Example:
        temper = Temper()
        artifact = temper.fetch("views/index.jinja")
        html = artifact.server({"title": "hello"})
        temper.destroy()
    """

    def __init__(
        self,
        config: TemperConfig | None = None,
        *,
        load_module: Callable[[str], Any] | None = None,
        read_file: Callable[[str], str] | None = None,
        **options: Any,
    ):
        """Initialize with a config, or with config fields as keyword options.

        Args:
            config: Temper configuration.
            load_module: Imports an engine module by name. Defaults to importlib.
            read_file: Reads a file as text. Defaults to reading UTF-8 from disk.
            **options: TemperConfig fields, only allowed when no config is given.

        Raises:
            TypeError: If both a config and config options are given.
        """
        if config is not None and options:
            raise TypeError(
                f"Pass either a config or config options, not both: {sorted(options)}"
            )
        self.config = config if config is not None else TemperConfig(**options)

        # We only want to cache compiled templates outside of production so
        # template changes are picked up while developing.
        self.cache = self.config.should_cache()

        self.loader = EngineLoader(load_module, ttl=self.config.engine_ttl)
        self.registry = EngineRegistry(self.loader, supported=self.config.engines)
        self.files = FileStore(read_file, ttl=self.config.file_ttl)
        self.pipeline = CompilationPipeline(self.loader, self.files)
        self.compiled: dict[str, CompiledArtifact] = {}
        self._destroyed = False

    @property
    def supported(self):
        """Extension -> candidate engine names, in order of preference."""
        return self.registry.supported

    @property
    def installed(self) -> dict[str, str]:
        """Extensions for which an engine has been resolved."""
        return self.registry.installed

    def require(self, engine: str, extname: str | None = None) -> ModuleType | None:
        """Load an engine module (cached)."""
        self._ensure_alive()
        return self.loader.load(engine, extname)

    def read(self, path: str | os.PathLike[str]) -> str:
        """Read a file, using the short-lived file cache."""
        self._ensure_alive()
        return self.files.read(path)

    def resolve(self, path: str | os.PathLike[str]) -> str:
        """Discover which template engine we need to use for the given file path."""
        self._ensure_alive()
        return self.registry.resolve(path)

    discover = resolve

    def fetch(
        self, path: str | os.PathLike[str], engine: str | None = None
    ) -> CompiledArtifact:
        """Compile a template file, or return its cached artifact.

        Cached artifacts are returned as-is; the file isn't checked for changes.

        Args:
            path: The file that needs to be compiled.
            engine: Engine to use instead of the discovered one.

        Returns:
            The compiled template information.
        """
        self._ensure_alive()
        key = os.path.abspath(os.fspath(path))
        if key in self.compiled:
            return self.compiled[key]

        options = CompileOptions(
            engine=engine or self.registry.resolve(path),
            name=normalize_name(path),
            filename=key,
            debug=self.config.debug,
        )
        compiled = self.pipeline.compile(self.files.read(key), options)

        if not self.cache:
            return compiled

        log.debug("caching compiled template (%s)", key)
        self.compiled[key] = compiled
        return compiled

    prefetch = fetch

    def compile(self, source: str, options: CompileOptions | str) -> CompiledArtifact:
        """Compile template source; never cached.

        Args:
            source: The template's content.
            options: Compile options, or just the engine name.
        """
        self._ensure_alive()
        if isinstance(options, str):
            options = CompileOptions(engine=options, debug=self.config.debug)
        return self.pipeline.compile(source, options)

    @staticmethod
    def normalize_name(path: str | os.PathLike[str]) -> str:
        return normalize_name(path)

    @staticmethod
    def transform(code: str, name: str) -> str:
        return transform(code, name)

    @staticmethod
    def hash(content: Any) -> str:
        return digest(content)

    def destroy(self) -> bool:
        """Cancel all eviction timers and drop every cache.

        Returns:
            True if the instance was torn down, False if it already had been.
        """
        if self._destroyed:
            return False

        self.loader.destroy()
        self.files.destroy()
        self.registry.clear()
        self.compiled.clear()
        self._destroyed = True
        log.debug("destroyed temper instance")
        return True

    def _ensure_alive(self) -> None:
        if self._destroyed:
            raise TemperError("This Temper instance has been destroyed")
