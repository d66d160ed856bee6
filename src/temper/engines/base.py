"""Engine adapter interface.

Every template engine is wrapped by an adapter that knows how to drive that
particular library. Adapters return an ``EngineOutput``; the pipeline turns
that into the uniform ``CompiledArtifact``.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from types import ModuleType
from typing import Protocol

from temper.artifact import CompileOptions

# Client functions are generated with this name and renamed afterwards.
CLIENT_PLACEHOLDER = "anonymous"


@dataclass
class EngineOutput:
    """Raw output of an engine adapter."""

    server: Callable[..., str]  # render(data, **options) -> str
    server_code: str  # string form of the compiled server template
    client: str  # python source defining `anonymous(data=None, **options)`
    library: str | None = None  # path of the runtime file the client relies on


class EngineAdapter(Protocol):
    """Compiles template source with one specific engine."""

    name: str

    def compile(
        self, module: ModuleType | None, source: str, options: CompileOptions
    ) -> EngineOutput: ...


def module_file(module: ModuleType, *parts: str) -> str:
    """Locate a file relative to an engine module's package directory."""
    directory = os.path.dirname(os.path.abspath(module.__file__ or ""))
    return os.path.join(directory, *parts)
