"""Temper - compile templates from many engines into one artifact shape."""

from temper._version import __version__
from temper.artifact import (
    ArtifactHash,
    CompiledArtifact,
    CompileOptions,
    ServerRender,
    evaluate_client,
)
from temper.config import TemperConfig
from temper.errors import (
    FileUnreadableError,
    ModuleUnavailableError,
    NoEngineAvailableError,
    TemperError,
    UnsupportedEngineError,
    UnsupportedExtensionError,
)
from temper.service import Temper

__all__ = [
    "__version__",
    "ArtifactHash",
    "CompiledArtifact",
    "CompileOptions",
    "FileUnreadableError",
    "ModuleUnavailableError",
    "NoEngineAvailableError",
    "ServerRender",
    "Temper",
    "TemperConfig",
    "TemperError",
    "UnsupportedEngineError",
    "UnsupportedExtensionError",
    "evaluate_client",
]
