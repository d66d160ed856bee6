"""Temper Exceptions

Custom exceptions raised while discovering engines, reading templates and
compiling them.
"""

from __future__ import annotations


class TemperError(Exception):
    """Base exception for all temper errors."""

    pass


class UnsupportedExtensionError(TemperError):
    """Raised when no template engine is configured for a file extension."""

    def __init__(self, extname: str):
        self.extname = extname
        super().__init__(
            f"Unsupported file extension: {extname or '(none)'} is not supported"
        )


class ModuleUnavailableError(TemperError):
    """Raised when an engine module cannot be imported."""

    def __init__(self, name: str, extname: str | None = None):
        self.name = name
        self.extname = extname
        target = f"{extname} templates" if extname else "templates"
        super().__init__(
            f"The {name} module isn't installed which we need to compile {target}. "
            f"Run `pip install {name}` in your environment."
        )


class NoEngineAvailableError(TemperError):
    """Raised when every candidate engine for an extension failed to load."""

    def __init__(self, extname: str, tried: list[str]):
        self.extname = extname
        self.tried = list(tried)
        super().__init__(
            f"No compatible template engine installed for {extname} "
            f"(tried: {', '.join(self.tried)}), please run: pip install {self.tried[0]}"
        )


class UnsupportedEngineError(TemperError):
    """Raised when an engine name has no compilation adapter."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unsupported template engine: {name}")


class FileUnreadableError(TemperError):
    """Raised when a template or runtime file cannot be read."""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to read {path} due to {cause}")
