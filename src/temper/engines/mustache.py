"""Mustache templates, through chevron or pystache.

@see https://mustache.github.io/
"""

from __future__ import annotations

from importlib import import_module
from types import ModuleType
from typing import Any

from temper.artifact import CompileOptions
from temper.engines.base import CLIENT_PLACEHOLDER, EngineOutput, module_file
from temper.errors import ModuleUnavailableError


class ChevronEngine:
    """Tokenizes once; the token list is the serialized template.

    ``chevron.render`` accepts a token list in place of a template string, so
    both the server and the client skip tokenizing on every render.
    """

    name = "chevron"

    def compile(
        self, module: ModuleType | None, source: str, options: CompileOptions
    ) -> EngineOutput:
        if module is None:
            raise ModuleUnavailableError(self.name)
        tokenizer = import_module(f"{module.__name__}.tokenizer")
        tokens = list(tokenizer.tokenize(source))

        def render(data: dict[str, Any], **render_options: Any) -> str:
            return module.render(tokens, data, **render_options)

        serialized = repr(tokens)
        client = "\n".join(
            [
                f"def {CLIENT_PLACEHOLDER}(data=None, **options):",
                "    import chevron",
                "",
                f"    return chevron.render({serialized}, data or {{}}, **options)",
                "",
            ]
        )

        return EngineOutput(
            server=render,
            server_code=serialized,
            client=client,
            library=module_file(module, "renderer.py"),
        )


class PystacheEngine:
    name = "pystache"

    def compile(
        self, module: ModuleType | None, source: str, options: CompileOptions
    ) -> EngineOutput:
        if module is None:
            raise ModuleUnavailableError(self.name)
        parsed = module.parse(source)
        renderer = module.Renderer()

        def render(data: dict[str, Any], **render_options: Any) -> str:
            return renderer.render(parsed, data, **render_options)

        client = "\n".join(
            [
                f"def {CLIENT_PLACEHOLDER}(data=None, **options):",
                "    import pystache",
                "",
                f"    return pystache.render({source!r}, data or {{}}, **options)",
                "",
            ]
        )

        return EngineOutput(server=render, server_code=source, client=client)
