"""Jinja2 templates.

@see https://jinja.palletsprojects.com/
"""

from __future__ import annotations

from types import ModuleType
from typing import Any

from temper.artifact import CompileOptions
from temper.engines.base import CLIENT_PLACEHOLDER, EngineOutput, module_file
from temper.errors import ModuleUnavailableError


class JinjaEngine:
    """Compiles once for the server and separately to python source for the client."""

    name = "jinja2"

    def compile(
        self, module: ModuleType | None, source: str, options: CompileOptions
    ) -> EngineOutput:
        if module is None:
            raise ModuleUnavailableError(self.name)
        undefined = "DebugUndefined" if options.debug else "Undefined"
        environment = module.Environment(undefined=getattr(module, undefined))
        filename = options.filename or "<template>"

        code = environment.compile(source, name=options.name or None, filename=filename)
        template = environment.template_class.from_code(
            environment, code, environment.make_globals(None)
        )

        def render(data: dict[str, Any], **render_options: Any) -> str:
            return template.render(data, **render_options)

        raw = environment.compile(
            source, name=options.name or None, filename=filename, raw=True
        )

        client = "\n".join(
            [
                f"def {CLIENT_PLACEHOLDER}(data=None, **options):",
                "    import jinja2",
                "",
                f"    environment = jinja2.Environment(undefined=jinja2.{undefined})",
                f"    code = compile({raw!r}, {filename!r}, 'exec')",
                "    template = environment.template_class.from_code(",
                "        environment, code, environment.make_globals(None)",
                "    )",
                "    return template.render(data or {}, **options)",
                "",
            ]
        )

        return EngineOutput(
            server=render,
            server_code=raw,
            client=client,
            library=module_file(module, "runtime.py"),
        )
