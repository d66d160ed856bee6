"""Mako templates.

Mako compiles a template into the source of a python module. The client
ships that module source together with a small shim that executes it and
renders through ``mako.template.ModuleTemplate``.

@see https://www.makotemplates.org/
"""

from __future__ import annotations

import re
from importlib import import_module
from types import ModuleType
from typing import Any

from temper.artifact import CompileOptions
from temper.engines.base import CLIENT_PLACEHOLDER, EngineOutput, module_file
from temper.errors import ModuleUnavailableError

# Mako stamps generated modules with the compile time.
MODIFIED_TIME = re.compile(r"^_modified_time = .*$", re.M)


class MakoEngine:
    name = "mako"

    def compile(
        self, module: ModuleType | None, source: str, options: CompileOptions
    ) -> EngineOutput:
        if module is None:
            raise ModuleUnavailableError(self.name)
        # `import mako` doesn't pull in the template submodule.
        Template = import_module(f"{module.__name__}.template").Template
        template = Template(
            text=source,
            uri=options.filename or options.name or CLIENT_PLACEHOLDER,
            filename=options.filename,
            format_exceptions=options.debug,  # Render errors as an HTML page.
        )

        def render(data: dict[str, Any], **render_options: Any) -> str:
            return template.render(**dict(data, **render_options))

        code = MODIFIED_TIME.sub("_modified_time = 0", template.code)
        filename = options.filename or "<template>"

        client = "\n".join(
            [
                f"def {CLIENT_PLACEHOLDER}(data=None, **options):",
                "    import types",
                "    from mako.template import ModuleTemplate",
                "",
                f"    module = types.ModuleType({template.module_id!r})",
                f"    exec(compile({code!r}, {filename!r}, 'exec'), module.__dict__)",
                f"    template = ModuleTemplate(module, format_exceptions={options.debug!r})",
                "    return template.render(**dict(data or {}, **options))",
                "",
            ]
        )

        return EngineOutput(
            server=render,
            server_code=code,
            client=client,
            library=module_file(module, "runtime.py"),
        )
