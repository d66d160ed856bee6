"""Plain HTML files with ``{key}`` placeholders.

There is nothing to compile: the server function substitutes placeholders
directly and the client carries its own copy of the substitution code.
"""

from __future__ import annotations

import inspect
import textwrap
from types import ModuleType
from typing import Any

from temper.artifact import CompileOptions
from temper.engines.base import CLIENT_PLACEHOLDER, EngineOutput


def substitute(template, data):
    """Replace every ``{key}`` in template with the matching data value.

    All keys are matched in a single pass, so a value that itself contains
    ``{other}`` is inserted verbatim and never substituted again.
    """
    import re

    if not data:
        return template

    values = {str(key): value for key, value in data.items()}
    pattern = re.compile(
        "\\{(" + "|".join(re.escape(key) for key in values) + ")\\}"
    )
    return pattern.sub(lambda match: str(values[match.group(1)]), template)


class HtmlEngine:
    """Pass-through engine, needs no module."""

    name = "html"

    def compile(
        self, module: ModuleType | None, source: str, options: CompileOptions
    ) -> EngineOutput:
        def render(data: dict[str, Any], **_: Any) -> str:
            return substitute(source, data)

        client = "\n".join(
            [
                f"def {CLIENT_PLACEHOLDER}(data=None, **options):",
                textwrap.indent(inspect.getsource(substitute), "    ").rstrip(),
                "",
                # repr() keeps the template a valid string literal whatever it contains.
                f"    return substitute({source!r}, data or {{}})",
                "",
            ]
        )

        return EngineOutput(server=render, server_code=source, client=client)
