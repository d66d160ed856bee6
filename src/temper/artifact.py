"""Compiled artifact types - the uniform result of compiling a template."""

from __future__ import annotations

import ast
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass
class CompileOptions:
    """Options for a single compilation."""

    engine: str  # e.g. "jinja2"
    name: str = ""  # safe identifier for the client function
    filename: str | None = None  # only used for engine diagnostics
    debug: bool = False  # forwarded to engines that support it


class ServerRender:
    """Server-side render function.

    Calling it renders the template; ``str()`` gives the compiled code (or
    raw source) so the function can be hashed deterministically.
    """

    def __init__(self, render: Callable[..., str], code: str, engine: str):
        self._render = render
        self.code = code
        self.engine = engine

    def __call__(self, data: dict[str, Any] | None = None, **options: Any) -> str:
        return self._render(data or {}, **options)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"<ServerRender engine={self.engine!r}>"


@dataclass
class ArtifactHash:
    library: str
    client: str
    server: str


@dataclass
class CompiledArtifact:
    """Everything needed to render a template on the server or ship it."""

    server: ServerRender
    client: str  # python source defining the render function
    library: str  # runtime support code for the client, may be empty
    engine: str
    hash: ArtifactHash


def evaluate_client(client: str, filename: str = "<temper-client>") -> Callable[..., str]:
    """Execute client source in a fresh namespace and return its render function.

    The client source must end with a top-level function definition, which
    is what every engine adapter produces.

    Args:
        client: Source from ``CompiledArtifact.client``.
        filename: Name used in tracebacks.

    Returns:
        The render function defined by the source.
    """
    tree = ast.parse(client, filename=filename)
    names = [node.name for node in tree.body if isinstance(node, ast.FunctionDef)]
    if not names:
        raise ValueError("client source does not define a render function")

    namespace: dict[str, Any] = {"__name__": "temper_client"}
    exec(compile(tree, filename, "exec"), namespace)
    return namespace[names[-1]]
