"""CompilationPipeline - runs an engine adapter and normalizes its output."""

from __future__ import annotations

import keyword
import logging
import os

from temper.artifact import ArtifactHash, CompiledArtifact, CompileOptions, ServerRender
from temper.engines import CLIENT_PLACEHOLDER, get_adapter
from temper.files import FileStore
from temper.hashing import digest
from temper.loader import EngineLoader

log = logging.getLogger(__name__)


def transform(code: str, name: str) -> str:
    """Give the generated client function its real name.

    Purely textual: the first ``def anonymous(`` becomes ``def <name>(``.
    Names that aren't valid python identifiers (empty, or containing ``$``)
    leave the placeholder in place.

    Args:
        code: Client source produced by an engine adapter.
        name: Identifier derived from the template file name.

    Returns:
        The client source with the function renamed.
    """
    if not name.isidentifier() or keyword.iskeyword(name):
        return code
    return code.replace(f"def {CLIENT_PLACEHOLDER}(", f"def {name}(", 1)


class CompilationPipeline:
    """Compiles template source into a ``CompiledArtifact``.

    Engine modules come from the loader and runtime library files are read
    through the file store, so both share the owning instance's caches.
    """

    def __init__(self, loader: EngineLoader, files: FileStore):
        self.loader = loader
        self.files = files

    def compile(self, source: str, options: CompileOptions) -> CompiledArtifact:
        """Compile a template to a server side and client side component.

        Args:
            source: The template's content.
            options: Engine to use, derived name, filename and debug flag.

        Returns:
            The compiled artifact with content hashes.
        """
        extname = os.path.splitext(options.filename)[1] if options.filename else None
        # Unknown engines fail before anything gets imported or cached.
        adapter = get_adapter(options.engine)
        module = self.loader.load(options.engine, extname)

        output = adapter.compile(module, source, options)
        server = ServerRender(output.server, output.server_code, options.engine)
        client = transform(output.client, options.name)
        library = self.files.read(output.library) if output.library else ""

        log.debug("compiled template %s using engine %s", options.filename, options.engine)

        return CompiledArtifact(
            library=library,
            client=client,
            server=server,
            engine=options.engine,
            hash=ArtifactHash(
                library=digest(library),
                client=digest(client),
                server=digest(server),
            ),
        )
