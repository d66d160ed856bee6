"""FileStore - reads template and runtime files with a short-lived cache."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from temper.cache import TimedCache
from temper.errors import FileUnreadableError

log = logging.getLogger(__name__)

DEFAULT_FILE_TTL = 60.0


def read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


class FileStore:
    """Caches raw file contents for ``ttl`` seconds.

    The source is only needed until it has been compiled, so the window is
    much shorter than the one for engine modules.
    """

    def __init__(
        self,
        read_file: Callable[[str], str] | None = None,
        ttl: float = DEFAULT_FILE_TTL,
    ):
        self.read_file = read_file or read_text
        self.ttl = ttl
        self.file: TimedCache[str, str] = TimedCache(on_evict=self._evicted)

    def read(self, path: str | os.PathLike[str]) -> str:
        """Read a file in to the cache and return its contents.

        Raises:
            FileUnreadableError: If the reader fails for any reason.
        """
        key = os.path.abspath(os.fspath(path))
        content = self.file.get(key)
        if content is not None:
            return content

        try:
            content = self.read_file(key)
        except Exception as e:
            raise FileUnreadableError(key, e) from e

        self.file.set(key, content, self.ttl)
        return content

    def get(self, path: str | os.PathLike[str]) -> str | None:
        """Return cached contents without touching the filesystem."""
        return self.file.get(os.path.abspath(os.fspath(path)))

    def destroy(self) -> bool:
        return self.file.destroy()

    def _evicted(self, path: str) -> None:
        log.debug("removing cached template (%s) to reduce memory", path)
