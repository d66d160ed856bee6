"""Content digests used as cache-busting identifiers."""

from __future__ import annotations

import hashlib
from typing import Any


def digest(content: Any) -> str:
    """Compute the MD5 hex digest of some content.

    Strings are hashed as UTF-8, bytes as-is and everything else through its
    ``str()`` form, so a compiled render function hashes by its code.

    Args:
        content: The content to hash.

    Returns:
        32 character hex digest.
    """
    if isinstance(content, bytes):
        data = content
    else:
        data = str(content).encode("utf-8")
    # Only used for cache busting.
    return hashlib.md5(data, usedforsecurity=False).hexdigest()
