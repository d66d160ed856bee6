"""Derive safe Python identifiers from template file names."""

from __future__ import annotations

import os
import re

LEADING_DIGITS = re.compile(r"^[0-9]+")
UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_$]")


def normalize_name(path: str | os.PathLike[str]) -> str:
    """Convert a file name into a name for the generated client function.

    Leading digits are removed and everything except alphanumerics, ``_`` and
    ``$`` is dropped. The result may be empty.

    Example:
        >>> normalize_name("9$-money_$00-test.jade")
        '$money_$00test'
    """
    base = os.path.basename(os.fspath(path))
    stem, _ = os.path.splitext(base)
    return UNSAFE_CHARS.sub("", LEADING_DIGITS.sub("", stem))
