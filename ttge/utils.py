"""Small file helpers."""

from __future__ import annotations

import sys
from os import PathLike
from typing import Union

__all__ = ["read_file_as_string"]


def read_file_as_string(path: Union[str, PathLike]) -> str:
    """Return the whole text of ``path``, or an empty string if it cannot be opened."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError:
        print(f"Failed to open file: {path}", file=sys.stderr)
        return ""