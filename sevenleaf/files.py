"""File-system checks and shared-library file naming."""

from __future__ import annotations

import os
import sys
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


def path_exists(path: PathLike) -> bool:
    """Return True if anything exists at ``path``."""
    return os.access(path, os.F_OK)


def directory_exists(path: PathLike) -> bool:
    """Return True if ``path`` names a directory, following symbolic links."""
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def library_filename(path: PathLike, apple: Optional[bool] = None) -> str:
    """Return ``path`` with the platform's shared-library suffix added when missing.

    On Apple platforms names ending in ``.so`` or ``.dylib`` are kept and any
    other name gets ``.dylib``; elsewhere any name not ending in ``.so`` gets
    ``.so``. ``apple`` defaults to whether the running platform is macOS.
    """
    name = os.fspath(path)
    if apple is None:
        apple = sys.platform == "darwin"
    if apple:
        if not name.endswith((".so", ".dylib")):
            name += ".dylib"
    elif not name.endswith(".so"):
        name += ".so"
    return name