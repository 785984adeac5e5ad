"""Path normalization utilities"""

import os
from types import ModuleType
from typing import Optional


def normalize_path(path: str, sep: Optional[str] = None) -> str:
    """Convert a native path into its forward-slash form

    Args:
        path: Native path
        sep: Directory separator of the host that produced ``path``
            (defaults to ``os.sep``)

    Returns:
        Path with every separator replaced by ``/``
    """
    sep = sep or os.sep
    if sep == "/":
        return path
    return path.replace(sep, "/")


def relative_path(root: str, full_path: str, pathmod: ModuleType = os.path) -> str:
    """Compute the forward-slash path of ``full_path`` relative to ``root``

    Args:
        root: Root directory of the scan
        full_path: Path of a file inside ``root``
        pathmod: Path flavour module (``posixpath`` or ``ntpath``), host flavour by default

    Returns:
        Relative path using ``/`` regardless of the host convention
    """
    return normalize_path(pathmod.relpath(full_path, root), sep=pathmod.sep)
