"""Extension to comment-prefix lookup"""

import os
from typing import Dict, Optional


def extension_of(name: str) -> str:
    """Return the extension of a file name including the leading dot

    Dotfiles without a further dot (``.gitignore``, ``.env``) are their own
    extension.
    """
    extension = os.path.splitext(name)[1]
    if not extension and name.startswith(".") and len(name) > 1:
        return name
    return extension


class CommentSyntaxTable:
    """Case-sensitive mapping of file extension to single-line comment token"""

    def __init__(self, prefixes: Dict[str, str]):
        self._prefixes = dict(prefixes)

    def lookup(self, extension: str) -> Optional[str]:
        """Get the comment prefix for an extension, None if unsupported"""
        return self._prefixes.get(extension)

    def prefix_for(self, path: str) -> Optional[str]:
        """Get the comment prefix for a file path, None if unsupported"""
        return self.lookup(extension_of(os.path.basename(path)))
