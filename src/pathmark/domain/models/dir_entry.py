"""DirEntry model - one child produced by a directory listing"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DirEntry:
    """Represents a single directory child"""

    name: str  # Bare entry name, never a path
    is_directory: bool
    full_path: str  # Native path as produced by the listing
    is_file: bool = False  # Regular file (symlinks and special files are neither)
