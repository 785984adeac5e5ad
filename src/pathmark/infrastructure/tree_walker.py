"""Depth-first directory traversal with name filtering"""

import logging
import os
from typing import Callable, Iterator, List, Optional

from pathmark.domain.models.dir_entry import DirEntry
from pathmark.infrastructure.ignore_matcher import IgnoreMatcher

logger = logging.getLogger(__name__)


def _sort_by_name(entry: DirEntry) -> str:
    return entry.name


def list_entries(
    directory: str,
    matcher: Optional[IgnoreMatcher] = None,
    sort_key: Optional[Callable[[DirEntry], object]] = _sort_by_name,
) -> List[DirEntry]:
    """List the visible children of a directory

    Symbolic links are reported as neither directory nor file so they are
    never followed.

    Args:
        directory: Directory to list
        matcher: Ignore rules applied to child names (None = keep everything)
        sort_key: Ordering of the result (None = filesystem order)

    Returns:
        Filtered children; empty if the directory cannot be read
    """
    try:
        with os.scandir(directory) as it:
            entries = [
                DirEntry(
                    name=child.name,
                    is_directory=child.is_dir(follow_symlinks=False),
                    full_path=os.path.join(directory, child.name),
                    is_file=child.is_file(follow_symlinks=False),
                )
                for child in it
            ]
    except OSError as e:
        logger.debug(f"Cannot read directory {directory}: {e}")
        return []

    if sort_key is not None:
        entries.sort(key=sort_key)
    if matcher is not None:
        entries = matcher.filter_entries(entries)
    return entries


def iter_entries(directory: str, matcher: Optional[IgnoreMatcher] = None) -> Iterator[DirEntry]:
    """Yield every non-ignored entry below ``directory`` in pre-order

    Directories are yielded before their children. Traversal uses an explicit
    stack, so tree depth is not limited by the interpreter recursion limit.
    Ignored directories are not descended into.

    Args:
        directory: Root of the traversal (not itself yielded)
        matcher: Ignore rules applied at every level
    """
    stack = list(reversed(list_entries(directory, matcher)))
    while stack:
        entry = stack.pop()
        yield entry
        if entry.is_directory:
            stack.extend(reversed(list_entries(entry.full_path, matcher)))


def walk(
    directory: str,
    visit: Callable[[DirEntry], None],
    matcher: Optional[IgnoreMatcher] = None,
) -> None:
    """Invoke ``visit`` once per entry yielded by :func:`iter_entries`"""
    for entry in iter_entries(directory, matcher):
        visit(entry)


def iter_files(directory: str, matcher: Optional[IgnoreMatcher] = None) -> Iterator[DirEntry]:
    """Yield regular files below ``directory`` in traversal order"""
    return (entry for entry in iter_entries(directory, matcher) if entry.is_file)
