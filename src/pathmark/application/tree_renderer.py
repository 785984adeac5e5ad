"""Service for rendering a directory as a box-drawing text tree"""

import logging
from typing import List, Optional, Tuple

from pathmark.domain.config.tree import TreeConfig
from pathmark.domain.models.dir_entry import DirEntry
from pathmark.infrastructure.ignore_matcher import IgnoreMatcher
from pathmark.infrastructure.tree_walker import list_entries

logger = logging.getLogger(__name__)

TEE = "├── "
LAST = "└── "
PIPE = "│   "
BLANK = "    "


def directories_first(entry: DirEntry) -> Tuple[bool, str]:
    """Sort key: directories before files, then by name"""
    return (not entry.is_directory, entry.name)


class TreeRenderer:
    """Renders filtered, sorted directory listings as indented text"""

    def __init__(self, config: Optional[TreeConfig] = None, show_remarks: bool = True):
        """Initialize tree renderer

        Args:
            config: Renderer tables (defaults if None)
            show_remarks: Whether to append inline remarks for well-known names
        """
        self.config = config or TreeConfig()
        self.show_remarks = show_remarks
        self.matcher = IgnoreMatcher(self.config.ignore_patterns, self.config.whitelist)

    def _children(self, directory: str) -> List[DirEntry]:
        return list_entries(directory, self.matcher, sort_key=directories_first)

    def _line(self, prefix: str, entry: DirEntry, is_last: bool) -> str:
        line = f"{prefix}{LAST if is_last else TEE}{entry.name}"
        if self.show_remarks:
            line += self.config.remarks.get(entry.name, "")
        return line + "\n"

    def render(self, directory: str, prefix: str = "") -> str:
        """Render the subtree below ``directory``

        Unreadable directories render as empty.

        Args:
            directory: Directory to render (its own name is not printed)
            prefix: Text placed before every line of this level

        Returns:
            One line per visible entry, each terminated by a newline
        """
        output = []
        stack = self._push(prefix, self._children(directory), [])
        while stack:
            entry, entry_prefix, is_last = stack.pop()
            output.append(self._line(entry_prefix, entry, is_last))
            if entry.is_directory:
                child_prefix = entry_prefix + (BLANK if is_last else PIPE)
                self._push(child_prefix, self._children(entry.full_path), stack)
        return "".join(output)

    @staticmethod
    def _push(
        prefix: str, children: List[DirEntry], stack: List[Tuple[DirEntry, str, bool]]
    ) -> List[Tuple[DirEntry, str, bool]]:
        """Push children so the first one is popped first"""
        for index in range(len(children) - 1, -1, -1):
            stack.append((children[index], prefix, index == len(children) - 1))
        return stack

    def render_tree(self, directory: str) -> str:
        """Render the root label followed by the whole tree"""
        logger.debug(f"Rendering tree for {directory}")
        return f"{self.config.root_label}\n{self.render(directory)}"
