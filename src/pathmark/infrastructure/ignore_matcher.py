"""Name-based ignore rules"""

import logging
import re
from typing import Iterable, List, Optional

from pathmark.domain.models.dir_entry import DirEntry

logger = logging.getLogger(__name__)


class IgnoreMatcher:
    """Exclude entries whose bare name matches any ignore pattern"""

    def __init__(
        self,
        patterns: Optional[Iterable[str]] = None,
        whitelist: Optional[Iterable[str]] = None,
    ):
        """Initialize ignore matcher

        Args:
            patterns: Regular expressions searched in the entry name
            whitelist: Exact names that are never ignored
        """
        self.patterns = [re.compile(p) for p in (patterns or [])]
        self.whitelist = frozenset(whitelist or [])

    def match_reason(self, name: str) -> str:
        """Explain why a name is ignored

        Args:
            name: Bare file or directory name (not a path)

        Returns:
            Matching pattern description, or empty string if not ignored
        """
        if name in self.whitelist:
            return ""
        for pattern in self.patterns:
            if pattern.search(name):
                return f"matches pattern: {pattern.pattern}"
        return ""

    def should_ignore(self, name: str) -> bool:
        """Check if an entry name is excluded"""
        return bool(self.match_reason(name))

    def filter_entries(self, entries: Iterable[DirEntry]) -> List[DirEntry]:
        """Drop ignored entries, keeping the input order

        Args:
            entries: Directory children

        Returns:
            Entries that are not ignored
        """
        kept = []
        for entry in entries:
            reason = self.match_reason(entry.name)
            if reason:
                logger.debug(f"Ignoring {entry.full_path}: {reason}")
            else:
                kept.append(entry)
        return kept
