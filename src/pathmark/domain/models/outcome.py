"""Outcome models - per-file results of an annotation run"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Action(str, Enum):
    """What the annotator did with a file"""

    SKIPPED = "skipped"  # Unsupported extension, never opened
    UNCHANGED = "unchanged"  # Annotation already correct, no write
    INSERTED = "inserted"
    UPDATED = "updated"
    FAILED = "failed"


_PROGRESS_TAGS = {Action.INSERTED: "INSERT", Action.UPDATED: "UPDATE"}


@dataclass
class FileOutcome:
    """Result of processing a single file"""

    path: str  # Native full path
    relative_path: Optional[str] = None  # Forward-slash path from the root
    action: Action = Action.SKIPPED
    reason: Optional[str] = None  # Skip reason or error message

    @property
    def changed(self) -> bool:
        """Check if the file content was (or, in a dry run, would be) rewritten"""
        return self.action in (Action.INSERTED, Action.UPDATED)

    @property
    def label(self) -> str:
        """Progress label such as ``[INSERT] cmd/main.go``"""
        tag = _PROGRESS_TAGS.get(self.action, self.action.value)
        return f"[{tag}] {self.relative_path or self.path}"


@dataclass
class AnnotationReport:
    """Outcomes of one annotator pass over a tree"""

    root: str
    outcomes: List[FileOutcome] = field(default_factory=list)
    dry_run: bool = False

    def by_action(self, action: Action) -> List[FileOutcome]:
        """Get outcomes with the given action"""
        return [o for o in self.outcomes if o.action == action]

    @property
    def failures(self) -> List[FileOutcome]:
        return self.by_action(Action.FAILED)

    @property
    def changed(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.changed]

    @property
    def stats(self) -> Dict[str, int]:
        """Count outcomes per action"""
        counts = {action.value: 0 for action in Action}
        for outcome in self.outcomes:
            counts[outcome.action.value] += 1
        counts["total"] = len(self.outcomes)
        return counts
