"""Service for annotating source files with their relative path"""

import logging
from typing import Callable, Optional, Tuple

from pathmark.domain.config.annotate import AnnotateConfig
from pathmark.domain.models.outcome import Action, AnnotationReport, FileOutcome
from pathmark.infrastructure.comment_syntax import CommentSyntaxTable
from pathmark.infrastructure.ignore_matcher import IgnoreMatcher
from pathmark.infrastructure.paths import relative_path
from pathmark.infrastructure.tree_walker import iter_files

logger = logging.getLogger(__name__)


def annotation_line(prefix: str, rel_path: str, marker: str = "File:") -> str:
    """Build the expected first line, e.g. ``// File: controllers/poi.go``"""
    return f"{prefix} {marker} {rel_path}"


def plan_annotation(
    content: str, prefix: str, rel_path: str, marker: str = "File:"
) -> Tuple[Action, str]:
    """Decide how a file's content must change

    A first line that starts with ``prefix`` and contains ``marker`` counts as
    an existing annotation, even if it is ordinary commentary. A trailing
    ``\\r`` on the first line is kept and ignored for the comparison.

    Args:
        content: Current file content, newlines untranslated
        prefix: Comment prefix for the file type
        rel_path: Forward-slash path relative to the scan root
        marker: Annotation marker token

    Returns:
        Tuple of (action, new_content); new_content equals content for UNCHANGED
    """
    expected = annotation_line(prefix, rel_path, marker)
    first, newline, rest = content.partition("\n")
    carriage = "\r" if first.endswith("\r") else ""
    if carriage:
        first = first[:-1]

    has_annotation = bool(first) and first.startswith(prefix) and marker in first
    if not has_annotation:
        return Action.INSERTED, expected + "\n" + content
    if first == expected:
        return Action.UNCHANGED, content
    return Action.UPDATED, expected + carriage + newline + rest


class Annotator:
    """Inserts or refreshes the path annotation of every supported file"""

    def __init__(
        self,
        root: str,
        config: Optional[AnnotateConfig] = None,
        dry_run: bool = False,
        reporter: Optional[Callable[[FileOutcome], None]] = None,
    ):
        """Initialize annotator

        Args:
            root: Directory that annotations are relative to
            config: Annotator tables (defaults if None)
            dry_run: Compute outcomes without writing anything
            reporter: Called with each outcome as soon as it is known
        """
        self.root = root
        self.config = config or AnnotateConfig()
        self.dry_run = dry_run
        self.reporter = reporter
        self.syntax = CommentSyntaxTable(self.config.comment_prefixes)
        self.matcher = IgnoreMatcher(self.config.ignore_patterns, self.config.whitelist)

    def process_file(self, full_path: str) -> FileOutcome:
        """Annotate a single file

        Never raises: path, read and write failures are logged and returned as
        a FAILED outcome, and reporter errors are logged.

        Args:
            full_path: Native path of a file below the root

        Returns:
            Outcome for the file
        """
        outcome = self._process(full_path)
        if outcome.action == Action.FAILED:
            logger.error(f"Error processing {full_path}: {outcome.reason}")
        elif outcome.changed:
            logger.debug(outcome.label)
        if self.reporter:
            try:
                self.reporter(outcome)
            except Exception as e:
                logger.error(f"Error reporting outcome for {full_path}: {e}", exc_info=True)
        return outcome

    def _process(self, full_path: str) -> FileOutcome:
        prefix = self.syntax.prefix_for(full_path)
        if prefix is None:
            return FileOutcome(path=full_path, action=Action.SKIPPED, reason="unsupported file type")

        rel_path = None
        try:
            rel_path = relative_path(self.root, full_path)
            # newline="" keeps line endings exactly as stored
            with open(full_path, "r", encoding="utf-8", newline="") as f:
                content = f.read()

            action, new_content = plan_annotation(content, prefix, rel_path, self.config.marker)
            if action != Action.UNCHANGED and not self.dry_run:
                # Overwrites in place; not atomic
                with open(full_path, "w", encoding="utf-8", newline="") as f:
                    f.write(new_content)
        except (OSError, UnicodeError, ValueError) as e:
            return FileOutcome(path=full_path, relative_path=rel_path, action=Action.FAILED, reason=str(e))

        return FileOutcome(path=full_path, relative_path=rel_path, action=action)

    def annotate_tree(self) -> AnnotationReport:
        """Annotate every non-ignored file below the root

        Returns:
            Report with one outcome per visited file
        """
        logger.info(f"Annotating files under {self.root}" + (" (dry run)" if self.dry_run else ""))
        report = AnnotationReport(root=self.root, dry_run=self.dry_run)
        for entry in iter_files(self.root, self.matcher):
            report.outcomes.append(self.process_file(entry.full_path))

        logger.info(f"Annotation completed. Stats: {report.stats}")
        return report
