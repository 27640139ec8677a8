"""Rename extracted update archives to the directory the host expects.

Providers name their archives after the repository and the ref it was
built from (``widget-master``, ``acme-widget-1a2b3c4``), while the host
expects the package back under its original directory (``widget``).
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable

from ..exceptions import AmbiguousArchiveMatch, RenameFailed
from .feedback import FeedbackSink, RecordingFeedback
from .filesystem import Filesystem, LocalFilesystem

logger = logging.getLogger(__name__)

# Host actions that install a downloaded update.
UPDATE_ACTIONS = frozenset({
    "update-selected",
    "update-selected-themes",
    "upgrade-theme",
    "upgrade-plugin",
})

MSG_RENAMING = "Renaming {source} to {target}..."
MSG_RENAMED = "Rename successful..."
MSG_RENAME_FAILED = "Unable to rename downloaded repository."


class ReconcileResult(str, Enum):
    """Outcome of one reconciliation."""

    UNCHANGED = "unchanged"
    RENAMED = "renamed"
    RENAME_FAILED = "rename_failed"


class MatchPolicy(str, Enum):
    """How an archive directory name is matched to a known slug."""

    SUBSTRING = "substring"
    ARCHIVE_PREFIX = "archive_prefix"


@dataclass
class ReconcileOutcome:
    """Result of a reconciliation and the path the host should use next."""
    result: ReconcileResult
    path: Path
    slug: str | None = None
    error: RenameFailed | None = None

    @property
    def ok(self) -> bool:
        return self.result is not ReconcileResult.RENAME_FAILED


def substring_matches(dir_name: str, known_slugs: Iterable[str]) -> list[str]:
    """Slugs contained in ``dir_name``, case-insensitively, in iteration order."""
    lowered = dir_name.lower()
    return [slug for slug in known_slugs if slug and slug.lower() in lowered]


def archive_prefix(dir_name: str) -> str:
    """Strip the trailing ``-<branch-or-hash>`` from an archive directory name."""
    prefix, sep, _ = dir_name.rpartition("-")
    return prefix if sep else dir_name


def _same_path(a: Path, b: Path) -> bool:
    return os.path.normcase(os.path.abspath(a)) == os.path.normcase(os.path.abspath(b))


class ArchiveReconciler:
    """Matches an extracted archive to a known slug and renames it."""

    def __init__(
        self,
        filesystem: Filesystem | None = None,
        feedback: FeedbackSink | None = None,
        policy: MatchPolicy = MatchPolicy.SUBSTRING,
    ):
        self.filesystem = filesystem or LocalFilesystem()
        self.feedback = feedback or RecordingFeedback()
        self.policy = MatchPolicy(policy)

    def match(self, dir_name: str, known_slugs: Iterable[str]) -> str | None:
        """Return the slug an archive directory belongs to, if any.

        With ``SUBSTRING`` every slug contained in the name is a match and
        the last one in iteration order wins. ``ARCHIVE_PREFIX`` first
        compares the name minus its last hyphenated segment against each
        slug, and falls back to substring matching when nothing matches.
        """
        slugs = list(known_slugs)

        if self.policy is MatchPolicy.ARCHIVE_PREFIX:
            prefix = archive_prefix(dir_name).lower()
            exact = [slug for slug in slugs if slug.lower() == prefix]
            if exact:
                return exact[-1]

        matches = substring_matches(dir_name, slugs)
        if not matches:
            return None
        if len(matches) > 1:
            logger.warning(
                "%s; using %r", AmbiguousArchiveMatch(dir_name, matches), matches[-1]
            )
        return matches[-1]

    def reconcile(
        self,
        extracted_dir: Path | str,
        known_slugs: Iterable[str],
        expected_parent_dir: Path | str,
    ) -> ReconcileOutcome:
        """Rename ``extracted_dir`` to ``expected_parent_dir/<slug>``."""
        source = Path(extracted_dir)
        slug = self.match(source.name, known_slugs)

        if slug is None:
            logger.debug("No known repository matches %s", source.name)
            return ReconcileOutcome(ReconcileResult.UNCHANGED, source)

        target = Path(expected_parent_dir) / slug
        if _same_path(source, target):
            return ReconcileOutcome(ReconcileResult.UNCHANGED, source, slug=slug)

        self.feedback.feedback(MSG_RENAMING.format(source=source.name, target=target.name))

        if self.filesystem.move(source, target, overwrite=True):
            self.feedback.feedback(MSG_RENAMED)
            logger.info("Renamed %s to %s", source, target)
            return ReconcileOutcome(ReconcileResult.RENAMED, target, slug=slug)

        self.feedback.feedback(MSG_RENAME_FAILED)
        error = RenameFailed(str(source), str(target))
        logger.error("%s", error)
        return ReconcileOutcome(
            ReconcileResult.RENAME_FAILED, source, slug=slug, error=error
        )

    def select_source(
        self,
        source: Path | str,
        remote_source: Path | str,
        action: str | None,
        known_slugs: Iterable[str],
    ) -> ReconcileOutcome:
        """Reconcile only during a recognized update action.

        Any other action passes ``source`` through without looking at it.
        """
        if action not in UPDATE_ACTIONS:
            return ReconcileOutcome(ReconcileResult.UNCHANGED, Path(source))
        return self.reconcile(source, known_slugs, remote_source)
