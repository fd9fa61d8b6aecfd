"""
Build a :class:`ChangeSet` from a git name-status listing.

Each line of the listing has the form ``status<TAB>path``. Renames and
copies carry an extra path (``R100<TAB>old<TAB>new``); the new path is
used. Framework scopes are resolved per file, so a single change set
may record scopes from more than one framework.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from commit_predictor.analysis.change_set import ChangedFile, ChangeSet, FileStatus
from commit_predictor.detection.framework_detector import FrameworkDetector
from commit_predictor.detection.language_detector import classify_language, file_category


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


def parse_name_status(listing: str) -> List[ChangedFile]:
    """Parse ``git diff --name-status`` output into changed files.

    Blank lines and lines without a path are skipped.
    """
    files: List[ChangedFile] = []
    for line in listing.splitlines():
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) < 2 or not parts[-1].strip():
            logger.debug("Skipping malformed name-status line: %r", line)
            continue
        files.append(ChangedFile(path=parts[-1].strip(), status=FileStatus.from_code(parts[0].strip())))
    return files


def add_file(change_set: ChangeSet, changed: ChangedFile, detector: FrameworkDetector) -> None:
    """Fold one changed file into the aggregate."""
    change_set.files.append(changed)
    change_set.record_status(changed.status)
    change_set.categories.add(file_category(changed.path))

    language = classify_language(changed.path)
    if language:
        change_set.languages.add(language)

    framework = detector.primary_framework([changed.path])
    if framework:
        scope = detector.scope_for_path(changed.path, framework)
        if scope:
            change_set.record_scope(scope, changed.status)


def build_change_set(files: Iterable[ChangedFile], detector: FrameworkDetector) -> ChangeSet:
    change_set = ChangeSet()
    for changed in files:
        add_file(change_set, changed, detector)
    return change_set


def build_from_listing(listing: str, detector: FrameworkDetector) -> ChangeSet:
    return build_change_set(parse_name_status(listing), detector)


def build_from_paths(paths: Iterable[str], detector: FrameworkDetector) -> ChangeSet:
    """Build a change set for paths with no status information.

    Used by the file-system fallback; every path counts as modified.
    """
    return build_change_set((ChangedFile(path=p, status=FileStatus.MODIFIED) for p in paths), detector)
