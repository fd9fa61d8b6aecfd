"""
Commit prediction engine.

The :class:`PredictionEngine` reads the staged change set from Git (or,
failing that, recently modified files from the working tree), builds a
:class:`~commit_predictor.analysis.change_set.ChangeSet` and turns it
into a :class:`~commit_predictor.prediction.models.Prediction`:

1. classify every changed path (language, category, framework scope);
2. label each file's edit from its diff hunks;
3. pick a commit type through the framework and generic rule cascades;
4. pick a scope, render a description and score the evidence.

Each call works on fresh state; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from commit_predictor.analysis.aggregator import build_from_listing, build_from_paths
from commit_predictor.analysis.change_set import ChangeSet, FileStatus
from commit_predictor.analysis.diff_context import analyze_change_context
from commit_predictor.detection.framework_detector import FrameworkDetector
from commit_predictor.detection.language_detector import primary_language
from commit_predictor.prediction.models import CommitType, Prediction
from commit_predictor.prediction.rules import predict_commit_type
from commit_predictor.prediction.templates import TemplateLibrary
from commit_predictor.vcs.filesystem import recent_files
from commit_predictor.vcs.git_client import GitClient, GitError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


MAX_CONFIDENCE = 0.95


def _most_common(counts: Dict[str, int]) -> Optional[str]:
    """Return the key with the highest count; ties go to the first key seen."""
    if not counts:
        return None
    return max(counts, key=lambda key: counts[key])


class PredictionEngine:
    """Predict a commit type, scope and description for the current changes.

    Parameters
    ----------
    cwd : Path, optional
        Working directory holding the project manifests. Defaults to the
        current working directory.
    git_client : GitClient, optional
        Client used to read staged changes. When omitted, one is created
        for the repository containing ``cwd``, if any.
    templates : TemplateLibrary, optional
        Description templates; pass one with a seeded chooser for
        reproducible descriptions.
    recent_window_minutes, max_recent_files : int
        Limits for the file-system fallback.
    """

    def __init__(
        self,
        cwd: Optional[Path] = None,
        git_client: Optional[GitClient] = None,
        templates: Optional[TemplateLibrary] = None,
        recent_window_minutes: int = 30,
        max_recent_files: int = 10,
    ) -> None:
        self.cwd = cwd if cwd is not None else Path.cwd()
        if git_client is None:
            repo_root = GitClient.find_repo_root(self.cwd)
            git_client = GitClient(repo_root) if repo_root else None
        self.git_client = git_client
        self.templates = templates if templates is not None else TemplateLibrary()
        self.recent_window_minutes = recent_window_minutes
        self.max_recent_files = max_recent_files

    # ------------------------------------------------------------------
    # Change acquisition
    # ------------------------------------------------------------------
    def analyze_changes(self) -> Optional[Prediction]:
        """Predict from staged changes, falling back to recent files.

        Returns ``None`` when neither source yields any file.
        """
        if self.git_client is not None:
            try:
                listing = self.git_client.get_staged_name_status()
                diff_text = self.git_client.get_staged_diff()
            except GitError as exc:
                logger.debug("Staged diff unavailable, using file system: %s", exc)
            else:
                prediction = self.analyze_git_diff(listing, diff_text)
                if prediction is not None:
                    return prediction
                logger.debug("No staged changes, using file system")
        return self.analyze_file_system()

    def analyze_git_diff(self, listing: str, diff_text: str = "") -> Optional[Prediction]:
        """Predict from a name-status listing and its unified diff."""
        detector = FrameworkDetector(self.cwd)
        change_set = build_from_listing(listing, detector)
        if not change_set.files:
            return None
        if diff_text:
            analyze_change_context(change_set, diff_text)
        return self.predict_from_changes(change_set, detector)

    def analyze_file_system(self) -> Optional[Prediction]:
        """Predict from recently modified files, all treated as modified."""
        paths = self._recent_paths()
        if not paths:
            logger.debug("No recently modified files found")
            return None
        detector = FrameworkDetector(self.cwd)
        return self.predict_from_changes(build_from_paths(paths, detector), detector)

    def _recent_paths(self) -> List[str]:
        if self.git_client is not None:
            try:
                tracked = self.git_client.list_modified_files()
            except GitError as exc:
                logger.debug("git ls-files failed: %s", exc)
            else:
                if tracked:
                    return tracked[: self.max_recent_files]
        return recent_files(self.cwd, self.recent_window_minutes, self.max_recent_files)

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------
    def predict_from_changes(self, changes: ChangeSet, detector: FrameworkDetector) -> Prediction:
        paths = changes.paths
        language = primary_language(paths)
        framework = detector.primary_framework(paths)
        logger.debug("Primary language: %s, framework: %s", language, framework)

        commit_type = predict_commit_type(changes, framework)
        scope = self.predict_scope(changes, framework)
        description = self.generate_description(commit_type, scope, changes, framework)
        confidence = self.calculate_confidence(changes, scope, framework)

        return Prediction(
            type=commit_type,
            scope=scope,
            description=description,
            confidence=confidence,
            language=language,
            framework=framework,
        )

    def predict_scope(self, changes: ChangeSet, framework: Optional[str]) -> Optional[str]:
        if changes.specific_scopes:
            return _most_common({name: stats.count for name, stats in changes.specific_scopes.items()})

        if framework:
            allowed = FrameworkDetector.scopes_for(framework)
            counts: Dict[str, int] = {}
            for path in changes.paths:
                scope = FrameworkDetector.scope_for_path(path, framework)
                if scope and scope in allowed:
                    counts[scope] = counts.get(scope, 0) + 1
            if counts:
                return _most_common(counts)

        return self.scope_from_file_structure(changes)

    @staticmethod
    def scope_from_file_structure(changes: ChangeSet) -> Optional[str]:
        """Return the most common top-level directory of the changed files."""
        counts: Dict[str, int] = {}
        for path in changes.paths:
            parts = path.split("/")
            if len(parts) > 1:
                counts[parts[0]] = counts.get(parts[0], 0) + 1
        return _most_common(counts)

    @staticmethod
    def change_context_for_scope(changes: ChangeSet, scope: Optional[str]) -> str:
        """Derive the template context from the statuses seen in ``scope``."""
        stats = changes.specific_scopes.get(scope) if scope else None
        if stats is None:
            return "modify"
        if FileStatus.ADDED in stats.statuses:
            return "add"
        if FileStatus.DELETED in stats.statuses:
            return "delete"
        if FileStatus.MODIFIED in stats.statuses and len(changes.files) <= 2:
            return "fix"
        return "modify"

    def generate_description(
        self,
        commit_type: CommitType,
        scope: Optional[str],
        changes: ChangeSet,
        framework: Optional[str],
    ) -> str:
        context = self.change_context_for_scope(changes, scope)
        return self.templates.describe(framework, scope, commit_type.value, context)

    @staticmethod
    def calculate_confidence(changes: ChangeSet, scope: Optional[str], framework: Optional[str]) -> float:
        """Additive evidence score, capped at :data:`MAX_CONFIDENCE`."""
        confidence = 0.5
        if framework:
            confidence += 0.2
        if changes.files:
            confidence += 0.1
        if scope:
            confidence += 0.1
        if changes.specific_scopes:
            confidence += 0.2
        if changes.added + changes.modified > 0:
            confidence += 0.1
        return round(min(confidence, MAX_CONFIDENCE), 2)
