"""
Framework detection for changed paths.

A framework is identified either from well-known manifest files in the
working directory (``composer.json``, ``package.json`` and friends) or
by voting over the framework path patterns of the changed files. A
confirmed manifest always wins over the path vote.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Optional, Tuple

from commit_predictor.detection.tables import FRAMEWORK_MANIFESTS, FRAMEWORKS


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


_UNSET = object()


class FrameworkDetector:
    """Classify paths against the framework tables.

    Parameters
    ----------
    cwd : Path, optional
        Directory that holds the project manifests. Defaults to the
        current working directory at construction time.
    """

    def __init__(self, cwd: Optional[Path] = None) -> None:
        self.cwd = cwd if cwd is not None else Path.cwd()
        self._manifest_framework = _UNSET

    # ------------------------------------------------------------------
    # Path based classification
    # ------------------------------------------------------------------
    @staticmethod
    def classify_framework(file_path: str) -> Optional[str]:
        """Return the first framework with a category pattern matching the path."""
        for name, config in FRAMEWORKS.items():
            if any(pattern.search(file_path) for pattern in config.patterns.values()):
                return name
        return None

    @staticmethod
    def scopes_for(framework: Optional[str]) -> Tuple[str, ...]:
        config = FRAMEWORKS.get(framework) if framework else None
        return config.scopes if config else ()

    @staticmethod
    def scope_for_path(file_path: str, framework: Optional[str]) -> Optional[str]:
        """Return the first category of ``framework`` whose pattern matches."""
        config = FRAMEWORKS.get(framework) if framework else None
        if config is None:
            return None
        for category, pattern in config.patterns.items():
            if pattern.search(file_path):
                return category
        return None

    # ------------------------------------------------------------------
    # Manifest based classification
    # ------------------------------------------------------------------
    def detect_from_manifests(self) -> Optional[str]:
        """Identify the framework from manifest files in :attr:`cwd`.

        The result is computed once per detector and reused for every
        path classified during the same invocation.
        """
        if self._manifest_framework is _UNSET:
            self._manifest_framework = self._scan_manifests()
        return self._manifest_framework  # type: ignore[return-value]

    def _scan_manifests(self) -> Optional[str]:
        for framework, (filenames, markers) in FRAMEWORK_MANIFESTS.items():
            for filename in filenames:
                manifest = self.cwd / filename
                if not manifest.is_file():
                    continue
                try:
                    content = manifest.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as exc:
                    logger.debug("Could not read manifest %s: %s", manifest, exc)
                    continue
                if any(marker in content for marker in markers):
                    logger.debug("Detected framework %s from %s", framework, manifest)
                    return framework
        return None

    def primary_framework(self, file_paths: Iterable[str]) -> Optional[str]:
        """Return the framework for a set of paths.

        Manifest detection takes precedence. Otherwise the framework with
        the most matching paths wins; ties go to the framework declared
        first in the framework table.
        """
        manifest_framework = self.detect_from_manifests()
        if manifest_framework:
            return manifest_framework

        votes = Counter(fw for fw in map(self.classify_framework, file_paths) if fw)
        if not votes:
            return None
        best = max(votes.values())
        return next(fw for fw in FRAMEWORKS if votes.get(fw) == best)
