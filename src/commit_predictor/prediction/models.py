"""
Data models for commit predictions.

The :class:`Prediction` represents the engine's best guess for a
Conventional Commit header, together with the evidence it was based on.
:class:`Alternative` holds a secondary suggestion shown next to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommitType(str, Enum):
    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"
    REVERT = "revert"

    @property
    def description(self) -> str:
        return _TYPE_DESCRIPTIONS[self]


_TYPE_DESCRIPTIONS = {
    CommitType.FEAT: "A new feature",
    CommitType.FIX: "A bug fix",
    CommitType.DOCS: "Documentation only changes",
    CommitType.STYLE: "Changes that do not affect the meaning of the code",
    CommitType.REFACTOR: "A code change that neither fixes a bug nor adds a feature",
    CommitType.PERF: "A code change that improves performance",
    CommitType.TEST: "Adding missing tests or correcting existing tests",
    CommitType.BUILD: "Changes that affect the build system or external dependencies",
    CommitType.CI: "Changes to CI configuration files and scripts",
    CommitType.CHORE: "Other changes that do not modify src or test files",
    CommitType.REVERT: "Reverts a previous commit",
}


@dataclass
class Prediction:
    """Representation of a predicted commit header.

    Attributes
    ----------
    type : CommitType
        The Conventional Commit type.
    scope : Optional[str]
        Framework scope or top-level directory, if one was found.
    description : str
        Short imperative description.
    confidence : float
        Additive evidence score between 0 and 0.95.
    language : Optional[str]
        Primary language of the changed files.
    framework : Optional[str]
        Framework identified from manifests or paths.
    """

    type: CommitType
    scope: Optional[str]
    description: str
    confidence: float
    language: Optional[str] = None
    framework: Optional[str] = None


@dataclass
class Alternative:
    """A secondary commit suggestion and why it might apply."""

    type: CommitType
    description: str
    reason: str
