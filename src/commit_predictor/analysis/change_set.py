"""
Data models for a staged change set.

A :class:`ChangeSet` is built once per prediction from the list of
changed files. It records status counters, the categories and languages
touched, the framework scopes observed and, when diff text is
available, the edit context of each file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Set


class FileStatus(str, Enum):
    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"

    @classmethod
    def from_code(cls, code: str) -> "FileStatus":
        """Map a git name-status code to a status.

        Unknown codes (renames, copies, type changes) count as modified.
        """
        letter = code[:1].upper()
        if letter == "A":
            return cls.ADDED
        if letter == "D":
            return cls.DELETED
        return cls.MODIFIED


@dataclass(frozen=True)
class ChangedFile:
    """A single changed path and its status."""

    path: str
    status: FileStatus


@dataclass
class ScopeStats:
    """How often a framework scope was touched and with which statuses."""

    count: int = 0
    statuses: Set[FileStatus] = field(default_factory=set)


@dataclass
class ChangeSet:
    """Aggregated view of all changed files.

    Attributes
    ----------
    files : List[ChangedFile]
        Changed files in listing order.
    added, modified, deleted : int
        Status counters.
    categories : Set[str]
        File categories touched (``test``, ``config``, ``docs``, ...).
    languages : Set[str]
        Languages touched.
    specific_scopes : Dict[str, ScopeStats]
        Framework scope name to statistics, in first-seen order.
    change_context : Dict[str, str]
        File path to edit context (``fix``, ``feat``, ``refactor``,
        ``chore`` or ``modify``).
    """

    files: List[ChangedFile] = field(default_factory=list)
    added: int = 0
    modified: int = 0
    deleted: int = 0
    categories: Set[str] = field(default_factory=set)
    languages: Set[str] = field(default_factory=set)
    specific_scopes: Dict[str, ScopeStats] = field(default_factory=dict)
    change_context: Dict[str, str] = field(default_factory=dict)

    @property
    def paths(self) -> List[str]:
        return [changed.path for changed in self.files]

    def record_status(self, status: FileStatus) -> None:
        if status is FileStatus.ADDED:
            self.added += 1
        elif status is FileStatus.DELETED:
            self.deleted += 1
        else:
            self.modified += 1

    def record_scope(self, scope: str, status: FileStatus) -> None:
        stats = self.specific_scopes.setdefault(scope, ScopeStats())
        stats.count += 1
        stats.statuses.add(status)
