"""
Commit type rule cascades.

Each cascade is an ordered tuple of ``(predicate, commit type)`` pairs
and the first predicate that holds decides the type. Framework cascades
attach such a tuple to individual framework scopes and are walked in the
framework's scope declaration order; the generic cascade looks at the
change set as a whole.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from commit_predictor.analysis.change_set import ChangeSet, FileStatus, ScopeStats
from commit_predictor.detection.tables import FRAMEWORKS
from commit_predictor.prediction.models import CommitType


ScopePredicate = Callable[[ScopeStats, ChangeSet], bool]
ScopeRule = Tuple[ScopePredicate, CommitType]
ChangePredicate = Callable[[ChangeSet], bool]
ChangeRule = Tuple[ChangePredicate, CommitType]


def _added(stats: ScopeStats, _changes: ChangeSet) -> bool:
    return FileStatus.ADDED in stats.statuses


def _modified(stats: ScopeStats, _changes: ChangeSet) -> bool:
    return FileStatus.MODIFIED in stats.statuses


def _few_files(_stats: ScopeStats, changes: ChangeSet) -> bool:
    return len(changes.files) <= 2


def _always(_stats: ScopeStats, _changes: ChangeSet) -> bool:
    return True


_CODE_RULES: Tuple[ScopeRule, ...] = (
    (_added, CommitType.FEAT),
    (_few_files, CommitType.FIX),
    (_always, CommitType.REFACTOR),
)
_GROWTH_RULES: Tuple[ScopeRule, ...] = (
    (_added, CommitType.FEAT),
    (_always, CommitType.REFACTOR),
)
_TEST_RULES: Tuple[ScopeRule, ...] = (
    (_added, CommitType.TEST),
    (_always, CommitType.FIX),
)
_VALIDATION_RULES: Tuple[ScopeRule, ...] = (
    (_added, CommitType.FEAT),
    (_always, CommitType.FIX),
)
_DATA_RULES: Tuple[ScopeRule, ...] = (
    (_added, CommitType.FEAT),
    (_modified, CommitType.CHORE),
)

FRAMEWORK_RULES: Dict[str, Dict[str, Tuple[ScopeRule, ...]]] = {
    "laravel": {
        "controllers": _CODE_RULES,
        "models": _CODE_RULES,
        "migrations": ((_added, CommitType.FEAT), (_modified, CommitType.REFACTOR)),
        "seeds": _DATA_RULES,
        "factories": _DATA_RULES,
        "requests": _VALIDATION_RULES,
        "services": _CODE_RULES,
        "repositories": _CODE_RULES,
        "events": _GROWTH_RULES,
        "listeners": _GROWTH_RULES,
        "rules": _VALIDATION_RULES,
        "tests": _TEST_RULES,
    },
    "react": {
        "components": _CODE_RULES,
        "hooks": _GROWTH_RULES,
        "store": _GROWTH_RULES,
        "styles": ((_always, CommitType.STYLE),),
    },
    "django": {
        "views": _CODE_RULES,
        "models": _CODE_RULES,
        "migrations": _GROWTH_RULES,
        "tests": _TEST_RULES,
    },
}


def _few_modified(changes: ChangeSet) -> bool:
    return changes.modified > 0 and len(changes.files) <= 3


def _has_fix_context(changes: ChangeSet) -> bool:
    return "fix" in changes.change_context.values()


GENERIC_RULES: Tuple[ChangeRule, ...] = (
    (lambda c: c.deleted > c.added + c.modified, CommitType.REFACTOR),
    (lambda c: c.added > c.modified * 2, CommitType.FEAT),
    (lambda c: _few_modified(c) and _has_fix_context(c), CommitType.FIX),
    (_few_modified, CommitType.REFACTOR),
    (lambda c: "test" in c.categories, CommitType.TEST),
    (lambda c: "docs" in c.categories, CommitType.DOCS),
    (lambda c: "style" in c.categories, CommitType.STYLE),
    (lambda c: "config" in c.categories, CommitType.CHORE),
    (lambda c: "migration" in c.categories and c.added > 0, CommitType.FEAT),
    (lambda c: "migration" in c.categories, CommitType.REFACTOR),
    (lambda c: "seed" in c.categories and c.added > 0, CommitType.FEAT),
    (lambda c: "seed" in c.categories, CommitType.CHORE),
)

DEFAULT_TYPE = CommitType.REFACTOR


def framework_commit_type(changes: ChangeSet, framework: Optional[str]) -> Optional[CommitType]:
    """Evaluate the framework cascade, or return ``None`` if nothing fires."""
    scope_rules = FRAMEWORK_RULES.get(framework or "")
    if not scope_rules:
        return None
    for scope in FRAMEWORKS[framework].scopes:
        stats = changes.specific_scopes.get(scope)
        if stats is None:
            continue
        for predicate, commit_type in scope_rules.get(scope, ()):
            if predicate(stats, changes):
                return commit_type
    return None


def generic_commit_type(changes: ChangeSet) -> CommitType:
    for predicate, commit_type in GENERIC_RULES:
        if predicate(changes):
            return commit_type
    return DEFAULT_TYPE


def predict_commit_type(changes: ChangeSet, framework: Optional[str]) -> CommitType:
    return framework_commit_type(changes, framework) or generic_commit_type(changes)
