"""
Phrase templates for commit descriptions.

Templates are nested lookup tables. Framework tables are keyed by
framework, scope, commit type and edit context; the generic table is
keyed by commit type and edit context only. Every leaf holds one or
more phrase variants with a ``{scope}`` placeholder, and the variant is
picked by an injectable chooser so callers can make selection
deterministic.
"""

from __future__ import annotations

import random
import re
from typing import Dict, Optional, Protocol, Sequence, Tuple


Variants = Tuple[str, ...]


class Chooser(Protocol):
    def choice(self, seq: Sequence[str]) -> str:
        ...


GENERIC_TEMPLATES: Dict[str, Dict[str, Variants]] = {
    "feat": {
        "add": (
            "add {scope} functionality",
            "implement {scope} feature",
            "create {scope}",
            "introduce {scope} capability",
        ),
        "modify": (
            "enhance {scope} functionality",
            "improve {scope} feature",
            "extend {scope} capabilities",
        ),
    },
    "fix": {
        "add": ("add {scope} error handling", "implement {scope} fix"),
        "modify": (
            "resolve {scope} issue",
            "fix {scope} bug",
            "correct {scope} behavior",
            "patch {scope} problem",
        ),
        "delete": ("remove {scope} bug", "eliminate {scope} issue"),
    },
    "refactor": {
        "add": ("add {scope} improvements", "implement {scope} optimizations"),
        "modify": (
            "restructure {scope} code",
            "optimize {scope} implementation",
            "improve {scope} architecture",
            "reorganize {scope} structure",
        ),
        "delete": ("clean up {scope} code", "remove {scope} redundancies"),
    },
    "test": {
        "add": ("add {scope} test coverage", "implement {scope} tests"),
        "modify": ("update {scope} test cases", "improve {scope} test coverage"),
    },
    "docs": {
        "add": ("add {scope} documentation", "create {scope} docs"),
        "modify": ("update {scope} documentation", "improve {scope} docs"),
    },
    "style": {
        "modify": ("update {scope} styles", "improve {scope} appearance", "adjust {scope} styling"),
    },
    "chore": {
        "add": ("add {scope} configuration", "set up {scope} settings"),
        "modify": ("update {scope} configuration", "modify {scope} setup", "adjust {scope} settings"),
        "delete": ("remove {scope} configuration", "clean up {scope} settings"),
    },
}

FRAMEWORK_TEMPLATES: Dict[str, Dict[str, Dict[str, Dict[str, Variants]]]] = {
    "laravel": {
        "migrations": {
            "feat": {
                "add": ("create {scope} table", "add {scope} table structure"),
                "modify": ("update {scope} table structure", "modify {scope} migration"),
            },
            "refactor": {
                "modify": ("refactor {scope} table structure", "optimize {scope} migration"),
            },
        },
        "seeds": {
            "feat": {
                "add": ("add {scope} seed data", "populate {scope} data"),
                "modify": ("update {scope} seed data", "modify {scope} seeder"),
            },
            "chore": {
                "modify": ("update {scope} seed records", "adjust {scope} data"),
            },
        },
        "factories": {
            "feat": {
                "add": ("create {scope} factory", "add {scope} model factory"),
                "modify": ("update {scope} factory", "modify {scope} model factory"),
            },
        },
        "services": {
            "feat": {"add": ("implement {scope} service", "add {scope} business logic")},
            "fix": {"modify": ("fix {scope} service logic", "resolve {scope} service issue")},
            "refactor": {"modify": ("refactor {scope} service", "optimize {scope} service logic")},
        },
        "requests": {
            "feat": {"add": ("add {scope} validation rules", "create {scope} form request")},
            "fix": {"modify": ("fix {scope} validation rules", "correct {scope} request validation")},
        },
        "controllers": {
            "feat": {"add": ("implement {scope} controller", "add {scope} endpoints")},
            "fix": {"modify": ("fix {scope} controller logic", "resolve {scope} controller issue")},
            "refactor": {"modify": ("refactor {scope} controller", "optimize {scope} controller methods")},
        },
        "models": {
            "feat": {"add": ("create {scope} model", "add {scope} entity")},
            "fix": {"modify": ("fix {scope} model relationships", "correct {scope} model attributes")},
            "refactor": {"modify": ("refactor {scope} model", "optimize {scope} model queries")},
        },
        "events": {
            "feat": {"add": ("add {scope} event", "create {scope} event class")},
        },
        "listeners": {
            "feat": {"add": ("add {scope} event listener", "create {scope} listener")},
        },
        "tests": {
            "test": {"add": ("add {scope} test coverage", "create {scope} tests")},
            "fix": {"modify": ("fix {scope} test cases", "correct {scope} test assertions")},
        },
    },
    "react": {
        "components": {
            "feat": {
                "add": ("create {scope} component", "add {scope} UI component"),
                "modify": ("update {scope} component", "enhance {scope} component functionality"),
            },
            "fix": {"modify": ("fix {scope} component rendering", "resolve {scope} component issue")},
            "refactor": {"modify": ("refactor {scope} component", "optimize {scope} component performance")},
        },
        "hooks": {
            "feat": {"add": ("create {scope} custom hook", "add {scope} hook functionality")},
            "refactor": {"modify": ("refactor {scope} hook logic", "optimize {scope} hook implementation")},
        },
        "store": {
            "feat": {"add": ("implement {scope} store", "add {scope} state management")},
            "refactor": {"modify": ("refactor {scope} store structure", "optimize {scope} state management")},
        },
    },
    "django": {
        "models": {
            "feat": {
                "add": ("create {scope} model", "add {scope} database model"),
                "modify": ("update {scope} model fields", "modify {scope} model structure"),
            },
        },
        "views": {
            "feat": {
                "add": ("implement {scope} view", "add {scope} view logic"),
                "modify": ("update {scope} view functionality", "modify {scope} view logic"),
            },
        },
        "migrations": {
            "feat": {
                "add": ("create {scope} migration", "add {scope} database migration"),
                "modify": ("update {scope} migration", "modify {scope} migration file"),
            },
        },
    },
}

DEFAULT_SCOPE = "component"

_SCOPE_NOISE = re.compile(r"migrations|seeds|factories|services|controllers|models|tests?")


def clean_scope(scope: str) -> str:
    """Strip generic category words from a scope name.

    Framework phrases already name the category ("create X model"), so
    ``models`` becomes the placeholder ``component``.
    """
    return _SCOPE_NOISE.sub("", scope).strip() or DEFAULT_SCOPE


class TemplateLibrary:
    """Look up and render description phrases.

    Parameters
    ----------
    chooser : Chooser, optional
        Object with a ``choice`` method used to pick among variants.
        Defaults to a fresh :class:`random.Random`.
    """

    def __init__(self, chooser: Optional[Chooser] = None) -> None:
        self.chooser = chooser if chooser is not None else random.Random()

    def framework_variants(
        self, framework: Optional[str], scope: str, commit_type: str, context: str
    ) -> Optional[Variants]:
        if not framework:
            return None
        return (
            FRAMEWORK_TEMPLATES.get(framework, {})
            .get(scope, {})
            .get(commit_type, {})
            .get(context)
        )

    @staticmethod
    def generic_variants(commit_type: str, context: str) -> Variants:
        by_context = GENERIC_TEMPLATES.get(commit_type, GENERIC_TEMPLATES["feat"])
        return by_context.get(context) or by_context["modify"]

    def describe(self, framework: Optional[str], scope: Optional[str], commit_type: str, context: str) -> str:
        """Render a description for the given type, scope and edit context."""
        scope_name = scope or DEFAULT_SCOPE
        variants = self.framework_variants(framework, scope_name, commit_type, context)
        if variants:
            return self.chooser.choice(variants).format(scope=clean_scope(scope_name))
        return self.chooser.choice(self.generic_variants(commit_type, context)).format(scope=scope_name)
