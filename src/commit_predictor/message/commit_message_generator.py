"""
Conventional Commit message assembly and validation.

This module provides the :class:`CommitMessageGenerator` class, which
assembles ``type(scope): description`` headers, validates existing
messages against the same grammar, and wraps the
:class:`~commit_predictor.prediction.engine.PredictionEngine` to
produce a ready-to-use "smart" message with alternative suggestions.

All assembled messages follow the format:
  type(scope): description

  BREAKING CHANGE: <left for the author>   (only when flagged)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from commit_predictor.prediction.engine import PredictionEngine
from commit_predictor.prediction.models import Alternative, CommitType, Prediction


logger = logging.getLogger(__name__)
# Attach a null handler to prevent logging errors when no handlers are
# configured on the root logger. Logs will propagate when configured.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


DEFAULT_MAX_SUBJECT_LENGTH = 72
BREAKING_MARKER = "\n\nBREAKING CHANGE: "

_TYPE_ALTERNATION = "|".join(t.value for t in CommitType)
# Scopes may hold anything but parentheses and line breaks.
HEADER_PATTERN = re.compile(rf"^({_TYPE_ALTERNATION})(\([^()\r\n]+\))?: .+")

DEFAULT_DESCRIPTIONS = {
    CommitType.FEAT: "add {scope} functionality",
    CommitType.FIX: "resolve {scope} issue",
    CommitType.REFACTOR: "restructure {scope} code",
    CommitType.TEST: "add {scope} test coverage",
    CommitType.DOCS: "update {scope} documentation",
    CommitType.STYLE: "update {scope} styles",
    CommitType.CHORE: "update {scope} configuration",
}

COMMON_SCOPES = (
    "auth", "api", "ui", "database", "config", "deployment",
    "validation", "middleware", "router", "component", "style",
    "test", "docs", "build", "ci", "models", "controllers",
    "services", "utils", "hooks", "store", "views",
)


class CommitTypeError(Exception):
    """Raised when a commit type outside the Conventional Commit set is used."""

    pass


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class SmartCommit:
    """A predicted message together with the evidence behind it."""

    message: str
    prediction: Prediction
    alternatives: List[Alternative]


def coerce_commit_type(value: Union[str, CommitType]) -> CommitType:
    try:
        return CommitType(value)
    except ValueError:
        raise CommitTypeError(f"Invalid commit type: {value}") from None


def default_description(commit_type: Union[str, CommitType], scope: Optional[str] = None) -> str:
    """Return the fallback description for a type, defaulting to ``feat``'s."""
    template = DEFAULT_DESCRIPTIONS.get(coerce_commit_type(commit_type), DEFAULT_DESCRIPTIONS[CommitType.FEAT])
    return template.format(scope=scope or "component")


def assemble_message(
    commit_type: Union[str, CommitType],
    scope: Optional[str] = None,
    description: Optional[str] = None,
    is_breaking: bool = False,
) -> str:
    """Build a Conventional Commit message.

    Parameters
    ----------
    commit_type : str or CommitType
        One of the Conventional Commit types.
    scope : str, optional
        Scope placed in parentheses; blank scopes are omitted.
    description : str, optional
        Subject text; a blank description is replaced by the default
        description for the type.
    is_breaking : bool
        Append a ``BREAKING CHANGE:`` footer for the author to fill in.

    Raises
    ------
    CommitTypeError
        If ``commit_type`` is not a known type.
    """
    ctype = coerce_commit_type(commit_type)
    scope = (scope or "").strip()
    header = f"{ctype.value}({scope}): " if scope else f"{ctype.value}: "

    text = (description or "").strip()
    message = header + (text or default_description(ctype, scope or None))
    if is_breaking:
        message += BREAKING_MARKER
    return message


def validate_message(message: str, max_subject_length: int = DEFAULT_MAX_SUBJECT_LENGTH) -> ValidationResult:
    """Check a message against the header grammar and subject length."""
    errors: List[str] = []
    if not HEADER_PATTERN.match(message):
        errors.append("Message does not follow conventional commit format")
    first_line = message.split("\n")[0]
    if len(first_line) > max_subject_length:
        errors.append(f"First line should be {max_subject_length} characters or less")
    if not message.strip():
        errors.append("Commit message cannot be empty")
    return ValidationResult(is_valid=not errors, errors=errors)


def alternative_suggestions(prediction: Prediction) -> List[Alternative]:
    scope = prediction.scope or "component"
    alternatives: List[Alternative] = []
    if prediction.type is CommitType.FEAT:
        alternatives.append(
            Alternative(
                type=CommitType.FIX,
                description=f"resolve {scope} issue",
                reason="If this fixes a bug rather than adds features",
            )
        )
    if prediction.type is CommitType.REFACTOR:
        alternatives.append(
            Alternative(
                type=CommitType.PERF,
                description=f"optimize {scope} performance",
                reason="If this improves performance",
            )
        )
    return alternatives


class CommitMessageGenerator:
    """Generate commit messages manually or from predicted changes."""

    def __init__(
        self,
        engine: Optional[PredictionEngine] = None,
        max_subject_length: int = DEFAULT_MAX_SUBJECT_LENGTH,
    ) -> None:
        self.engine = engine if engine is not None else PredictionEngine()
        self.max_subject_length = max_subject_length

    def generate_commit_message(
        self,
        commit_type: Union[str, CommitType],
        scope: Optional[str] = None,
        description: Optional[str] = None,
        is_breaking: bool = False,
    ) -> str:
        return assemble_message(commit_type, scope, description, is_breaking)

    def generate_smart_commit(self) -> Optional[SmartCommit]:
        """Predict a message from the current changes.

        Returns ``None`` when there is nothing to predict from; callers
        should then fall back to manual entry.
        """
        prediction = self.engine.analyze_changes()
        if prediction is None:
            logger.info("No changes found to predict from")
            return None
        message = assemble_message(prediction.type, prediction.scope, prediction.description)
        return SmartCommit(message=message, prediction=prediction, alternatives=alternative_suggestions(prediction))

    def validate_commit_message(self, message: str) -> ValidationResult:
        return validate_message(message, self.max_subject_length)

    @staticmethod
    def commit_types() -> List[Tuple[str, str]]:
        """Return ``(value, label)`` pairs for interactive type selection."""
        return [(t.value, f"{t.value:<10} - {t.description}") for t in CommitType]

    @staticmethod
    def suggest_scopes(text: Optional[str] = None, limit: int = 5) -> List[str]:
        if not text:
            return list(COMMON_SCOPES[:limit])
        needle = text.lower()
        return [scope for scope in COMMON_SCOPES if needle in scope.lower()][:limit]
