"""
Heuristics for classifying the nature of a single file's edit.

The analyzer slices one file's hunks out of a zero-context unified diff
and labels the edit as ``fix``, ``feat``, ``refactor``, ``chore`` or
``modify``. It is intentionally simple and deterministic: a fixed list
of rules is evaluated in order and the first rule that fires decides
the result, so predictions are reproducible for the same diff.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from commit_predictor.analysis.change_set import ChangeSet


@dataclass(frozen=True)
class DiffStats:
    """Line counts and text of one file's diff, as seen by the rules."""

    path: str
    text: str
    added: int
    removed: int

    @property
    def total(self) -> int:
        return self.added + self.removed


ContextRule = Tuple[Callable[[DiffStats], bool], str]

# Evaluated top to bottom; the first rule that fires wins.
CONTEXT_RULES: Tuple[ContextRule, ...] = (
    (lambda d: d.total <= 3, "fix"),
    (lambda d: d.removed > 8 and d.added > 8, "refactor"),
    (lambda d: d.added > d.removed * 2, "feat"),
    (lambda d: "config" in d.path or "setting" in d.path, "chore"),
    (lambda d: any(word in d.text for word in ("fix", "bug", "error")), "fix"),
    (lambda d: any(word in d.text for word in ("refactor", "optimize")), "refactor"),
)

DEFAULT_CONTEXT = "modify"


def _header_path(line: str) -> str:
    return line[4:].strip() if len(line) > 4 else ""


def extract_file_diff(diff_text: str, file_path: str) -> str:
    """Return the hunk lines that belong to ``file_path``.

    Parameters
    ----------
    diff_text : str
        Full unified diff of the change set.
    file_path : str
        Path relative to the repository root.

    Returns
    -------
    str
        The ``+``, ``-`` and ``@`` lines inside the file's span, joined
        by newlines. Empty when the file does not appear in the diff.

    Notes
    -----
    ``---`` and ``+++`` lines are file headers only between a
    ``diff --git`` line (or the start of the text) and the first hunk.
    Inside a hunk they are removed or added lines, e.g. a deleted SQL
    ``-- comment``.
    """
    wanted = {file_path, f"a/{file_path}", f"b/{file_path}"}
    in_file = False
    in_header = True
    kept = []
    for line in diff_text.splitlines():
        if line.startswith("diff --git"):
            in_file = False
            in_header = True
            continue
        if in_header and line.startswith(("---", "+++")):
            header = _header_path(line)
            if header != "/dev/null":
                in_file = header in wanted
            continue
        if line.startswith("@@"):
            in_header = False
        if in_file and line.startswith(("+", "-", "@")):
            kept.append(line)
    return "\n".join(kept)


def diff_stats(file_diff: str, file_path: str) -> DiffStats:
    lines = file_diff.splitlines()
    return DiffStats(
        path=file_path,
        text=file_diff,
        added=sum(1 for line in lines if line.startswith("+")),
        removed=sum(1 for line in lines if line.startswith("-")),
    )


def determine_change_context(file_diff: str, file_path: str) -> str:
    """Classify one file's edit by the ordered rules in :data:`CONTEXT_RULES`."""
    stats = diff_stats(file_diff, file_path)
    for predicate, context in CONTEXT_RULES:
        if predicate(stats):
            return context
    return DEFAULT_CONTEXT


def analyze_change_context(change_set: ChangeSet, diff_text: str) -> None:
    """Populate ``change_set.change_context`` for every changed file."""
    for changed in change_set.files:
        file_diff = extract_file_diff(diff_text, changed.path)
        change_set.change_context[changed.path] = determine_change_context(file_diff, changed.path)
