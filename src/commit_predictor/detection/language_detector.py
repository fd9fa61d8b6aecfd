"""
Language and file-category classification for changed paths.

Languages are resolved from the file extension table in
:mod:`commit_predictor.detection.tables`. The test/config/docs
predicates are independent keyword checks; a path may satisfy several
of them, and :func:`file_category` applies the precedence used by the
prediction engine.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from commit_predictor.detection.tables import (
    CONFIG_MARKERS,
    DOC_MARKERS,
    LANGUAGE_EXTENSIONS,
    STYLE_MARKERS,
    TEST_MARKERS,
    TEST_SUFFIXES,
)


def classify_language(file_path: str) -> Optional[str]:
    """Return the language of ``file_path`` or ``None`` when unknown.

    The language table is scanned in declaration order and the first
    language with a matching suffix wins.
    """
    for language, extensions in LANGUAGE_EXTENSIONS.items():
        if file_path.endswith(extensions):
            return language
    return None


def primary_language(file_paths: Iterable[str]) -> Optional[str]:
    """Return the most frequent language among ``file_paths``.

    Ties are resolved in favour of the language declared first in the
    language table.
    """
    votes = Counter(lang for lang in map(classify_language, file_paths) if lang)
    if not votes:
        return None
    best = max(votes.values())
    return next(lang for lang in LANGUAGE_EXTENSIONS if votes.get(lang) == best)


def is_test_file(file_path: str) -> bool:
    return any(marker in file_path for marker in TEST_MARKERS) or file_path.endswith(TEST_SUFFIXES)


def is_config_file(file_path: str) -> bool:
    lowered = file_path.lower()
    return any(marker in lowered for marker in CONFIG_MARKERS)


def is_doc_file(file_path: str) -> bool:
    lowered = file_path.lower()
    return any(marker in lowered for marker in DOC_MARKERS)


def file_category(file_path: str) -> str:
    """Assign exactly one category to a path.

    Parameters
    ----------
    file_path : str
        Path relative to the repository root.

    Returns
    -------
    str
        One of ``test``, ``config``, ``docs``, ``style``, ``migration``,
        ``seed`` or ``code``, checked in that order.
    """
    if is_test_file(file_path):
        return "test"
    if is_config_file(file_path):
        return "config"
    if is_doc_file(file_path):
        return "docs"
    if any(marker in file_path for marker in STYLE_MARKERS):
        return "style"
    if "migration" in file_path:
        return "migration"
    if "seed" in file_path or "factory" in file_path:
        return "seed"
    # Names such as "userspec.js" slip past the test markers above.
    if "test" in file_path or "spec" in file_path:
        return "test"
    return "code"
