"""
Change-set aggregation and per-file edit analysis.

See :mod:`commit_predictor.analysis.aggregator` and
:mod:`commit_predictor.analysis.diff_context` for details.
"""

from .aggregator import build_from_listing, build_from_paths  # noqa: F401
from .change_set import ChangedFile, ChangeSet, FileStatus, ScopeStats  # noqa: F401
from .diff_context import analyze_change_context, determine_change_context, extract_file_diff  # noqa: F401
