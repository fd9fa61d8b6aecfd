"""
Path classification for commit prediction.

This package maps changed file paths to languages, file categories and
framework scopes. See :mod:`commit_predictor.detection.language_detector`
and :mod:`commit_predictor.detection.framework_detector` for details.
"""

from .framework_detector import FrameworkDetector  # noqa: F401
from .language_detector import classify_language, file_category, primary_language  # noqa: F401
