"""
Commit type, scope and description prediction.

This package turns an aggregated change set into a
:class:`~commit_predictor.prediction.models.Prediction`. See
:mod:`commit_predictor.prediction.engine` for the pipeline,
:mod:`commit_predictor.prediction.rules` for the type cascades and
:mod:`commit_predictor.prediction.templates` for description phrases.
"""

from .engine import PredictionEngine  # noqa: F401
from .models import Alternative, CommitType, Prediction  # noqa: F401
from .templates import TemplateLibrary  # noqa: F401
