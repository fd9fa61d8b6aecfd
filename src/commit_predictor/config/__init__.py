"""
Configuration loading for commit_predictor.

Provides a loader for the optional user-level configuration file. See
:mod:`commit_predictor.config.loader` for implementation details.
"""

from .loader import ConfigError, load_config  # noqa: F401
