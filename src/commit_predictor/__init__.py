"""
Top-level package for commit_predictor.

This package exposes the main CLI entry point via the
``commit_predictor.cli`` module.
"""

__all__ = ["__version__"]

__version__ = "1.0.0"
