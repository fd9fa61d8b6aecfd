"""
Commit message assembly and validation.

See :mod:`commit_predictor.message.commit_message_generator` for details.
"""

from .commit_message_generator import (  # noqa: F401
    CommitMessageGenerator,
    CommitTypeError,
    assemble_message,
    validate_message,
)
