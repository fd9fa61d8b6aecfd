"""
Version control and file-system collaborators.

This package contains the Git client used to read the staged change set
and a file-system helper that lists recently modified files when no
staged changes are available.
"""

from .filesystem import recent_files  # noqa: F401
from .git_client import GitClient, GitError  # noqa: F401
