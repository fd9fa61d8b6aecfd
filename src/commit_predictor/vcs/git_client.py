"""
Git client implementation for commit_predictor.

This module wraps the read-only Git queries the prediction engine
needs: the staged name-status listing, the staged unified diff and the
list of modified tracked files. All subprocess calls go through
:meth:`GitClient._run` so that unit tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class GitError(Exception):
    """Raised when a Git command fails or Git cannot be run."""

    pass


class GitClient:
    """Client for querying a Git working tree."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def find_repo_root(start: Path) -> Optional[Path]:
        """Find the root of the Git repository starting from ``start``.

        Walk upwards until a ``.git`` entry is found or the filesystem
        root is reached.
        """
        current = start.resolve()
        while True:
            if (current / ".git").exists():
                return current
            if current.parent == current:
                return None
            current = current.parent

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If Git cannot be started, or the command exits with a
            non-zero status when ``check`` is True.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.error("Unable to run git: %s", e)
            raise GitError(f"Unable to run git: {e}") from e

        if check and result.returncode != 0:
            logger.debug(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result

    # ------------------------------------------------------------------
    # Staged changes
    # ------------------------------------------------------------------
    def get_staged_name_status(self) -> str:
        """Return ``git diff --cached --name-status`` output.

        Each non-empty line has the form ``status<TAB>path``.
        """
        return self._run(["diff", "--cached", "--name-status"]).stdout

    def get_staged_diff(self) -> str:
        """Return the staged unified diff with zero context lines.

        The path prefixes are pinned to ``a/`` and ``b/`` so headers look
        the same regardless of ``diff.mnemonicPrefix`` or ``diff.noprefix``.
        """
        return self._run(["diff", "--cached", "--unified=0", "--src-prefix=a/", "--dst-prefix=b/"]).stdout

    def list_modified_files(self) -> List[str]:
        """Return tracked files with unstaged modifications."""
        result = self._run(["ls-files", "-m"])
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]
