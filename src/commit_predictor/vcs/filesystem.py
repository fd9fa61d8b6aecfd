"""
Best-effort listing of recently modified files.

Used when no staged Git changes are available. Files are ranked by
modification time, newest first, and only those touched within the
recency window are returned.
"""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import List, Optional, Tuple


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


IGNORED_DIRS = frozenset({".git", "node_modules", "__pycache__", ".venv", "vendor"})


def recent_files(
    root: Path,
    window_minutes: int = 30,
    limit: int = 10,
    now: Optional[float] = None,
) -> List[str]:
    """List files under ``root`` modified in the last ``window_minutes``.

    Parameters
    ----------
    root : Path
        Directory to walk.
    window_minutes : int
        Recency window.
    limit : int
        Maximum number of paths returned.
    now : float, optional
        Reference timestamp; defaults to the current time.

    Returns
    -------
    List[str]
        POSIX-style paths relative to ``root``, newest first.
    """
    cutoff = (time.time() if now is None else now) - window_minutes * 60
    found: List[Tuple[float, str]] = []

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in IGNORED_DIRS)
        for name in filenames:
            full = Path(dirpath) / name
            try:
                mtime = full.stat().st_mtime
            except OSError as exc:
                logger.debug("Skipping unreadable file %s: %s", full, exc)
                continue
            if mtime >= cutoff:
                found.append((mtime, full.relative_to(root).as_posix()))

    found.sort(key=lambda item: (-item[0], item[1]))
    return [path for _, path in found[:limit]]
