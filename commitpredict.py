#!/usr/bin/env python
"""
Thin wrapper script to invoke the commit_predictor CLI.

Running ``python commitpredict.py`` is equivalent to running the
``commitpredict`` console script installed via ``pyproject.toml``.
"""

from commit_predictor.cli import main


if __name__ == "__main__":
    main(prog_name="commitpredict")
