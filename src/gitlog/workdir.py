# src/gitlog/workdir.py
"""Temporary working-directory change.

``os.chdir`` affects the whole process, so two ``working_directory`` blocks
must never run concurrently in one process.
"""
from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path

from .errors import InvalidWorkingDirectory

log = logging.getLogger(__name__)


@contextmanager
def working_directory(path: str | Path):
    """
    Context manager that enters ``path`` and restores the previous cwd.

    Usage:
        with working_directory("repo"):
            # cwd is now repo
            pass

    Raises:
        InvalidWorkingDirectory: If either directory cannot be resolved or entered
    """
    try:
        cwd = Path.cwd()
        target = Path(path).resolve()
    except OSError as e:
        raise InvalidWorkingDirectory(str(path), e.strerror or str(e)) from e

    try:
        os.chdir(target)
    except OSError as e:
        raise InvalidWorkingDirectory(str(target), e.strerror or str(e)) from e
    log.debug(f"Entered {target}")

    try:
        yield target
    finally:
        os.chdir(cwd)
        log.debug(f"Restored {cwd}")
