# src/gitlog/errors.py
"""Error kinds raised by a git-log acquisition."""
from __future__ import annotations


class GitLogError(Exception):
    """Base class for every failure surfaced by ``GitLog.log``."""


class BinaryNotFound(GitLogError):
    """Raised when the configured git executable cannot be located."""

    def __init__(self, bin: str):
        super().__init__(f"git binary does not exists: {bin}")
        self.bin = bin


class InvalidWorkingDirectory(GitLogError):
    """Raised when the repository path cannot be resolved or entered."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot enter {path}: {reason}")
        self.path = path


class NotARepository(GitLogError):
    """Raised when the target directory is not inside a git work tree."""

    def __init__(self, path: str):
        super().__init__(f"not a git repository (or any of the parent directories): {path}")
        self.path = path


class CommandExecutionFailed(GitLogError):
    """Raised when git ran but exited non-zero or produced unreadable output."""

    def __init__(self, args: list[str], message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(f"`{' '.join(args)}` failed: {message}")
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr

