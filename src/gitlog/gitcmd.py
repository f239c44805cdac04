# src/gitlog/gitcmd.py
"""Thin wrapper around the git executable."""
from __future__ import annotations

import logging
import os
import shutil
import subprocess

from .errors import BinaryNotFound, CommandExecutionFailed, NotARepository

log = logging.getLogger(__name__)


class GitClient:
    """Runs git in the current working directory and captures stdout."""

    def __init__(self, bin: str = "git", timeout: float | None = None):
        self.bin = bin
        self.timeout = timeout

    def can_exec(self) -> None:
        """Raise BinaryNotFound unless the configured binary can be located."""
        if shutil.which(self.bin) is None:
            raise BinaryNotFound(self.bin)

    def inside_work_tree(self) -> None:
        """Raise NotARepository unless the cwd is inside a git work tree."""
        try:
            out = self.exec("rev-parse", "--is-inside-work-tree")
        except CommandExecutionFailed as e:
            raise NotARepository(os.getcwd()) from e

        if out.strip() != "true":
            raise NotARepository(os.getcwd())

    def exec(self, subcommand: str, *args: str) -> str:
        """
        Run ``git <subcommand> <args...>``.

        Returns:
            Captured stdout

        Raises:
            BinaryNotFound: If the binary disappeared before running
            CommandExecutionFailed: On non-zero exit, timeout or undecodable output
        """
        cmd = [self.bin, subcommand, *args]
        log.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise BinaryNotFound(self.bin) from e
        except subprocess.TimeoutExpired as e:
            raise CommandExecutionFailed(cmd, f"timed out after {self.timeout}s") from e

        stderr = result.stderr.decode("utf-8", errors="replace")
        if result.returncode != 0:
            raise CommandExecutionFailed(
                cmd,
                f"exit status {result.returncode}",
                returncode=result.returncode,
                stderr=stderr,
            )

        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CommandExecutionFailed(cmd, "output is not valid UTF-8", returncode=0, stderr=stderr) from e
