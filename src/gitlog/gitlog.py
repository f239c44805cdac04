# src/gitlog/gitlog.py
"""Fetch ``git log`` output and turn it into commit records."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import Config
from .fields import CommitRecord
from .gitcmd import GitClient
from .parser import Parser
from .revision import RevArgs
from .template import NO_DECORATE_ARG, PRETTY_ARG
from .workdir import working_directory

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Params:
    """Optional git-log flags."""
    merges_only: bool = False  # --merges
    ignore_merges: bool = False  # --no-merges
    reverse: bool = False  # --reverse


def build_args(rev: RevArgs | None = None, params: Params | None = None) -> list[str]:
    """Build the argument list passed after ``git log``."""
    args = [NO_DECORATE_ARG, PRETTY_ARG]

    if params is not None:
        # Both merge flags are forwarded as-is; git decides what that means.
        if params.merges_only:
            args.append("--merges")
        if params.ignore_merges:
            args.append("--no-merges")
        if params.reverse:
            args.append("--reverse")

    if rev is not None:
        args += rev.args()

    return args


class GitLog:
    """
    Reads commit history of one repository.

    The repository directory is entered with ``os.chdir`` for the duration of
    each ``log`` call, so calls must not overlap within a process.
    """

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.client = GitClient(bin=self.config.bin, timeout=self.config.timeout)
        self.parser = Parser()

    def log(self, rev: RevArgs | None = None, params: Params | None = None) -> list[CommitRecord]:
        """
        Get commits selected by ``rev`` (all reachable from HEAD by default).

        Raises:
            BinaryNotFound: git cannot be located
            InvalidWorkingDirectory: the repository path cannot be entered
            NotARepository: the path is not inside a git work tree
            CommandExecutionFailed: git log failed or printed unreadable output
        """
        self.client.can_exec()

        with working_directory(self.config.path):
            self.client.inside_work_tree()
            out = self.client.exec("log", *build_args(rev, params))

        commits = self.parser.parse(out)
        log.info(f"Parsed {len(commits)} commits from {self.config.path}")
        return commits


def new(config: Config | None = None) -> GitLog:
    return GitLog(config)
