# src/gitlog/revision.py
"""Revision selectors: which commits a git-log call covers."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Rev:
    """A single refname, e.g. ``v0.0.1`` or ``5e312d5``."""
    ref: str

    def args(self) -> list[str]:
        return [self.ref]


@dataclass(frozen=True)
class RevRange:
    """Alias for ``<old>..<new>``."""
    old: str
    new: str

    def args(self) -> list[str]:
        return [f"{self.old}..{self.new}"]


@dataclass(frozen=True)
class RevAll:
    """Alias for ``--all``."""

    def args(self) -> list[str]:
        return ["--all"]


@dataclass(frozen=True)
class RevNumber:
    """Alias for ``-n <limit>``. The limit is not validated."""
    limit: int

    def args(self) -> list[str]:
        return ["-n", str(self.limit)]


@dataclass(frozen=True)
class RevTime:
    """Alias for ``--since <date> --until <date>``; ``None`` leaves a bound out."""
    since: datetime | None = None
    until: datetime | None = None

    def args(self) -> list[str]:
        out: list[str] = []
        if self.since is not None:
            out += ["--since", self.since.strftime(TIME_FORMAT)]
        if self.until is not None:
            out += ["--until", self.until.strftime(TIME_FORMAT)]
        return out


RevArgs = Union[Rev, RevRange, RevAll, RevNumber, RevTime]
