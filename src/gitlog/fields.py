# src/gitlog/fields.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class HashRef:
    """Hash of a commit, full and abbreviated."""
    long: str = ""
    short: str = ""


@dataclass(frozen=True)
class TreeRef:
    """Tree hash of a commit, full and abbreviated."""
    long: str = ""
    short: str = ""


@dataclass(frozen=True)
class PersonStamp:
    """Author or committer of a commit."""
    name: str
    email: str
    date: datetime

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        d = asdict(self)
        d["date"] = self.date.isoformat()
        return d


Author = PersonStamp
Committer = PersonStamp


@dataclass(frozen=True)
class Tag:
    """Decoration (ref names) attached to a commit."""
    name: str


@dataclass(frozen=True)
class CommitRecord:
    hash: HashRef = field(default_factory=HashRef)
    tree: TreeRef = field(default_factory=TreeRef)
    author: PersonStamp | None = None
    committer: PersonStamp | None = None
    tag: Tag | None = None
    subject: str = ""
    body: str = ""

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "hash": asdict(self.hash),
            "tree": asdict(self.tree),
            "author": self.author.to_dict() if self.author else None,
            "committer": self.committer.to_dict() if self.committer else None,
            "tag": self.tag.name if self.tag else None,
            "subject": self.subject,
            "body": self.body,
        }
