"""Structured ``git log`` retrieval."""
from .config import Config, ConfigError, load_config
from .errors import (
    BinaryNotFound,
    CommandExecutionFailed,
    GitLogError,
    InvalidWorkingDirectory,
    NotARepository,
)
from .fields import Author, CommitRecord, Committer, HashRef, PersonStamp, Tag, TreeRef
from .gitlog import GitLog, Params, build_args, new
from .parser import Parser, parse
from .revision import Rev, RevAll, RevArgs, RevNumber, RevRange, RevTime

__all__ = [
    "Author",
    "BinaryNotFound",
    "CommandExecutionFailed",
    "CommitRecord",
    "Committer",
    "Config",
    "ConfigError",
    "GitLog",
    "GitLogError",
    "HashRef",
    "InvalidWorkingDirectory",
    "NotARepository",
    "Params",
    "Parser",
    "PersonStamp",
    "Rev",
    "RevAll",
    "RevArgs",
    "RevNumber",
    "RevRange",
    "RevTime",
    "Tag",
    "TreeRef",
    "build_args",
    "load_config",
    "new",
    "parse",
]
