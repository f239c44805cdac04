# src/gitlog/parser.py
"""Rebuild commit records from the text printed for ``template.LOG_FORMAT``."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from .fields import CommitRecord, HashRef, PersonStamp, Tag, TreeRef
from .template import (
    AUTHOR_FIELD,
    BODY_FIELD,
    COMMITTER_FIELD,
    DELIMITER,
    HASH_FIELD,
    SEPARATOR,
    SUBJECT_FIELD,
    TAG_FIELD,
    TREE_FIELD,
)

log = logging.getLogger(__name__)


def convert_newlines(text: str) -> str:
    """Normalize ``\\r\\n`` and bare ``\\r`` to ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def parse_hash(value: str) -> HashRef:
    long, _, short = value.partition(" ")
    return HashRef(long=long, short=short)


def parse_tree(value: str) -> TreeRef:
    ref = parse_hash(value)
    return TreeRef(long=ref.long, short=ref.short)


def parse_person(value: str) -> PersonStamp:
    """Decode ``name<email>[epoch-seconds]``.

    The email is bounded by the first ``<`` and ``>``. The timestamp is the
    last bracketed group, since a name may itself contain brackets. A
    timestamp that is not an integer falls back to 0.
    """
    begin_email = value.find("<")
    end_email = value.find(">", begin_email + 1)
    begin_date = value.rfind("[")
    end_date = value.rfind("]")

    if begin_email == -1:
        name = value[:begin_date] if begin_date != -1 else value
        email = ""
    else:
        name = value[:begin_email]
        email = value[begin_email + 1:end_email] if end_email != -1 else ""

    timestamp = 0
    if begin_date != -1 and end_date > begin_date:
        raw = value[begin_date + 1:end_date]
        try:
            timestamp = int(raw, 10)
        except ValueError:
            log.debug(f"Non-numeric timestamp {raw!r}, using 0")

    try:
        date = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        log.debug(f"Timestamp {timestamp} out of range, using 0")
        date = datetime.fromtimestamp(0, tz=timezone.utc)

    return PersonStamp(name=name, email=email, date=date)


def parse_tag(value: str) -> Tag | None:
    name = value.strip()
    return Tag(name=name) if name else None


def parse_subject(value: str) -> str:
    return convert_newlines(value).strip()


def parse_body(value: str) -> str:
    # Two quote passes: the quotes wrapping --pretty come back around the
    # record and can be separated from the body by a newline.
    s = convert_newlines(value).strip()
    s = s.strip('"').strip()
    s = s.strip('"').strip()
    return s


# tag -> (record attribute, decoder)
DECODERS: dict[str, tuple[str, Callable[[str], object]]] = {
    HASH_FIELD: ("hash", parse_hash),
    TREE_FIELD: ("tree", parse_tree),
    AUTHOR_FIELD: ("author", parse_person),
    COMMITTER_FIELD: ("committer", parse_person),
    TAG_FIELD: ("tag", parse_tag),
    SUBJECT_FIELD: ("subject", parse_subject),
    BODY_FIELD: ("body", parse_body),
}


class Parser:
    """Splits a captured git-log blob into ``CommitRecord`` objects."""

    def __init__(self, decoders: dict[str, tuple[str, Callable[[str], object]]] | None = None):
        self.decoders = dict(DECODERS if decoders is None else decoders)

    def parse(self, raw: str) -> list[CommitRecord]:
        """Parse the whole output of one ``git log`` call.

        Args:
            raw: Captured stdout

        Returns:
            One record per separator, in output order
        """
        chunks = raw.split(SEPARATOR)
        if len(chunks) < 2 and raw.strip():
            log.debug(f"No record separator in {len(raw)} bytes of output")

        # First chunk is whatever precedes the first separator
        return [self.parse_commit(chunk) for chunk in chunks[1:]]

    def parse_commit(self, chunk: str) -> CommitRecord:
        values: dict[str, object] = {}

        for segment in chunk.split(DELIMITER):
            field_type, sep, content = segment.partition(":")
            if not sep:
                if segment.strip() and segment.strip() != '"':
                    log.debug(f"Skipping segment without field name: {segment[:40]!r}")
                continue

            decoder = self.decoders.get(field_type)
            if decoder is None:
                continue

            attr, decode = decoder
            values[attr] = decode(content)

        return CommitRecord(**values)


def parse(raw: str) -> list[CommitRecord]:
    return Parser().parse(raw)
