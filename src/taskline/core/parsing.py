# src/taskline/core/parsing.py

"""
Line tokenizer and argument extractors.

Everything here is pure: no store access, no logging of user data.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from .errors import MalformedSyntax, NotANumber

_INT_RE = re.compile(r"[+-]?\d+")


class Verb(StrEnum):
    LIST = "list"
    DONE = "done"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    BYE = "bye"
    UNKNOWN = "unknown"

    @classmethod
    def from_word(cls, word: str) -> Verb:
        try:
            return cls(word.lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    verb: Verb
    word: str
    remainder: str | None


def tokenize(line: str) -> ParsedCommand:
    """
    Split a raw line into verb + remainder.

    The verb is the first whitespace-delimited token (case-insensitive).
    The remainder is everything after the first whitespace run, trimmed,
    or None when nothing follows.
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return ParsedCommand(verb=Verb.UNKNOWN, word="", remainder=None)

    word = parts[0].lower()
    remainder = parts[1].strip() if len(parts) > 1 else None
    return ParsedCommand(verb=Verb.from_word(word), word=word, remainder=remainder or None)


def split_marker(remainder: str, marker: str, *, usage: str | None = None) -> tuple[str, str]:
    """
    Split "<description> <marker> <date>" into (description, date).

    Uses the first occurrence of marker. A marker at position 0 means there is
    no description, which is a syntax error rather than an empty task.
    """
    idx = remainder.find(marker)
    if idx <= 0:
        raise MalformedSyntax(f"marker {marker!r} missing or leading", usage=usage)

    description = remainder[:idx].strip()
    date = remainder[idx + len(marker):].strip()
    if not description or not date:
        raise MalformedSyntax(f"nothing around marker {marker!r}", usage=usage)
    return description, date


def parse_task_number(remainder: str, *, usage: str | None = None) -> int:
    text = remainder.strip()
    if not _INT_RE.fullmatch(text):
        raise NotANumber(f"not a task number: {text!r}", usage=usage)
    try:
        return int(text)
    except ValueError as e:
        # Digit strings past the interpreter's int conversion limit.
        raise NotANumber(f"task number too long ({len(text)} chars)", usage=usage) from e
