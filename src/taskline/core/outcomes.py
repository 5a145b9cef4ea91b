# src/taskline/core/outcomes.py

"""
Structured command results.

The interpreter returns one of these per line; the console presenter turns
them into text. Nothing here knows about borders or indentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..tasks.task_models import Task
from .errors import ErrorKind


@dataclass(frozen=True, slots=True)
class Welcome:
    ends_session: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class Added:
    task: Task
    size: int

    ends_session: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class Marked:
    task: Task
    number: int  # 1-based, as typed by the user

    ends_session: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class Listed:
    tasks: tuple[Task, ...]

    ends_session: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class Exiting:
    ends_session: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class Failed:
    kind: ErrorKind
    usage: str | None = None
    detail: str = ""

    ends_session: ClassVar[bool] = False


Outcome = Welcome | Added | Marked | Listed | Exiting | Failed
