# src/taskline/tasks/task_models.py

from __future__ import annotations

from enum import StrEnum

from ..core.errors import InvalidTask


class TaskKind(StrEnum):
    """Type tag shown in the first bracket of a rendered task."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def _require_text(value: str | None, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidTask(f"{field_name} must not be empty")
    return str(value).strip()


class Task:
    """
    One task and its completion state.

    Notes:
    - description is fixed at creation time
    - done only ever goes False -> True; marking twice is harmless
    """

    kind: TaskKind

    __slots__ = ("_description", "_done")

    def __init__(self, description: str) -> None:
        if type(self) is Task:
            raise TypeError("Task is abstract; use Todo, Deadline or Event")
        self._description = _require_text(description, "description")
        self._done = False

    @property
    def description(self) -> str:
        return self._description

    @property
    def done(self) -> bool:
        return self._done

    def is_done(self) -> bool:
        return self._done

    def mark_done(self) -> None:
        self._done = True

    def suffix(self) -> str:
        return ""

    def describe(self) -> str:
        status = "X" if self._done else " "
        return f"[{self.kind.value}][{status}] {self._description}{self.suffix()}"

    render = describe

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"{type(self).__name__}(description={self._description!r}, done={self._done})"


class Todo(Task):
    kind = TaskKind.TODO

    __slots__ = ()


class Deadline(Task):
    kind = TaskKind.DEADLINE

    __slots__ = ("_by",)

    def __init__(self, description: str, by: str) -> None:
        super().__init__(description)
        self._by = _require_text(by, "by")

    @property
    def by(self) -> str:
        return self._by

    def suffix(self) -> str:
        return f" (by: {self._by})"


class Event(Task):
    kind = TaskKind.EVENT

    __slots__ = ("_at",)

    def __init__(self, description: str, at: str) -> None:
        super().__init__(description)
        self._at = _require_text(at, "at")

    @property
    def at(self) -> str:
        return self._at

    def suffix(self) -> str:
        return f" (at: {self._at})"


def new_todo(description: str) -> Todo:
    return Todo(description)


def new_deadline(description: str, by: str) -> Deadline:
    return Deadline(description, by)


def new_event(description: str, at: str) -> Event:
    return Event(description, at)
