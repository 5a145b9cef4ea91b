# src/taskline/core/errors.py

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """
    Error taxonomy shared by models, store and interpreter.

    The value doubles as the message key the presenter looks up.
    """

    UNKNOWN_COMMAND = "unknown_command"
    MISSING_ARGUMENT = "missing_argument"
    NOT_A_NUMBER = "not_a_number"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    EMPTY_LIST = "empty_list"
    MALFORMED_SYNTAX = "malformed_syntax"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    INVALID_TASK = "invalid_task"


class TasklineError(Exception):
    """Base class for every recoverable, per-command failure."""

    kind: ErrorKind = ErrorKind.MALFORMED_SYNTAX

    def __init__(self, message: str = "", *, usage: str | None = None) -> None:
        super().__init__(message or self.kind.value)
        self.usage = usage


class UnknownCommand(TasklineError):
    kind = ErrorKind.UNKNOWN_COMMAND


class MissingArgument(TasklineError):
    kind = ErrorKind.MISSING_ARGUMENT


class NotANumber(TasklineError):
    kind = ErrorKind.NOT_A_NUMBER


class IndexOutOfRange(TasklineError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE


class EmptyList(TasklineError):
    kind = ErrorKind.EMPTY_LIST


class MalformedSyntax(TasklineError):
    kind = ErrorKind.MALFORMED_SYNTAX


class CapacityExceeded(TasklineError):
    kind = ErrorKind.CAPACITY_EXCEEDED

    def __init__(self, capacity: int) -> None:
        super().__init__(f"task list is full ({capacity} tasks)")
        self.capacity = capacity


class InvalidTask(TasklineError):
    kind = ErrorKind.INVALID_TASK
