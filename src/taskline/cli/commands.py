# src/taskline/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from ..core.errors import EmptyList, MissingArgument, TasklineError, UnknownCommand
from ..core.outcomes import Added, Exiting, Failed, Listed, Marked, Outcome
from ..core.parsing import Verb, parse_task_number, split_marker, tokenize
from ..core.state import SessionState
from ..tasks.task_models import Task, new_deadline, new_event, new_todo

CommandHandler = Callable[[SessionState, str | None], Outcome]

logger = logging.getLogger(__name__)

DEADLINE_MARKER = "/by"
EVENT_MARKER = "/at"

USAGE_DONE = "done <task number>"
USAGE_TODO = "todo <task name>"
USAGE_DEADLINE = f"deadline <task name> {DEADLINE_MARKER} <date>"
USAGE_EVENT = f"event <task name> {EVENT_MARKER} <date>"


class CommandRegistry:
    """Verb -> handler table used by the console connector."""

    def __init__(self) -> None:
        self._handlers: dict[Verb, CommandHandler] = {}

    def register(self, verb: Verb, handler: CommandHandler) -> None:
        self._handlers[verb] = handler

    def verbs(self) -> list[str]:
        return [verb.value for verb in self._handlers]

    def handle(self, state: SessionState, line: str) -> Outcome:
        """
        Interpret one input line against the session.

        Per-command failures come back as Failed outcomes; the store is left as
        it was before the line.
        """
        if state.finished:
            raise RuntimeError("session already finished")

        cmd = tokenize(line)
        handler = self._handlers.get(cmd.verb)
        try:
            if handler is None:
                raise UnknownCommand(f"unknown command word {cmd.word!r}")
            return handler(state, cmd.remainder)
        except TasklineError as e:
            logger.info("Command %r failed: %s (%s)", cmd.word, e.kind.value, e)
            return Failed(kind=e.kind, usage=e.usage, detail=str(e))


registry = CommandRegistry()


def run_lines(
    state: SessionState,
    lines: Iterable[str],
    reg: CommandRegistry | None = None,
) -> Iterator[Outcome]:
    """Handle lines in order, stopping right after the session-ending outcome."""
    reg = reg or registry
    for line in lines:
        if not line.strip():
            continue
        outcome = reg.handle(state, line)
        yield outcome
        if outcome.ends_session:
            return


def _add(state: SessionState, task: Task) -> Added:
    size = state.task_store.add(task)
    return Added(task=task, size=size)


def cmd_bye(state: SessionState, remainder: str | None) -> Outcome:
    state.finished = True
    logger.debug("Session finished by user.")
    return Exiting()


def cmd_list(state: SessionState, remainder: str | None) -> Outcome:
    store = state.task_store
    if store.is_empty():
        raise EmptyList()
    return Listed(tasks=tuple(store.all()))


def cmd_done(state: SessionState, remainder: str | None) -> Outcome:
    """
    done <n>

    Check order: missing argument, empty list, number format, range.
    """
    usage = USAGE_DONE
    if remainder is None:
        raise MissingArgument("task number required", usage=usage)
    store = state.task_store
    if store.is_empty():
        raise EmptyList()
    number = parse_task_number(remainder, usage=usage)
    task = store.mark_done(number - 1)
    return Marked(task=task, number=number)


def cmd_todo(state: SessionState, remainder: str | None) -> Outcome:
    if remainder is None:
        raise MissingArgument("description required", usage=USAGE_TODO)
    return _add(state, new_todo(remainder))


def cmd_deadline(state: SessionState, remainder: str | None) -> Outcome:
    usage = USAGE_DEADLINE
    if remainder is None:
        raise MissingArgument("description and date required", usage=usage)
    description, by = split_marker(remainder, DEADLINE_MARKER, usage=usage)
    return _add(state, new_deadline(description, by))


def cmd_event(state: SessionState, remainder: str | None) -> Outcome:
    usage = USAGE_EVENT
    if remainder is None:
        raise MissingArgument("description and date required", usage=usage)
    description, at = split_marker(remainder, EVENT_MARKER, usage=usage)
    return _add(state, new_event(description, at))


registry.register(Verb.LIST, cmd_list)
registry.register(Verb.DONE, cmd_done)
registry.register(Verb.TODO, cmd_todo)
registry.register(Verb.DEADLINE, cmd_deadline)
registry.register(Verb.EVENT, cmd_event)
registry.register(Verb.BYE, cmd_bye)
