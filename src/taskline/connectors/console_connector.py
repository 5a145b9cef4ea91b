# src/taskline/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..cli.commands import registry as command_registry
from ..config import DEFAULT_BORDER_WIDTH
from ..core.errors import ErrorKind
from ..core.outcomes import Added, Exiting, Failed, Listed, Marked, Outcome, Welcome
from ..core.state import SessionState

logger = logging.getLogger(__name__)

MESSAGE_WELCOME = "Hello! I'm {app_name}, what can I do for you?"
MESSAGE_ADDED = "Got it. I've added this task: "
MESSAGE_MARKED = "Nice! I've marked this task as done: "
MESSAGE_LIST = "Here are the tasks in your list: "
MESSAGE_EXIT = "Bye. Hope to see you again soon! "
MESSAGE_NUMBER_OF_TASKS = "Now you have {count} tasks in the list. "
MESSAGE_INTERNAL_ERROR = "Internal error while handling a command."

ERROR_INVALID_COMMAND = "Invalid command. Available commands: "
ERROR_INDEX_OUT_OF_RANGE = "Index out of range. "
ERROR_EMPTY_LIST = "You have no tasks recorded."
ERROR_INVALID_SYNTAX = "Invalid syntax! Usage: "
ERROR_CAPACITY = "Your task list is full ({capacity} tasks). "

# Failures that are reported as a usage hint for the verb.
_SYNTAX_KINDS = frozenset(
    {
        ErrorKind.MISSING_ARGUMENT,
        ErrorKind.NOT_A_NUMBER,
        ErrorKind.MALFORMED_SYNTAX,
        ErrorKind.INVALID_TASK,
    }
)


def _render_failure(outcome: Failed, *, verbs: Sequence[str], capacity: int) -> list[str]:
    if outcome.kind is ErrorKind.UNKNOWN_COMMAND:
        return [ERROR_INVALID_COMMAND, " " + ", ".join(verbs)]
    if outcome.kind is ErrorKind.INDEX_OUT_OF_RANGE:
        return [ERROR_INDEX_OUT_OF_RANGE]
    if outcome.kind is ErrorKind.EMPTY_LIST:
        return [ERROR_EMPTY_LIST]
    if outcome.kind is ErrorKind.CAPACITY_EXCEEDED:
        return [ERROR_CAPACITY.format(capacity=capacity)]
    if outcome.kind in _SYNTAX_KINDS:
        return [ERROR_INVALID_SYNTAX + (outcome.usage or "")]
    return [outcome.detail or outcome.kind.value]


def render_outcome(
    outcome: Outcome,
    *,
    app_name: str = "Duke",
    verbs: Sequence[str] = (),
    capacity: int = 0,
) -> list[str]:
    """Turn an outcome into the message lines shown to the user (no framing)."""
    if isinstance(outcome, Welcome):
        return [MESSAGE_WELCOME.format(app_name=app_name)]
    if isinstance(outcome, Added):
        return [
            MESSAGE_ADDED,
            f"  {outcome.task.render()}",
            MESSAGE_NUMBER_OF_TASKS.format(count=outcome.size),
        ]
    if isinstance(outcome, Marked):
        return [MESSAGE_MARKED, outcome.task.render()]
    if isinstance(outcome, Listed):
        lines = [MESSAGE_LIST]
        for i, task in enumerate(outcome.tasks, start=1):
            lines.append(f"{i}. {task.render()}")
        return lines
    if isinstance(outcome, Exiting):
        return [MESSAGE_EXIT]
    if isinstance(outcome, Failed):
        return _render_failure(outcome, verbs=verbs, capacity=capacity)
    raise TypeError(f"unsupported outcome: {outcome!r}")


def frame(lines: Sequence[str], border_width: int = DEFAULT_BORDER_WIDTH) -> str:
    border = f"\t{'_' * border_width}"
    body = [f"\t {line}" for line in lines]
    return "\n".join([border, *body, border])


def run_console_loop(
    state: SessionState,
    *,
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    logger.info("Console connector started.")

    settings = getattr(state, "settings", None)
    app_name = str(getattr(settings, "app_name", "Duke"))
    border_width = int(getattr(settings, "border_width", DEFAULT_BORDER_WIDTH))
    verbs = command_registry.verbs()

    def show(outcome: Outcome) -> None:
        lines = render_outcome(
            outcome,
            app_name=app_name,
            verbs=verbs,
            capacity=state.task_store.capacity,
        )
        write(frame(lines, border_width))

    show(Welcome())

    while not state.finished:
        try:
            user_input = read_line().strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        try:
            outcome = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            write(frame([MESSAGE_INTERNAL_ERROR], border_width))
            continue

        show(outcome)

    logger.info("Console connector finished.")
