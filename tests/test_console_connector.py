# tests/test_console_connector.py

from __future__ import annotations

from taskline.connectors.console_connector import frame, render_outcome, run_console_loop
from taskline.core.errors import ErrorKind
from taskline.core.outcomes import Failed, Welcome

from .fakes import CapturingWriter, ScriptedInput

BORDER = "\t" + "_" * 60


def test_frame_wraps_lines_in_borders() -> None:
    assert frame(["hello", "world"], 60) == "\n".join([BORDER, "\t hello", "\t world", BORDER])
    assert frame([], 3) == "\t___\n\t___"


def test_render_failures() -> None:
    verbs = ["list", "done", "todo", "deadline", "event", "bye"]

    assert render_outcome(Failed(kind=ErrorKind.UNKNOWN_COMMAND), verbs=verbs) == [
        "Invalid command. Available commands: ",
        " list, done, todo, deadline, event, bye",
    ]
    assert render_outcome(Failed(kind=ErrorKind.EMPTY_LIST)) == ["You have no tasks recorded."]
    assert render_outcome(Failed(kind=ErrorKind.INDEX_OUT_OF_RANGE)) == ["Index out of range. "]
    assert render_outcome(
        Failed(kind=ErrorKind.MALFORMED_SYNTAX, usage="event <task name> /at <date>")
    ) == ["Invalid syntax! Usage: event <task name> /at <date>"]
    assert render_outcome(Failed(kind=ErrorKind.CAPACITY_EXCEEDED), capacity=100) == [
        "Your task list is full (100 tasks). "
    ]


def test_render_welcome_uses_app_name() -> None:
    assert render_outcome(Welcome(), app_name="Rex") == ["Hello! I'm Rex, what can I do for you?"]


def test_console_session(state) -> None:
    read = ScriptedInput(
        [
            "todo read book",
            "",
            "deadline return book /by Sunday",
            "done 1",
            "list",
            "bye",
            "todo never read",
        ]
    )
    write = CapturingWriter()

    run_console_loop(state, read_line=read, write=write)

    # welcome + 5 replies; the blank line produces nothing
    assert len(write.frames) == 6
    assert read.reads == 6
    assert "Hello! I'm Duke, what can I do for you?" in write.frames[0]
    assert write.frames[1] == "\n".join(
        [
            BORDER,
            "\t Got it. I've added this task: ",
            "\t   [T][ ] read book",
            "\t Now you have 1 tasks in the list. ",
            BORDER,
        ]
    )
    assert "\t Nice! I've marked this task as done: \n\t [T][X] read book" in write.frames[3]
    assert "\t 1. [T][X] read book\n\t 2. [D][ ] return book (by: Sunday)" in write.frames[4]
    assert "Bye. Hope to see you again soon! " in write.frames[5]
    assert state.finished
    assert state.task_store.size() == 2


def test_console_stops_on_eof(state) -> None:
    write = CapturingWriter()

    run_console_loop(state, read_line=ScriptedInput(["todo a"]), write=write)

    assert len(write.frames) == 2
    assert not state.finished
    assert state.task_store.size() == 1


def test_console_reports_errors_and_continues(state) -> None:
    write = CapturingWriter()

    run_console_loop(state, read_line=ScriptedInput(["done 5", "blah", "todo a"]), write=write)

    assert "You have no tasks recorded." in write.frames[1]
    assert "Invalid command. Available commands: " in write.frames[2]
    assert "list, done, todo, deadline, event, bye" in write.frames[2]
    assert "Now you have 1 tasks in the list." in write.frames[3]


def test_unknown_command_frame_indents_verb_list_by_two_spaces() -> None:
    lines = render_outcome(Failed(kind=ErrorKind.UNKNOWN_COMMAND), verbs=["list", "bye"])
    assert frame(lines, 0).splitlines()[2] == "\t  list, bye"
