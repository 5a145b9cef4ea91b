# src/taskline/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class SessionState:
    # Settings are stored on the state so handlers/presenter can read them.
    settings: object

    task_store: TaskStore
    finished: bool = False
