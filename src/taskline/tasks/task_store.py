# src/taskline/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from ..core.errors import CapacityExceeded, IndexOutOfRange
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_MAX_TASKS = 100


class TaskView(Sequence[Task]):
    """
    Read-only window onto the store's tasks, in insertion order.

    Iteration reads the live list, so a view can be walked any number of times
    and always reflects the current store contents.
    """

    __slots__ = ("_tasks",)

    def __init__(self, tasks: list[Task]) -> None:
        self._tasks = tasks

    def __getitem__(self, index):
        return self._tasks[index]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)


class TaskStore:
    """
    In-memory, append-only task list with a capacity limit.

    Mutations:
    - add() appends at the end
    - mark_done() flips one task's status in place
    Nothing is ever removed or reordered.
    """

    def __init__(self, max_tasks: int = DEFAULT_MAX_TASKS) -> None:
        if max_tasks < 1:
            raise ValueError("max_tasks must be >= 1")
        self._max_tasks = int(max_tasks)
        self._tasks: list[Task] = []
        logger.debug("TaskStore ready capacity=%s", self._max_tasks)

    @property
    def capacity(self) -> int:
        return self._max_tasks

    # ---- queries ----

    def size(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def all(self) -> TaskView:
        return TaskView(self._tasks)

    def get(self, index0: int) -> Task:
        self._check_index(index0)
        return self._tasks[index0]

    # ---- mutations ----

    def add(self, task: Task) -> int:
        """Append a task and return the new size."""
        if len(self._tasks) >= self._max_tasks:
            raise CapacityExceeded(self._max_tasks)
        self._tasks.append(task)
        logger.debug("Added task #%s: %s", len(self._tasks), task)
        return len(self._tasks)

    def mark_done(self, index0: int) -> Task:
        self._check_index(index0)
        task = self._tasks[index0]
        if task.is_done():
            logger.debug("Task #%s already done, leaving as is", index0 + 1)
        task.mark_done()
        return task

    # ---- helpers ----

    def _check_index(self, index0: int) -> None:
        # No negative wrap-around: -1 is out of range, not "last".
        if not 0 <= index0 < len(self._tasks):
            raise IndexOutOfRange(f"no task at index {index0} (size={len(self._tasks)})")
