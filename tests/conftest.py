# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from taskline.core.state import SessionState
from taskline.tasks.task_store import TaskStore


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with SessionState and the console connector.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment / .env.
    """
    return SimpleNamespace(
        app_name="Duke",
        log_level="WARNING",
        log_to_file=False,
        max_tasks=100,
        border_width=60,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> SessionState:
    return SessionState(settings=settings, task_store=TaskStore(max_tasks=settings.max_tasks))


@pytest.fixture()
def small_state(settings: SimpleNamespace) -> SessionState:
    """Session whose store only holds two tasks."""
    return SessionState(settings=settings, task_store=TaskStore(max_tasks=2))
