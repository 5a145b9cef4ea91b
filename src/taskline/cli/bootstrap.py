# src/taskline/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes settings (injectable for
tests) and wires a fresh TaskStore into a SessionState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import SessionState
from ..tasks.task_store import DEFAULT_MAX_TASKS, TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> SessionState:
    """
    Create SessionState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    max_tasks = int(getattr(settings, "max_tasks", DEFAULT_MAX_TASKS))
    state = SessionState(settings=settings, task_store=TaskStore(max_tasks=max_tasks))
    logger.debug("Session created (capacity=%s).", max_tasks)
    return state
