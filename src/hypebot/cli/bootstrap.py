# src/hypebot/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires the task file store into AppState,
- loads the persisted tasklist (best-effort).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core import messages
from ..core.errors import TaskStoreError, TaskStoreMissingError
from ..core.ports import Clock
from ..core.state import AppState
from ..storage.task_file import TaskFile
from ..tasks.tasklist import Tasklist

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, clock: Clock | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = AppState(settings=settings, store=TaskFile(settings.tasks_path))
    if clock is not None:
        state.clock = clock
    return state


def load_tasks(state: AppState) -> list[str]:
    """
    Replace state.tasks with the persisted list.

    Never raises: a missing or unreadable file leaves an empty list. Returns
    user-facing notices describing anything that went wrong.
    """
    notices: list[str] = []
    try:
        result = state.store.load()
    except TaskStoreMissingError as e:
        logger.info("No saved tasks yet at %s", getattr(state.settings, "tasks_path", "?"))
        state.tasks = Tasklist()
        notices.append(e.message)
        return notices
    except TaskStoreError as e:
        state.tasks = Tasklist()
        notices.append(e.message)
        return notices

    state.tasks = result.tasks
    if result.skipped:
        notices.append(messages.NOTICE_SKIPPED_RECORDS.format(count=len(result.skipped)))
    return notices
