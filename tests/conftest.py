# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from hypebot.core.state import AppState
from hypebot.storage.task_file import TaskFile
from hypebot.tasks.tasklist import Tasklist

# Fixed "now" for event validation; well before the 2099 dates used in tests.
FIXED_NOW = datetime(2030, 6, 15, 12, 0)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="hypebot-test",
        log_level="DEBUG",
        log_file_enabled=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasklist.txt",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskFile:
    return TaskFile(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskFile) -> AppState:
    """AppState backed by a real TaskFile in tmp_path and a frozen clock."""
    return AppState(
        settings=settings,
        store=store,
        tasks=Tasklist(),
        clock=lambda: FIXED_NOW,
    )
