# src/hypebot/tasks/tasklist.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from datetime import date

from ..core import messages
from ..core.errors import TaskIndexError
from .task_models import Task, copy_task, is_happening_on

logger = logging.getLogger(__name__)


class Tasklist:
    """
    Ordered, owning collection of tasks.

    Indices are 0-based here; the command layer converts from the 1-based
    numbers users see. Negative indices are rejected rather than wrapped.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"Tasklist(size={len(self._tasks)})"

    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def _check_index(self, index: int, action: str) -> None:
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(
                messages.ERROR_INDEX_OUT_OF_RANGE.format(action=action),
                index=index,
                size=len(self._tasks),
            )

    # ---- mutations ----

    def add(self, task: Task) -> int:
        self._tasks.append(task)
        logger.debug("Task added index=%d name=%r", len(self._tasks) - 1, task.name)
        return len(self._tasks)

    def get(self, index: int) -> Task:
        self._check_index(index, "see")
        return self._tasks[index]

    def mark(self, index: int) -> Task:
        self._check_index(index, "mark CONQUERED")
        task = self._tasks[index]
        task.mark()
        return task

    def unmark(self, index: int) -> Task:
        self._check_index(index, "TAKE ON AGAIN")
        task = self._tasks[index]
        task.unmark()
        return task

    def delete(self, index: int) -> Task:
        self._check_index(index, "delete")
        removed = self._tasks.pop(index)
        logger.debug("Task deleted index=%d name=%r", index, removed.name)
        return removed

    # ---- queries ----

    def filter(self, predicate: Callable[[Task], bool]) -> Tasklist:
        """Return a new Tasklist holding copies of the matching tasks, in order."""
        return Tasklist(copy_task(t) for t in self._tasks if predicate(t))

    def filter_by_date(self, day: date) -> Tasklist:
        return self.filter(lambda t: is_happening_on(t, day))

    def filter_by_keyword(self, query: str) -> Tasklist:
        """
        Match tasks whose name contains any whitespace-separated token of `query`
        (case-insensitive, plain substring match).
        """
        tokens = [tok.casefold() for tok in query.split()]
        if not tokens:
            return Tasklist()
        return self.filter(lambda t: any(tok in t.name.casefold() for tok in tokens))
