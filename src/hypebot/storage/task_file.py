# src/hypebot/storage/task_file.py

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from ..core import messages
from ..core.errors import TaskStoreError, TaskStoreMissingError
from ..tasks.tasklist import Tasklist
from .codec import DecodeResult, decode, encode

logger = logging.getLogger(__name__)


class TaskFile:
    """
    Plain-text task store.

    The whole list is rewritten on every save: it is written to a sibling
    ".tmp" file first and then swapped in with os.replace, so a crash mid-write
    leaves either the old or the new file, never a truncated one.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> DecodeResult:
        if not self._path.exists():
            raise TaskStoreMissingError(messages.ERROR_LOAD_TASKLIST)
        try:
            # Undecodable bytes survive as surrogates; decode_record skips those lines only.
            text = self._path.read_text("utf-8", errors="surrogateescape")
        except OSError as e:
            logger.exception("Failed to read tasks from %s", self._path)
            raise TaskStoreError(messages.ERROR_READ_TASKLIST) from e

        result = decode(text)
        logger.info(
            "Loaded tasks: %d from %s (skipped %d)",
            len(result.tasks),
            self._path,
            len(result.skipped),
        )
        return result

    def save(self, tasks: Tasklist) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(encode(tasks), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskStoreError(messages.ERROR_SAVE_TASKLIST) from e
        logger.debug("Saved tasks: %d to %s", len(tasks), self._path)
