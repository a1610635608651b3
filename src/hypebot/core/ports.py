# src/hypebot/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the store and the UI swappable and makes testing easier.
"""

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..storage.codec import DecodeResult
    from ..tasks.tasklist import Tasklist
    from .responses import Response

Clock = Callable[[], datetime]

# UI side: receives one Response per executed command.
ResponseSink = Callable[["Response"], None]


class TaskStore(Protocol):
    """Whole-list persistence: read everything, overwrite everything."""

    def exists(self) -> bool: ...
    def load(self) -> DecodeResult: ...
    def save(self, tasks: Tasklist) -> None: ...
