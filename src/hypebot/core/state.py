# src/hypebot/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..tasks.tasklist import Tasklist
from .ports import Clock, TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Any

    store: TaskStore
    tasks: Tasklist = field(default_factory=Tasklist)

    # Injectable so event validation can be tested against a fixed "now".
    clock: Clock = datetime.now

    def now(self) -> datetime:
        return self.clock()
