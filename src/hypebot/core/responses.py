# src/hypebot/core/responses.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..tasks.task_models import Task, to_display_string
from . import messages
from .errors import ErrorKind, HypeBotError


@dataclass(frozen=True, slots=True)
class Response:
    """
    Result of one executed command, handed to the UI.

    `error` is None on success. `warning` carries a non-fatal note (e.g. the
    change could not be persisted) attached to an otherwise successful reply.
    """

    message: str
    error: ErrorKind | None = None
    warning: str | None = None
    exit: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: HypeBotError) -> Response:
        return cls(message=error.message, error=error.kind)

    def with_warning(self, warning: str) -> Response:
        return Response(message=self.message, error=self.error, warning=warning, exit=self.exit)


def numbered(tasks: Iterable[Task]) -> list[str]:
    return [f"{i}. {to_display_string(t)}" for i, t in enumerate(tasks, start=1)]


def render_text(response: Response) -> str:
    """Plain-text rendering shared by the console connector and tests."""
    lines: list[str] = []
    if not response.ok:
        lines.append(messages.ERROR_PREFIX)
    lines.append(response.message)
    if response.warning:
        lines.append(messages.ERROR_PREFIX + response.warning)
    return "\n".join(lines)
