# src/hypebot/core/session.py

"""
Per-line state machine: read -> parse -> execute -> render -> persist.

One line is handled completely before the next one is read. The session ends
on `bye` or when the input runs out; either way the tasklist is flushed one
last time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .commands import parse_command
from .errors import ErrorKind
from .executor import execute_command, flush
from .ports import ResponseSink
from .responses import Response
from .state import AppState

logger = logging.getLogger(__name__)


def handle_line(state: AppState, line: str) -> Response | None:
    """Return None for blank lines ("no command, ask again")."""
    line = line.rstrip("\r\n")
    if not line.strip():
        return None
    command = parse_command(line, now=state.now())
    return execute_command(state, command)


def close_session(state: AppState, response: Response | None = None) -> Response | None:
    """
    Final flush. Attaches a failure to `response` when given, otherwise
    returns a standalone persistence error (or None when the save worked).
    """
    warning = flush(state)
    if warning is None:
        logger.info("Session closed, %d task(s) saved.", len(state.tasks))
        return response
    if response is not None:
        return response.with_warning(warning)
    return Response(message=warning, error=ErrorKind.PERSISTENCE)


def run_session(state: AppState, lines: Iterable[str], sink: ResponseSink) -> bool:
    """
    Drive the session over `lines`, sending each Response to `sink`.

    Returns True when the user exited with `bye`, False when input ran out.
    """
    for line in lines:
        response = handle_line(state, line)
        if response is None:
            continue
        if response.exit:
            final = close_session(state, response)
            if final is not None:
                sink(final)
            return True
        sink(response)

    logger.info("Input exhausted without exit command.")
    final = close_session(state)
    if final is not None:
        sink(final)
    return False
