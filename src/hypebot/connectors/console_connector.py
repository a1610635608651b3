# src/hypebot/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..core.errors import ErrorKind
from ..core.responses import Response, render_text
from ..core.session import run_session
from ..core.state import AppState

logger = logging.getLogger(__name__)

BUFFER_LINE = "_" * 128


def frame(text: str) -> str:
    return f"{BUFFER_LINE}\n{text}\n{BUFFER_LINE}"


def print_response(response: Response) -> None:
    print(frame(render_text(response)), flush=True)


def _read_lines(prompt: str = "") -> Iterator[str]:
    """Yield console lines until EOF or Ctrl+C."""
    while True:
        try:
            yield input(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            return
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            return


def run_console_loop(state: AppState, notices: list[str] | None = None) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "hypebot"))
    logger.info("Console connector started (tasks=%d).", len(state.tasks))

    print(frame(f"AYO WHAT'S UP IT'S ME YOUR {app_name.upper()}!\nWhat can I do for you, my wonderful homie?"))
    for notice in notices or []:
        print_response(Response(message=notice, error=ErrorKind.PERSISTENCE))

    run_session(state, _read_lines(), print_response)
    logger.info("Console connector finished.")
