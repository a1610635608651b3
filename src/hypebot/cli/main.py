# src/hypebot/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads saved tasks, then runs the
console REPL until `bye` (or EOF).
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, load_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_file_enabled,
    )

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)
    notices = load_tasks(state)

    try:
        run_console_loop(state, notices)
    except Exception:
        logger.exception("Console loop crashed.")
        raise
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
