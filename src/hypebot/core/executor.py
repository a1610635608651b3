# src/hypebot/core/executor.py

from __future__ import annotations

import logging
from typing import assert_never

from ..tasks.task_models import (
    human_date,
    make_deadline,
    make_event,
    make_todo,
    to_display_string,
)
from ..tasks.tasklist import Tasklist
from . import messages
from .commands import (
    AddDeadline,
    AddEvent,
    AddToDo,
    Command,
    Delete,
    Exit,
    FindByDate,
    FindByKeyword,
    ListAll,
    Mark,
    ParseFailure,
    Unmark,
    Unrecognized,
)
from .errors import ErrorKind, HypeBotError, TaskStoreError
from .responses import Response, numbered
from .state import AppState

logger = logging.getLogger(__name__)


def flush(state: AppState) -> str | None:
    """
    Write the whole tasklist to the store.

    Returns a warning message on failure instead of raising: the in-memory
    list stays authoritative for the rest of the session.
    """
    try:
        state.store.save(state.tasks)
    except TaskStoreError as e:
        logger.warning("Tasks not persisted: %s", e.message)
        return e.message
    return None


def _listing(header: str, empty: str, tasks: Tasklist) -> Response:
    if not len(tasks):
        return Response(message=empty)
    return Response(message="\n".join([header, *numbered(tasks)]))


def _added(state: AppState, count: int) -> Response:
    task = state.tasks.get(count - 1)
    return Response(
        message=messages.MESSAGE_ADDED.format(task=to_display_string(task), count=count)
    )


def _run(state: AppState, command: Command) -> tuple[Response, bool]:
    """Execute one command. Returns (response, needs_flush)."""
    match command:
        case Exit():
            msg = f"{messages.MESSAGE_SAVING}\n{messages.MESSAGE_BYE}"
            return Response(message=msg, exit=True), False

        case ListAll():
            return _listing(messages.MESSAGE_LIST, messages.MESSAGE_LIST_EMPTY, state.tasks), False

        case AddToDo(name=name):
            return _added(state, state.tasks.add(make_todo(name))), True

        case AddDeadline(name=name, due_date=due_date):
            return _added(state, state.tasks.add(make_deadline(name, due_date))), True

        case AddEvent(name=name, start=start, end=end):
            event = make_event(name, start, end, now=state.now())
            return _added(state, state.tasks.add(event)), True

        case Mark(index=index):
            task = state.tasks.mark(index)
            return Response(message=messages.MESSAGE_MARKED.format(task=to_display_string(task))), True

        case Unmark(index=index):
            task = state.tasks.unmark(index)
            return Response(message=messages.MESSAGE_UNMARKED.format(task=to_display_string(task))), True

        case Delete(index=index):
            removed = state.tasks.delete(index)
            msg = messages.MESSAGE_DELETED.format(
                task=to_display_string(removed), count=len(state.tasks)
            )
            return Response(message=msg), True

        case FindByDate(day=day):
            human_day = human_date(day)
            return (
                _listing(
                    messages.MESSAGE_HAPPENING.format(day=human_day),
                    messages.MESSAGE_HAPPENING_NONE.format(day=human_day),
                    state.tasks.filter_by_date(day),
                ),
                False,
            )

        case FindByKeyword(query=query):
            return (
                _listing(
                    messages.MESSAGE_FOUND.format(query=query),
                    messages.MESSAGE_FOUND_NONE.format(query=query),
                    state.tasks.filter_by_keyword(query),
                ),
                False,
            )

        case Unrecognized():
            msg = messages.ERROR_UNRECOGNIZED.format(keyword=command.keyword)
            return Response(message=msg, error=ErrorKind.UNRECOGNIZED), False

        case _:
            assert_never(command)


def execute_command(state: AppState, command: Command | ParseFailure) -> Response:
    """
    Run a parsed command against the state and return the UI response.

    Never raises for user-caused problems: parse failures, bad indices and
    store errors all come back as Responses. Successful mutations flush the
    whole list to the store before returning.
    """
    if isinstance(command, ParseFailure):
        return Response.failure(command.error)

    try:
        response, needs_flush = _run(state, command)
    except HypeBotError as e:
        logger.debug("Command %s failed kind=%s: %s", type(command).__name__, e.kind, e.message)
        return Response.failure(e)

    if needs_flush:
        warning = flush(state)
        if warning:
            response = response.with_warning(warning)
    return response
