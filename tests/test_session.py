# tests/test_session.py

from __future__ import annotations

from hypebot.core import messages
from hypebot.core.commands import Mark, parse_command
from hypebot.core.errors import ErrorKind
from hypebot.core.executor import execute_command
from hypebot.core.responses import render_text
from hypebot.core.session import handle_line, run_session
from hypebot.core.state import AppState
from hypebot.tasks.task_models import to_display_string

from .conftest import FIXED_NOW
from .fakes import CountingStore, FailingStore, RecordingSink


def _file_lines(state: AppState) -> list[str]:
    return state.settings.tasks_path.read_text("utf-8").splitlines()


def test_todo_is_added_and_persisted(state: AppState) -> None:
    response = handle_line(state, "todo buy milk")

    assert response is not None and response.ok
    assert "buy milk" in response.message
    assert "1 TASKS" in response.message
    assert len(state.tasks) == 1
    assert _file_lines(state) == ["T , 0 , buy milk"]


def test_deadline_is_persisted(state: AppState) -> None:
    response = handle_line(state, "deadline submit report /2099-01-01")

    assert response is not None and response.ok
    assert _file_lines(state) == ["D , 0 , submit report , 2099-01-01"]


def test_bad_deadline_date_changes_nothing(state: AppState) -> None:
    response = handle_line(state, "deadline submit report /01-2099")

    assert response is not None
    assert response.error is ErrorKind.FORMAT
    assert "yyyy-MM-dd" in response.message
    assert len(state.tasks) == 0
    assert not state.settings.tasks_path.exists()


def test_delete_shifts_and_persists(state: AppState) -> None:
    for line in ("todo a", "todo b", "delete 1"):
        response = handle_line(state, line)
        assert response is not None and response.ok

    assert [t.name for t in state.tasks] == ["b"]
    assert _file_lines(state) == ["T , 0 , b"]


def test_mark_out_of_range_is_index_error(state: AppState) -> None:
    handle_line(state, "todo a")
    handle_line(state, "todo b")
    before = state.settings.tasks_path.read_text("utf-8")

    response = handle_line(state, "mark 5")

    assert response is not None
    assert response.error is ErrorKind.INDEX
    assert "existing task" in response.message
    assert not any(t.is_complete for t in state.tasks)
    assert state.settings.tasks_path.read_text("utf-8") == before


def test_mark_and_unmark_persist(state: AppState) -> None:
    handle_line(state, "todo a")
    handle_line(state, "mark 1")
    assert _file_lines(state) == ["T , 1 , a"]

    handle_line(state, "unmark 1")
    assert _file_lines(state) == ["T , 0 , a"]


def test_happening_lists_only_matching_tasks(state: AppState) -> None:
    handle_line(state, "deadline submit report /2099-01-01")
    handle_line(state, "event conference /2099-02-01 09:00 /2099-02-03 17:00")

    response = handle_line(state, "happening /2099-01-01")

    assert response is not None and response.ok
    assert "1. [D][ ] submit report (by: Jan 1 2099)" in response.message
    assert "conference" not in response.message


def test_find_and_list(state: AppState) -> None:
    handle_line(state, "todo Buy milk")
    handle_line(state, "todo walk dog")

    found = handle_line(state, "find MILK")
    assert found is not None
    assert "1. [T][ ] Buy milk" in found.message
    assert "walk dog" not in found.message

    listing = handle_line(state, "list")
    assert listing is not None
    assert listing.message.splitlines()[1:] == ["1. [T][ ] Buy milk", "2. [T][ ] walk dog"]


def test_event_past_check_uses_state_clock(state: AppState) -> None:
    day = FIXED_NOW.strftime("%Y-%m-%d")
    response = handle_line(state, f"event standup /{day} 09:00 /{day} 09:15")

    assert response is not None
    assert response.error is ErrorKind.VALIDATION
    assert len(state.tasks) == 0


def test_unrecognized_and_blank_lines(state: AppState) -> None:
    assert handle_line(state, "   ") is None

    response = handle_line(state, "dance now")
    assert response is not None
    assert response.error is ErrorKind.UNRECOGNIZED
    assert "'dance'" in response.message
    assert render_text(response).startswith("I might be tripping")


def test_store_failure_is_a_warning_not_a_crash(settings) -> None:
    store = FailingStore()
    state = AppState(settings=settings, store=store, clock=lambda: FIXED_NOW)

    response = handle_line(state, "todo a")

    assert response is not None and response.ok
    assert response.warning is not None
    assert len(state.tasks) == 1
    assert store.save_attempts == 1


def test_execute_converts_index_errors_at_the_boundary(state: AppState) -> None:
    response = execute_command(state, Mark(index=0))
    assert response.error is ErrorKind.INDEX


def test_parse_failure_passes_through_executor(state: AppState) -> None:
    response = execute_command(state, parse_command("mark x"))
    assert response.error is ErrorKind.VALIDATION


def test_run_session_stops_at_bye_and_flushes_again(settings) -> None:
    store = CountingStore()
    state = AppState(settings=settings, store=store, clock=lambda: FIXED_NOW)
    sink = RecordingSink()

    exited = run_session(state, ["todo a", "", "list", "bye", "todo never"], sink)

    assert exited is True
    assert len(sink.responses) == 3
    assert sink.last.exit
    assert [t.name for t in state.tasks] == ["a"]
    # One flush for the add, one more on exit.
    assert store.saves == ["T , 0 , a\n", "T , 0 , a\n"]


def test_run_session_end_of_input_still_flushes(settings) -> None:
    store = CountingStore()
    state = AppState(settings=settings, store=store, clock=lambda: FIXED_NOW)
    sink = RecordingSink()

    exited = run_session(state, ["list"], sink)

    assert exited is False
    assert store.saves == [""]
    assert len(sink.responses) == 1


def test_run_session_reports_failed_final_flush(settings) -> None:
    state = AppState(settings=settings, store=FailingStore(), clock=lambda: FIXED_NOW)
    sink = RecordingSink()

    run_session(state, ["bye"], sink)

    assert sink.last.exit
    assert sink.last.warning is not None


def test_added_response_shows_display_string(state: AppState) -> None:
    response = handle_line(state, "deadline return book /2099-03-04")
    assert response is not None
    assert to_display_string(state.tasks.get(0)) in response.message


def test_bye_says_tasks_are_being_saved(state: AppState) -> None:
    response = handle_line(state, "bye")

    assert response is not None and response.exit
    assert response.message.startswith(messages.MESSAGE_SAVING)
    assert response.message.endswith(messages.MESSAGE_BYE)
