# tests/test_storage.py

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import pytest

from hypebot.core.errors import TaskStoreError, TaskStoreMissingError
from hypebot.storage.codec import decode, encode
from hypebot.storage.task_file import TaskFile
from hypebot.tasks.task_models import Deadline, Event, ToDo, to_display_string
from hypebot.tasks.tasklist import Tasklist


def _sample() -> Tasklist:
    done = ToDo(name="buy milk")
    done.mark()
    return Tasklist(
        [
            done,
            Deadline(name="submit report", due_date=date(2099, 1, 1)),
            Event(
                name="party",
                start_time=datetime(2099, 1, 1, 18, 0),
                end_time=datetime(2099, 1, 2, 2, 30),
            ),
        ]
    )


def test_encode_writes_one_record_per_line() -> None:
    assert encode(_sample()) == (
        "T , 1 , buy milk\n"
        "D , 0 , submit report , 2099-01-01\n"
        "E , 0 , party , 2099-01-01 18:00 , 2099-01-02 02:30\n"
    )
    assert encode(Tasklist()) == ""


def test_decode_restores_every_variant() -> None:
    original = _sample()
    result = decode(encode(original))

    assert result.skipped == []
    assert result.tasks.tasks() == original.tasks()
    assert [to_display_string(t) for t in result.tasks] == [
        to_display_string(t) for t in original
    ]


def test_decode_skips_bad_records_and_keeps_the_rest() -> None:
    text = (
        "T , 0 , first\n"
        "D , 0 , bad date , 01-2099\n"
        "X , 0 , unknown type\n"
        "E , 0 , short event , 2099-01-01 10:00\n"
        "T , 2 , weird flag\n"
        "\n"
        "E , 1 , backwards , 2099-01-02 10:00 , 2099-01-01 10:00\n"
        "T , 1 , last\n"
    )
    result = decode(text)

    assert [t.name for t in result.tasks] == ["first", "last"]
    assert result.tasks.get(1).is_complete
    assert [s.line_no for s in result.skipped] == [2, 3, 4, 5, 7]
    assert all(s.reason for s in result.skipped)


def test_decode_keeps_events_that_already_ended() -> None:
    result = decode("E , 0 , old party , 2001-01-01 18:00 , 2001-01-01 23:00\n")
    assert result.skipped == []
    assert result.tasks.get(0).name == "old party"


def test_task_file_save_overwrites_and_load_reads_back(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "tasklist.txt"
    store = TaskFile(path)

    store.save(_sample())
    store.save(Tasklist([ToDo(name="only one")]))

    assert path.read_text("utf-8") == "T , 0 , only one\n"
    assert not path.with_suffix(".txt.tmp").exists()
    loaded = store.load()
    assert [t.name for t in loaded.tasks] == ["only one"]


def test_task_file_missing_is_reported(tmp_path: Path) -> None:
    store = TaskFile(tmp_path / "nope.txt")
    assert not store.exists()
    with pytest.raises(TaskStoreMissingError):
        store.load()


def test_task_file_unwritable_raises_store_error(tmp_path: Path) -> None:
    # The parent "directory" is a regular file, so nothing can be written below it.
    blocker = tmp_path / "blocker"
    blocker.write_text("x", "utf-8")
    store = TaskFile(blocker / "tasklist.txt")

    with pytest.raises(TaskStoreError):
        store.save(Tasklist([ToDo(name="a")]))


def test_completed_deadline_and_event_keep_their_flag() -> None:
    deadline = Deadline(name="file taxes", due_date=date(2099, 4, 15))
    deadline.mark()
    event = Event(
        name="gig",
        start_time=datetime(2099, 5, 1, 20, 0),
        end_time=datetime(2099, 5, 1, 23, 0),
    )
    event.mark()
    text = encode(Tasklist([deadline, event]))

    assert text == (
        "D , 1 , file taxes , 2099-04-15\n"
        "E , 1 , gig , 2099-05-01 20:00 , 2099-05-01 23:00\n"
    )
    result = decode(text)
    assert result.skipped == []
    assert result.tasks.tasks() == [deadline, event]
    assert all(t.is_complete for t in result.tasks)


def test_task_file_skips_only_lines_with_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "tasklist.txt"
    path.write_bytes(b"T , 0 , keep one\nT , 0 , caf\xe9 latte\nT , 1 , keep two\n")

    result = TaskFile(path).load()

    assert [t.name for t in result.tasks] == ["keep one", "keep two"]
    assert result.tasks.get(1).is_complete
    assert [s.line_no for s in result.skipped] == [2]


def test_task_file_failed_replace_removes_tmp_file(tmp_path: Path) -> None:
    # A directory sits where the list should go, so the final rename fails.
    path = tmp_path / "tasklist.txt"
    path.mkdir()
    store = TaskFile(path)

    with pytest.raises(TaskStoreError):
        store.save(Tasklist([ToDo(name="a")]))

    assert path.is_dir()
    assert not (tmp_path / "tasklist.txt.tmp").exists()
