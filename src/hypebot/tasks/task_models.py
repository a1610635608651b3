# src/hypebot/tasks/task_models.py

"""
Task variants and their behaviours.

The variant set is closed: a Task is exactly one of ToDo, Deadline or Event.
Behaviours that differ per variant live in module-level functions that
`match` over the union, so adding a variant makes every missing branch fail
loudly through `assert_never`.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import TypeAlias, assert_never

from ..core import messages
from ..core.errors import TaskFormatError, TaskValidationError

DATE_FORMAT = "%Y-%m-%d"
DATE_TIME_FORMAT = "%Y-%m-%d %H:%M"

# strptime alone tolerates unpadded fields ("2099-1-1"); the record format does not.
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_DATE_TIME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}")

RECORD_DELIMITER = " , "


class TaskKind(StrEnum):
    """Record discriminator of each variant."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_record(cls, raw: str) -> TaskKind | None:
        try:
            return cls(raw)
        except ValueError:
            return None


class _Completable:
    __slots__ = ()

    is_complete: bool

    def mark(self) -> None:
        self.is_complete = True

    def unmark(self) -> None:
        self.is_complete = False


@dataclass(slots=True)
class ToDo(_Completable):
    name: str
    is_complete: bool = False


@dataclass(slots=True)
class Deadline(_Completable):
    name: str
    due_date: date
    is_complete: bool = False


@dataclass(slots=True)
class Event(_Completable):
    name: str
    start_time: datetime
    end_time: datetime
    is_complete: bool = False


Task: TypeAlias = ToDo | Deadline | Event


# ---- parsing helpers ----


def parse_date(raw: str, *, message: str = messages.ERROR_DEADLINE_WRONG_FORMAT) -> date:
    """Parse a strict yyyy-MM-dd calendar date."""
    if not _DATE_RE.fullmatch(raw):
        raise TaskFormatError(message, value=raw, pattern=messages.DATE_PATTERN)
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        raise TaskFormatError(message, value=raw, pattern=messages.DATE_PATTERN) from None


def parse_date_time(
    raw: str, *, message: str = messages.ERROR_EVENT_TIME_WRONG_FORMAT
) -> datetime:
    """Parse a strict yyyy-MM-dd HH:mm date-time."""
    if not _DATE_TIME_RE.fullmatch(raw):
        raise TaskFormatError(message, value=raw, pattern=messages.DATE_TIME_PATTERN)
    try:
        return datetime.strptime(raw, DATE_TIME_FORMAT)
    except ValueError:
        raise TaskFormatError(message, value=raw, pattern=messages.DATE_TIME_PATTERN) from None


def clean_name(raw: str) -> str:
    name = raw.strip()
    if not name:
        raise TaskValidationError(messages.ERROR_EMPTY_NAME)
    # Padded so a leading ", " or trailing " ," cannot merge with a neighbouring field.
    if RECORD_DELIMITER in f" {name} ":
        raise TaskValidationError(messages.ERROR_NAME_HAS_DELIMITER)
    return name


def validate_event_span(
    start: datetime,
    end: datetime,
    *,
    now: datetime | None = None,
    allow_past: bool = False,
) -> None:
    """
    Check an event span.

    start must be strictly before end. Unless allow_past is set, the span must
    not lie entirely before `now` (defaults to the current local time).
    """
    if not start < end:
        raise TaskValidationError(messages.ERROR_EVENT_TIMES_INORDERED)
    if allow_past:
        return
    if now is None:
        now = datetime.now()
    if start < now and end < now:
        raise TaskValidationError(messages.ERROR_EVENT_TIME_PASSED)


# ---- constructors ----


def make_todo(name: str) -> ToDo:
    return ToDo(name=clean_name(name))


def make_deadline(name: str, due: str | date) -> Deadline:
    clean = clean_name(name)
    due_date = parse_date(due) if isinstance(due, str) else due
    return Deadline(name=clean, due_date=due_date)


def make_event(
    name: str,
    start: str | datetime,
    end: str | datetime,
    *,
    now: datetime | None = None,
    allow_past: bool = False,
) -> Event:
    """
    Build an Event from raw strings or parsed datetimes.

    allow_past is used when restoring persisted events, which may have ended
    since they were saved.
    """
    clean = clean_name(name)
    start_time = parse_date_time(start) if isinstance(start, str) else start
    end_time = parse_date_time(end) if isinstance(end, str) else end
    validate_event_span(start_time, end_time, now=now, allow_past=allow_past)
    return Event(name=clean, start_time=start_time, end_time=end_time)


# ---- behaviours ----


def task_kind(task: Task) -> TaskKind:
    match task:
        case ToDo():
            return TaskKind.TODO
        case Deadline():
            return TaskKind.DEADLINE
        case Event():
            return TaskKind.EVENT
        case _:
            assert_never(task)


def is_happening_on(task: Task, day: date) -> bool:
    """Deadlines match their due date; events match every calendar day they touch."""
    match task:
        case ToDo():
            return False
        case Deadline(due_date=due_date):
            return due_date == day
        case Event(start_time=start_time, end_time=end_time):
            return start_time.date() <= day <= end_time.date()
        case _:
            assert_never(task)


def human_date(d: date) -> str:
    return f"{d:%b} {d.day} {d.year}"


def _human_date_time(dt: datetime) -> str:
    return f"{human_date(dt)} {dt:%H:%M}"


def to_display_string(task: Task) -> str:
    box = "[X]" if task.is_complete else "[ ]"
    prefix = f"[{task_kind(task).value}]{box} {task.name}"
    match task:
        case ToDo():
            return prefix
        case Deadline(due_date=due_date):
            return f"{prefix} (by: {human_date(due_date)})"
        case Event(start_time=start_time, end_time=end_time):
            return f"{prefix} (from: {_human_date_time(start_time)} to: {_human_date_time(end_time)})"
        case _:
            assert_never(task)


def to_record_string(task: Task) -> str:
    fields = [task_kind(task).value, "1" if task.is_complete else "0", task.name]
    match task:
        case ToDo():
            pass
        case Deadline(due_date=due_date):
            fields.append(due_date.strftime(DATE_FORMAT))
        case Event(start_time=start_time, end_time=end_time):
            fields.append(start_time.strftime(DATE_TIME_FORMAT))
            fields.append(end_time.strftime(DATE_TIME_FORMAT))
        case _:
            assert_never(task)
    return RECORD_DELIMITER.join(fields)


def copy_task(task: Task) -> Task:
    return dataclasses.replace(task)
