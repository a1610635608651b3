# src/hypebot/core/commands.py

"""
Command values and the line parser.

Parsing is pure: a line becomes exactly one Command (or a ParseFailure)
without touching application state. Execution lives in executor.py.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from typing import TypeAlias

from ..tasks.task_models import clean_name, parse_date, parse_date_time, validate_event_span
from . import messages
from .errors import HypeBotError, TaskValidationError

logger = logging.getLogger(__name__)

ARGUMENT_SEPARATOR = " /"
_INDEX_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class Exit:
    pass


@dataclass(frozen=True, slots=True)
class ListAll:
    pass


@dataclass(frozen=True, slots=True)
class AddToDo:
    name: str


@dataclass(frozen=True, slots=True)
class AddDeadline:
    name: str
    due_date: date


@dataclass(frozen=True, slots=True)
class AddEvent:
    name: str
    start: datetime
    end: datetime


@dataclass(frozen=True, slots=True)
class Mark:
    index: int  # 0-based


@dataclass(frozen=True, slots=True)
class Unmark:
    index: int  # 0-based


@dataclass(frozen=True, slots=True)
class Delete:
    index: int  # 0-based


@dataclass(frozen=True, slots=True)
class FindByDate:
    day: date


@dataclass(frozen=True, slots=True)
class FindByKeyword:
    query: str


@dataclass(frozen=True, slots=True)
class Unrecognized:
    raw_input: str

    @property
    def keyword(self) -> str:
        parts = self.raw_input.split()
        return parts[0] if parts else ""


Command: TypeAlias = (
    Exit
    | ListAll
    | AddToDo
    | AddDeadline
    | AddEvent
    | Mark
    | Unmark
    | Delete
    | FindByDate
    | FindByKeyword
    | Unrecognized
)


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """A recognised keyword whose arguments did not validate."""

    keyword: str
    error: HypeBotError


@dataclass(frozen=True, slots=True)
class ParsedLine:
    keyword: str
    name: str
    args: list[str]


# (name, args, now) -> Command; raises HypeBotError on invalid input.
CommandParser = Callable[[str, list[str], datetime | None], Command]


def tokenize(line: str) -> ParsedLine:
    """
    Split "<keyword> <name...> /<arg> /<arg>" into its parts.

    The name is re-joined with single spaces; each "/" argument is stripped.
    """
    primary, *rest = line.split(ARGUMENT_SEPARATOR)
    words = primary.split()
    keyword = words[0] if words else ""
    name = " ".join(words[1:])
    args = [a.strip() for a in rest]
    return ParsedLine(keyword=keyword, name=name, args=args)


def _require_args(keyword: str, args: list[str], count: int, missing: str, expected: str) -> None:
    if len(args) < count:
        raise TaskValidationError(missing)
    if len(args) > count:
        raise TaskValidationError(
            messages.ERROR_TOO_MANY_ARGUMENTS.format(keyword=keyword, expected=expected)
        )


def _parse_index(name: str, action: str) -> int:
    raw = name.strip()
    if not _INDEX_RE.fullmatch(raw):
        raise TaskValidationError(messages.ERROR_INDEX_NOT_NUMBER.format(action=action))
    number = int(raw)
    if number < 1:
        raise TaskValidationError(messages.ERROR_INDEX_NOT_POSITIVE.format(action=action))
    return number - 1


class CommandRegistry:
    """Keyword -> parser table. Keywords are case-sensitive."""

    def __init__(self) -> None:
        self._parsers: dict[str, CommandParser] = {}

    def register(self, keyword: str, parser: CommandParser) -> None:
        self._parsers[keyword] = parser

    def keywords(self) -> list[str]:
        return list(self._parsers)

    def parse(self, line: str, *, now: datetime | None = None) -> Command | ParseFailure:
        parsed = tokenize(line)
        parser = self._parsers.get(parsed.keyword)
        if parser is None:
            return Unrecognized(raw_input=line)
        try:
            return parser(parsed.name, parsed.args, now)
        except HypeBotError as e:
            logger.debug("Parse failure keyword=%s kind=%s: %s", parsed.keyword, e.kind, e.message)
            return ParseFailure(keyword=parsed.keyword, error=e)


# ---- per-keyword parsers ----


def parse_bye(name: str, args: list[str], now: datetime | None) -> Command:
    return Exit()


def parse_list(name: str, args: list[str], now: datetime | None) -> Command:
    return ListAll()


def parse_todo(name: str, args: list[str], now: datetime | None) -> Command:
    if args:
        raise TaskValidationError(messages.ERROR_TODO_HAS_ARGUMENTS)
    return AddToDo(name=clean_name(name))


def parse_deadline(name: str, args: list[str], now: datetime | None) -> Command:
    _require_args("deadline", args, 1, messages.ERROR_DEADLINE_NO_DATE, "one due date")
    clean = clean_name(name)
    return AddDeadline(name=clean, due_date=parse_date(args[0]))


def parse_event(name: str, args: list[str], now: datetime | None) -> Command:
    _require_args("event", args, 2, messages.ERROR_EVENT_NO_TIMES, "a start time and an end time")
    clean = clean_name(name)
    start = parse_date_time(args[0])
    end = parse_date_time(args[1])
    validate_event_span(start, end, now=now)
    return AddEvent(name=clean, start=start, end=end)


def parse_mark(name: str, args: list[str], now: datetime | None) -> Command:
    return Mark(index=_parse_index(name, "mark CONQUERED"))


def parse_unmark(name: str, args: list[str], now: datetime | None) -> Command:
    return Unmark(index=_parse_index(name, "TAKE ON AGAIN"))


def parse_delete(name: str, args: list[str], now: datetime | None) -> Command:
    return Delete(index=_parse_index(name, "delete"))


def parse_happening(name: str, args: list[str], now: datetime | None) -> Command:
    _require_args("happening", args, 1, messages.ERROR_HAPPENING_NO_DATE, "one search date")
    return FindByDate(day=parse_date(args[0], message=messages.ERROR_SEARCH_DATE_WRONG_FORMAT))


def parse_find(name: str, args: list[str], now: datetime | None) -> Command:
    # Keywords may legitimately contain " /", so put them back together.
    query = ARGUMENT_SEPARATOR.join([name, *args]).strip()
    if not query:
        raise TaskValidationError(messages.ERROR_EMPTY_QUERY)
    return FindByKeyword(query=query)


registry = CommandRegistry()
registry.register("bye", parse_bye)
registry.register("list", parse_list)
registry.register("todo", parse_todo)
registry.register("deadline", parse_deadline)
registry.register("event", parse_event)
registry.register("mark", parse_mark)
registry.register("unmark", parse_unmark)
registry.register("delete", parse_delete)
registry.register("happening", parse_happening)
registry.register("find", parse_find)


def parse_command(line: str, *, now: datetime | None = None) -> Command | ParseFailure:
    return registry.parse(line, now=now)
