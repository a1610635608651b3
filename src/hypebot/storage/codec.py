# src/hypebot/storage/codec.py

"""
Line-oriented record codec for a Tasklist.

One record per line, fields separated by " , ":
  T , <0|1> , <name>
  D , <0|1> , <name> , <yyyy-MM-dd>
  E , <0|1> , <name> , <yyyy-MM-dd HH:mm> , <yyyy-MM-dd HH:mm>

Decoding is lenient per record: a bad line is skipped and reported, the rest
of the file still loads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..core.errors import HypeBotError, TaskValidationError
from ..tasks.task_models import (
    RECORD_DELIMITER,
    Task,
    TaskKind,
    make_deadline,
    make_event,
    make_todo,
    to_record_string,
)
from ..tasks.tasklist import Tasklist

logger = logging.getLogger(__name__)

_FIELD_COUNTS: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


@dataclass(frozen=True, slots=True)
class SkippedRecord:
    line_no: int  # 1-based
    line: str
    reason: str


@dataclass(slots=True)
class DecodeResult:
    tasks: Tasklist
    skipped: list[SkippedRecord] = field(default_factory=list)


def encode(tasks: Tasklist) -> str:
    return "".join(to_record_string(t) + "\n" for t in tasks)


def decode_record(line: str) -> Task:
    """Parse a single record; raises a HypeBotError subclass when malformed."""
    try:
        line.encode("utf-8")
    except UnicodeEncodeError:
        raise TaskValidationError("record is not valid UTF-8") from None

    fields = line.split(RECORD_DELIMITER)
    kind = TaskKind.from_record(fields[0])
    if kind is None:
        raise TaskValidationError(f"unknown task type {fields[0]!r}")

    expected = _FIELD_COUNTS[kind]
    if len(fields) != expected:
        raise TaskValidationError(f"expected {expected} fields for {kind.value}, got {len(fields)}")

    flag = fields[1]
    if flag not in ("0", "1"):
        raise TaskValidationError(f"completion flag must be 0 or 1, got {flag!r}")

    task: Task
    match kind:
        case TaskKind.TODO:
            task = make_todo(fields[2])
        case TaskKind.DEADLINE:
            task = make_deadline(fields[2], fields[3])
        case TaskKind.EVENT:
            # Persisted events may have ended since they were saved.
            task = make_event(fields[2], fields[3], fields[4], allow_past=True)

    if flag == "1":
        task.mark()
    return task


def decode(text: str) -> DecodeResult:
    result = DecodeResult(tasks=Tasklist())
    for line_no, raw in enumerate(text.splitlines(), start=1):
        if not raw.strip():
            continue
        try:
            task = decode_record(raw)
        except HypeBotError as e:
            logger.warning("Skipping task record line=%d: %s (%r)", line_no, e.message, raw)
            result.skipped.append(SkippedRecord(line_no=line_no, line=raw, reason=e.message))
            continue
        result.tasks.add(task)
    return result
