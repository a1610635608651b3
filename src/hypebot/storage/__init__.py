from .codec import DecodeResult, SkippedRecord, decode, decode_record, encode
from .task_file import TaskFile

__all__ = [
    "DecodeResult",
    "SkippedRecord",
    "TaskFile",
    "decode",
    "decode_record",
    "encode",
]
