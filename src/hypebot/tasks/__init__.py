from .task_models import Deadline, Event, Task, TaskKind, ToDo
from .tasklist import Tasklist

__all__ = [
    "Deadline",
    "Event",
    "Task",
    "TaskKind",
    "Tasklist",
    "ToDo",
]
