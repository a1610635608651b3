"""Command-driven personal task manager (todos, deadlines, events)."""

__version__ = "0.1.0"
