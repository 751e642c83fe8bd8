"""todotxt - a small utility for managing todo.txt files."""

__version__ = "1.0.1"

from .models import Task, Settings, InitReport, SETTINGS_KEYS, DEFAULT_SETTINGS
from .errors import (
    TodoError,
    ConfigError,
    MissingDirectoryError,
    PermissionDeniedError,
    TaskFileError,
    UsageError,
)
from .core import parse_all, parse_task, sanitize_input, format_sequence
from .storage import read_tasks, append_task, count_tasks, init_structure
from .settings import resolve

__all__ = [
    "Task",
    "Settings",
    "InitReport",
    "SETTINGS_KEYS",
    "DEFAULT_SETTINGS",
    "TodoError",
    "ConfigError",
    "MissingDirectoryError",
    "PermissionDeniedError",
    "TaskFileError",
    "UsageError",
    "parse_all",
    "parse_task",
    "sanitize_input",
    "format_sequence",
    "read_tasks",
    "append_task",
    "count_tasks",
    "init_structure",
    "resolve",
]
