"""Error types raised by todotxt.

Library code raises these; only the CLI entry point turns them into an exit
status and a message on stderr.
"""


class TodoError(RuntimeError):
    """Base class for every fatal todotxt error."""


class ConfigError(TodoError):
    """Raised when configuration is missing, unreadable or malformed."""


class MissingDirectoryError(TodoError):
    """Raised when a required directory is missing or is not a directory."""


class PermissionDeniedError(TodoError):
    """Raised when a task file or directory has the wrong permission bits."""


class TaskFileError(TodoError):
    """Raised for any other I/O failure on a task file."""


class UsageError(TodoError):
    """Raised when a command is invoked with missing or empty input."""
