"""File I/O for todo.txt task files."""

import logging
import os
from typing import List

from .core import parse_all
from .errors import (
    MissingDirectoryError,
    PermissionDeniedError,
    TaskFileError,
)
from .models import InitReport, Task

logger = logging.getLogger(__name__)

CFG_TEMPLATE = """
# === FILE LOCATIONS ===

# Your todo.txt directory
#export TODO_DIR="$HOME/todo"
export TODO_DIR="."

# Your todo/done/report.txt locations
export TODO_FILE="$TODO_DIR/todo.txt"
export DONE_FILE="$TODO_DIR/done.txt"
export REPORT_FILE="$TODO_DIR/report.txt"

# You can customize your actions directory location
#export TODO_ACTIONS_DIR="$HOME/.todo.actions.d"

# === APP OPTIONS ===

# is same as option -t (1)/-T (0)
export TODOTXT_DATE_ON_ADD=0

# is same as option -f
export TODOTXT_FORCE=0
"""

# File name -> initial contents, in creation order.
INIT_FILES = (
    ("todo.cfg", CFG_TEMPLATE),
    ("todo.txt", ""),
    ("done.txt", ""),
    ("report.txt", ""),
)


def _read_text(path: str) -> str:
    # Undecodable bytes become U+FFFD so a stray Latin-1 line still lists.
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def read_tasks(path: str) -> List[Task]:
    """Load and parse a todo.txt file."""
    try:
        text = _read_text(path)
    except FileNotFoundError:
        raise TaskFileError(
            f"{path} doesn't exist.\n"
            "Please create it with: `todo init` or fix TODO_FILE in your todo.cfg file."
        ) from None
    except PermissionError:
        raise PermissionDeniedError(
            f"{path} doesn't have correct permission bits.\n"
            "Please fix the file permissions."
        ) from None
    except OSError as e:
        raise TaskFileError(f"Cannot read {path}: {e}") from e
    return parse_all(text)


def check_directory(directory: str) -> None:
    """Fail unless ``directory`` exists and is a directory."""
    if not os.path.exists(directory):
        raise MissingDirectoryError(
            f"DIR:{directory} doesn't exist.\n"
            f"Please create the missing directory with: `mkdir -p {directory}`."
        )
    if not os.path.isdir(directory):
        raise MissingDirectoryError(
            f"DIR:{directory} is not a directory.\n"
            "Please fix your todo.cfg file and be sure to specify a directory "
            "with an absolute path."
        )


def count_tasks(path: str) -> int:
    """Count the tasks in a file the way ``list`` numbers them.

    Returns 0 if the file doesn't exist yet.
    """
    if not os.path.exists(path):
        return 0
    return len(parse_all(_read_text(path)))


def append_task(path: str, text: str) -> int:
    """Append one task line to ``path``, creating the file if needed.

    The parent directory is never created. Returns the display number of the
    new task, which is not stored anywhere.
    """
    directory = os.path.dirname(path) or "."
    check_directory(directory)

    try:
        number = count_tasks(path) + 1
        with open(path, "a", encoding="utf-8") as f:
            f.write(text + "\n")
            f.flush()
    except PermissionError:
        raise PermissionDeniedError(
            f"{path} or {directory} don't have correct permission bits.\n"
            "Please fix the directory / file permissions."
        ) from None
    except OSError as e:
        raise TaskFileError(f"Cannot write {path}: {e}") from e

    logger.debug("appended task %d to %s", number, path)
    return number


def init_structure(destination: str) -> InitReport:
    """Create the todo.txt file set in ``destination`` without clobbering."""
    destination = os.path.abspath(destination)
    check_directory(destination)

    reinitialized = any(
        os.path.exists(os.path.join(destination, name)) for name, _ in INIT_FILES
    )
    report = InitReport(destination=destination, reinitialized=reinitialized)

    for name, content in INIT_FILES:
        path = os.path.join(destination, name)
        data = content.encode("utf-8")
        try:
            with open(path, "xb") as f:
                f.write(data)
        except FileExistsError:
            report.entries.append((name, "exists", None))
            continue
        except PermissionError:
            raise PermissionDeniedError(
                f"Cannot create {path}: permission denied.\n"
                f"Please fix the permissions of {destination}."
            ) from None
        except OSError as e:
            raise TaskFileError(f"Cannot create {path}: {e}") from e
        logger.debug("created %s", path)
        report.entries.append((name, "new", len(data)))

    return report
