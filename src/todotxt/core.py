"""Task-line parsing and input helpers (pure functions, no I/O)."""

import datetime
import logging
import re
from typing import List, Optional

from .models import CONTEXT_PREFIX, PROJECT_PREFIX, Task

logger = logging.getLogger(__name__)

# One left-to-right pass, non-overlapping, like a string replacer table.
_SQUEEZE_RE = re.compile(r"  |[\n\t\r]")


def parse_task(line: str, sequence: int) -> Task:
    """Parse one stripped, non-blank line into a Task.

    Tags are copied out of the line; the text itself is left untouched.
    """
    contexts: List[str] = []
    projects: List[str] = []
    for token in line.split():
        if token.startswith(CONTEXT_PREFIX):
            contexts.append(token)
        if token.startswith(PROJECT_PREFIX):
            projects.append(token)
    return Task(
        sequence=sequence,
        raw=line,
        text=line.strip(),
        contexts=contexts,
        projects=projects,
    )


def parse_all(text: str, comment: Optional[str] = None) -> List[Task]:
    """Parse the contents of a todo.txt file into an ordered list of tasks.

    Lines end at ``\\n`` only, so form feeds or Unicode line separators stay
    inside a task. Blank lines (and lines starting with ``comment``, when
    given) are skipped and do not consume a sequence number, so sequences
    always run 1..len().
    """
    tasks: List[Task] = []
    # Only "\n" ends a line; a trailing "\r" goes with the strip below.
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            continue
        if comment and line.startswith(comment):
            continue
        tasks.append(parse_task(line, len(tasks) + 1))
    logger.debug("parsed %d tasks", len(tasks))
    return tasks


def sanitize_input(text: str) -> str:
    """Normalise a task typed by the user.

    Strips surrounding whitespace and one pair of surrounding quotes, then
    collapses double spaces and embedded line breaks or tabs.
    """
    text = text.strip()
    if not text:
        return text
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return _SQUEEZE_RE.sub(" ", text)


def date_prefix(text: str, today: Optional[datetime.date] = None) -> str:
    """Prefix ``text`` with today's date as ``YYYY-MM-DD ``."""
    today = today or datetime.date.today()
    return f"{today.strftime('%Y-%m-%d')} {text}"


def format_sequence(sequence: int, total: int) -> str:
    """Zero-pad ``sequence`` to the number of digits in ``total``."""
    return str(sequence).zfill(len(str(total)))
