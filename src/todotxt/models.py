"""Data models and constants for todotxt."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import ConfigError

CONTEXT_PREFIX = "@"
PROJECT_PREFIX = "+"

# Known settings in display order, with their defaults.
DEFAULT_SETTINGS: Dict[str, str] = {
    "TODO_DIR": "",
    "TODO_FILE": "",
    "DONE_FILE": "",
    "REPORT_FILE": "",
    "TODO_ACTIONS_DIR": "",
    "TODOTXT_SORT_COMMAND": "",
    "TODOTXT_FINAL_FILTER": "",
    "TODOTXT_DATE_ON_ADD": "0",
    "TODOTXT_FORCE": "0",
    "TODOTXT_VERBOSE": "0",
}
SETTINGS_KEYS: Tuple[str, ...] = tuple(DEFAULT_SETTINGS)


@dataclass
class Task:
    """A single todo.txt line with its extracted tags."""

    sequence: int
    raw: str
    text: str
    contexts: List[str] = field(default_factory=list)
    projects: List[str] = field(default_factory=list)
    completed: bool = False


@dataclass(frozen=True)
class Settings:
    """Resolved configuration, built once at startup and passed to commands.

    Lookups of unknown names return an empty string.
    """

    values: Mapping[str, str]
    home: str = ""
    pwd: str = ""

    def has(self, name: str) -> bool:
        return name in self.values

    def get(self, name: str) -> str:
        if not name or not self.has(name):
            return ""
        return self.values[name]

    def flag(self, name: str) -> bool:
        """True only for the value "1"."""
        return self.get(name) == "1"

    def verbosity(self) -> int:
        raw = self.get("TODOTXT_VERBOSE").strip()
        if not raw:
            return 0
        try:
            return int(raw)
        except ValueError:
            raise ConfigError(
                f'TODOTXT_VERBOSE must be an integer, got "{raw}".'
            ) from None

    def items(self) -> Iterator[Tuple[str, str]]:
        for key in SETTINGS_KEYS:
            yield key, self.get(key)


@dataclass
class InitReport:
    """Outcome of scaffolding a todo.txt directory."""

    destination: str
    reinitialized: bool
    # (file name, "new" | "exists", bytes written or None)
    entries: List[Tuple[str, str, Optional[int]]] = field(default_factory=list)
