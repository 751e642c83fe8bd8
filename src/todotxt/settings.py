"""Resolution of todo.txt settings from todo.cfg files and the environment.

Configuration files use the shell-like ``KEY=VALUE`` syntax of the original
todo.sh (``export KEY=VALUE`` is accepted too). They are loaded in this order,
later files overriding earlier ones::

    $HOME/todo.cfg
    $HOME/.todo.cfg
    ./todo.cfg
    /etc/todo/config

Variables already present in the process environment win over every file.
Values are not expanded by the shell, so ``$HOME`` and ``$TODO_DIR`` (and
their ``${...}`` forms) are substituted textually once everything is loaded.
"""

import logging
import os
from typing import Dict, List, Mapping, Optional, Sequence

from dotenv.parser import parse_stream

from .errors import ConfigError
from .models import DEFAULT_SETTINGS, SETTINGS_KEYS, Settings

logger = logging.getLogger(__name__)

SYSTEM_CONFIG_PATH = "/etc/todo/config"


def config_paths(home: str, cwd: str) -> List[str]:
    """Return the candidate configuration files in load order."""
    paths = []
    if home:
        paths.append(os.path.join(home, "todo.cfg"))
        paths.append(os.path.join(home, ".todo.cfg"))
    paths.append(os.path.join(cwd, "todo.cfg"))
    paths.append(SYSTEM_CONFIG_PATH)
    return paths


def load_config_file(path: str) -> Dict[str, str]:
    """Parse one configuration file into a dict, without touching os.environ."""
    values: Dict[str, str] = {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            for binding in parse_stream(f):
                if binding.error:
                    raise ConfigError(
                        f"{path}:{binding.original.line}: cannot parse "
                        f"{binding.original.string.strip()!r}"
                    )
                if binding.key is None:
                    # blank line or comment
                    continue
                if binding.value is None:
                    raise ConfigError(
                        f"{path}:{binding.original.line}: missing '=' after "
                        f"{binding.key!r}"
                    )
                values[binding.key] = binding.value
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
    return values


def expand(value: str, name: str, replacement: str) -> str:
    """Replace ``$name`` and ``${name}`` in ``value``."""
    value = value.replace(f"${name}", replacement)
    return value.replace(f"${{{name}}}", replacement)


def resolve(
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[str] = None,
    paths: Optional[Sequence[str]] = None,
) -> Settings:
    """Build the Settings used by every command.

    Missing configuration files are skipped; an unparsable one raises
    ConfigError, as does an unreadable working directory.
    """
    if environ is None:
        environ = os.environ
    if cwd is None:
        try:
            cwd = os.getcwd()
        except OSError as e:
            raise ConfigError(f"Cannot read the working directory: {e}") from e
    pwd = os.path.normpath(cwd)
    home = environ.get("HOME", "")
    home = os.path.normpath(home) if home else ""

    if paths is None:
        paths = config_paths(home, pwd)

    loaded: Dict[str, str] = {}
    for path in paths:
        if not os.path.exists(path):
            logger.debug("config %s not found, skipping", path)
            continue
        logger.debug("loading config %s", path)
        loaded.update(load_config_file(path))

    values = dict(DEFAULT_SETTINGS)
    for key in SETTINGS_KEYS:
        if key in environ:
            values[key] = environ[key]
        elif key in loaded:
            values[key] = loaded[key]

    for key in SETTINGS_KEYS:
        values[key] = expand(values[key], "HOME", home)
    todo_dir = values["TODO_DIR"]
    for key in SETTINGS_KEYS:
        values[key] = expand(values[key], "TODO_DIR", todo_dir)

    return Settings(values=values, home=home, pwd=pwd)
