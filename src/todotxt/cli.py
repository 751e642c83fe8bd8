"""todo command-line interface."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .core import date_prefix, format_sequence, sanitize_input
from .errors import ConfigError, TodoError, UsageError
from .models import Settings
from .settings import resolve
from .storage import append_task, init_structure, read_tasks

logger = logging.getLogger(__name__)

CONFIG_HELP = """\
configuration files:
  Settings are read from $HOME/todo.cfg, $HOME/.todo.cfg, ./todo.cfg and
  /etc/todo/config, in that order. Files are simple text files:

    # This is just an example
    TODO_DIR="$HOME/todo"
    TODO_FILE="$TODO_DIR/todo.txt"
    DONE_FILE="$TODO_DIR/done.txt"
    REPORT_FILE="$TODO_DIR/report.txt"

  For backward compatibility `export TODO_DIR="$HOME/todo"` is accepted too.
"""


def interactive_input(prompt: str) -> str:
    """Read one line from stdin after showing ``prompt``."""
    try:
        text = input(f"{prompt} " if prompt else "")
    except EOFError:
        return ""
    return sanitize_input(text)


def date_on_add(args: argparse.Namespace, settings: Settings) -> bool:
    if args.no_date:
        return False
    return args.date or settings.flag("TODOTXT_DATE_ON_ADD")


def forced(args: argparse.Namespace, settings: Settings) -> bool:
    return args.force or settings.flag("TODOTXT_FORCE")


def todo_file(settings: Settings) -> str:
    path = settings.get("TODO_FILE")
    if not path:
        raise ConfigError(
            "TODO_FILE is not set.\n"
            "Please run `todo init` or set TODO_FILE in your todo.cfg file."
        )
    return path


def prepare_task(text: str, args: argparse.Namespace, settings: Settings) -> str:
    """Sanitise a task, reject it if empty, then apply the date prefix."""
    task = sanitize_input(text)
    if not task:
        raise UsageError("Cannot add an empty task.")
    if date_on_add(args, settings):
        task = date_prefix(task)
    return task


def add_action(task: str, settings: Settings) -> None:
    """Append a task to the todo.txt file and print a summary."""
    number = append_task(todo_file(settings), task)
    print(f"{number}: {task}")
    print(f"TODO: {number} added")


def cmd_add(args: argparse.Namespace, settings: Settings) -> None:
    if args.text:
        task = " ".join(args.text)
    elif forced(args, settings):
        raise UsageError(
            'Detected missing option with command "add [task]"\n'
            "Usage: todo -f add [task]"
        )
    else:
        task = interactive_input("Add:")

    add_action(prepare_task(task, args, settings), settings)


def cmd_addm(args: argparse.Namespace, settings: Settings) -> None:
    """First task from the arguments, second one typed at the prompt.

    Both are checked before either is written.
    """
    if not args.text:
        raise UsageError(
            'Detected missing option with command "addm [task]"\n'
            "Usage: todo addm [task]"
        )
    first = prepare_task(" ".join(args.text), args, settings)
    second = prepare_task(interactive_input(">"), args, settings)

    add_action(first, settings)
    add_action(second, settings)


def cmd_list(args: argparse.Namespace, settings: Settings) -> None:
    # Checked before any output so a bad value fails cleanly.
    verbose = settings.verbosity()
    if args.terms:
        logger.warning(
            "filtering by terms is not supported yet; listing all tasks"
        )
    tasks = read_tasks(todo_file(settings))
    total = len(tasks)
    for t in tasks:
        print(f"{format_sequence(t.sequence, total)}: {t.text}")

    if verbose >= 1:
        print("--")
        print(f"TODO: {total} of {total} tasks shown")


def cmd_env(args: argparse.Namespace, settings: Settings) -> None:
    if args.names:
        for name in args.names:
            print(f'{name}="{settings.get(name)}"')
        return
    for name, value in settings.items():
        print(f'{name}="{value}"')


def cmd_init(args: argparse.Namespace, settings: Settings) -> None:
    report = init_structure(args.dest)
    message = (
        "Reinitialized an existing" if report.reinitialized else "Initialized a new"
    )
    print(f"{message} todo.txt structure in {report.destination}")
    for name, status, size in report.entries:
        if status == "new":
            print(f"{name} [{status}] ({size} bytes)")
        else:
            print(f"{name} [{status}]")


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="todo",
        description="A simple and extensible utility for managing your todo.txt files.",
        epilog=CONFIG_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-t",
        dest="date",
        action="store_true",
        help="Prefix the current date to a task automatically when it's added",
    )
    p.add_argument(
        "-T",
        dest="no_date",
        action="store_true",
        help="Do not prefix the current date to a task when it's added",
    )
    p.add_argument(
        "-f",
        dest="force",
        action="store_true",
        help="Force actions without confirmation or interactive input",
    )
    p.add_argument("-d", "--debug", action="store_true", help="Log debug output")
    sub = p.add_subparsers(dest="cmd")

    s_add = sub.add_parser("add", aliases=["a"], help="Add a task to your todo.txt file")
    s_add.add_argument("text", nargs="*", help="Task text, quotes are optional")
    s_add.set_defaults(func=cmd_add)

    s_addm = sub.add_parser("addm", help="Add multiple tasks to your todo.txt file")
    s_addm.add_argument("text", nargs="*", help="First task; the second is read from stdin")
    s_addm.set_defaults(func=cmd_addm)

    s_list = sub.add_parser(
        "list", aliases=["ls"], help="Display all the tasks with line numbers"
    )
    s_list.add_argument("terms", nargs="*", help="Search terms (not supported yet)")
    s_list.set_defaults(func=cmd_list)

    s_env = sub.add_parser("env", help="Display information about the todo environment")
    s_env.add_argument("names", nargs="*", help="Only show these settings")
    s_env.set_defaults(func=cmd_env)

    s_init = sub.add_parser(
        "init", help="Initialize a new todo.txt structure with default values"
    )
    s_init.add_argument(
        "-d",
        "--dest",
        default=".",
        help="Destination directory (default: the working directory)",
    )
    s_init.set_defaults(func=cmd_init)

    s_short = sub.add_parser(
        "shorthelp", help="Show a brief usage summary (a synonym for -h)"
    )
    s_short.set_defaults(func=None)

    return p


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.cmd is None or args.func is None:
        parser.print_help()
        return

    try:
        settings = resolve()
        args.func(args, settings)
    except TodoError as e:
        sys.exit(str(e))


if __name__ == "__main__":
    main()
