"""Command line for managing tasks."""

import argparse
import re
import sys

from minitools.todo import commands
from minitools.todo.storage import TaskStorage


def _task_id(text):
    if not re.fullmatch(r"\+?[0-9]+", text):
        raise argparse.ArgumentTypeError(f"invalid task id: {text!r}")
    return int(text)


def build_parser():
    """Return the argument parser for the to-do list."""
    parser = argparse.ArgumentParser(prog="todo", description="A simple CLI to manage your tasks")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    sub.add_parser("add", help="Add a task").add_argument("title")
    sub.add_parser("list", help="List tasks")
    sub.add_parser("remove", help="Remove a task").add_argument("id", type=_task_id)
    sub.add_parser("complete", help="Complete a task").add_argument("id", type=_task_id)
    return parser


def main(argv=None):
    """Run the to-do list; return the process exit status."""
    args = build_parser().parse_args(argv)
    storage = TaskStorage()
    try:
        if args.command == "add":
            commands.add_task(storage, args.title)
        elif args.command == "list":
            commands.list_tasks(storage)
        elif args.command == "remove":
            commands.remove_task(storage, args.id)
        else:
            commands.complete_task(storage, args.id)
    except (commands.TaskNotFoundError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())