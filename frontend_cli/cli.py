"""Command-line front end for the task API.

Each command is one user action: it loads the current list from the server,
applies the action through TaskBoard, then prints the resulting list.
"""
import argparse
import logging
import sys
from typing import Any, Optional, Sequence

from frontend_cli.api.client import TasksApiClient
from frontend_cli.board import TaskBoard
from frontend_cli.config import ClientSettings


def render_task(task: dict[str, Any]) -> str:
    status = str(task.get("status") or "")
    lines = [
        f"[{task.get('id')}] {task.get('title') or ''}",
    ]
    if task.get("description"):
        lines.append(f"    {task['description']}")
    lines.append(f"    {status[:1].upper() + status[1:]}")
    lines.append(f"    {task.get('dueDate') or ''}")
    return "\n".join(lines)


def render_board(board: TaskBoard) -> str:
    if not board.tasks:
        return "No tasks."
    return "\n".join(render_task(t) for t in board.tasks)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="task-tracker", description="Manage your to-do list.")
    parser.add_argument("--url", help="API base URL (defaults to TASKS_API_URL)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="show all tasks")

    add = sub.add_parser("add", help="create a task")
    add.add_argument("--title", default="")
    add.add_argument("--description", default="")
    add.add_argument("--due", default="", help="due date, YYYY-MM-DD")

    edit = sub.add_parser("edit", help="update a task")
    edit.add_argument("id", type=int)
    edit.add_argument("--title")
    edit.add_argument("--description")
    edit.add_argument("--due", help="due date, YYYY-MM-DD")

    delete = sub.add_parser("delete", help="delete a task")
    delete.add_argument("id", type=int)
    return parser


def _apply(board: TaskBoard, args: argparse.Namespace) -> bool:
    if args.command == "list":
        return True

    if args.command == "delete":
        return board.delete(args.id)

    form = board.form
    if args.command == "edit":
        if not board.edit(args.id):
            board.notifications.append(f"Task {args.id} not found.")
            return False
        if args.title is not None:
            form.set_title(args.title)
        if args.description is not None:
            form.set_description(args.description)
        if args.due is not None:
            form.set_due_date(args.due)
    else:
        form.set_title(args.title)
        form.set_description(args.description)
        form.set_due_date(args.due)

    return board.submit()


def main(argv: Optional[Sequence[str]] = None, api: TasksApiClient | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = ClientSettings.from_env()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    if api is not None:
        return _run(TaskBoard(api), args)
    with TasksApiClient(base_url=args.url or settings.api_url) as own_api:
        return _run(TaskBoard(own_api), args)


def _run(board: TaskBoard, args: argparse.Namespace) -> int:
    ok = board.refresh() and _apply(board, args)

    for message in board.form.errors.values():
        print(message, file=sys.stderr)
    for message in board.drain_notifications():
        print(message, file=sys.stderr)

    print(render_board(board))
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
