# ruff: noqa: T201

from datetime import date

from shimekiri.core.models import Task
from shimekiri.util.time import format_date

STATUS_MARK_MAP = {
    "completed": "x",
    "overdue": "!",
    "normal": " ",
}


def format_task_line(t: Task, on: date | None = None) -> str:
    mark = STATUS_MARK_MAP[t.status_class(on)]
    line = f"[{mark}] #{t.id:<4} {format_date(t.target_date)}  {t.title}"
    if t.description:
        line += f"  - {t.description}"
    return line


def print_task(t: Task, on: date | None = None) -> None:
    print(format_task_line(t, on))


def print_progress(completed: int, total: int) -> None:
    print(f"Progress: {completed}/{total} tasks completed")
