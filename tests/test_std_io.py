import io
import sys
import unittest
from datetime import date

from shimekiri.core.models import Task
from shimekiri.io.std_io import format_task_line, print_progress, print_task


def _task(
    description: str = "",
    *,
    completed: bool = False,
) -> Task:
    return Task(
        id=12,
        title="title",
        description=description,
        target_date=date(2025, 1, 10),
        created_date=date(2025, 1, 1),
        completed=completed,
    )


class TestFormatTaskLine(unittest.TestCase):
    def test_normal(self) -> None:
        line = format_task_line(_task(), date(2025, 1, 1))
        assert line.startswith("[ ] #12")
        assert "2025-01-10" in line
        assert line.endswith("title")

    def test_overdue_and_completed_marks(self) -> None:
        assert format_task_line(_task(), date(2025, 2, 1)).startswith("[!]")
        assert format_task_line(_task(completed=True), date(2025, 2, 1)).startswith("[x]")

    def test_description_appended(self) -> None:
        assert format_task_line(_task("details"), date(2025, 1, 1)).endswith("  - details")


class TestPrint(unittest.TestCase):
    def test_print_task_and_progress(self) -> None:
        buf = io.StringIO()

        old = sys.stdout
        sys.stdout = buf
        try:
            print_task(_task(), date(2025, 1, 1))
            print_progress(1, 3)
        finally:
            sys.stdout = old
        out = buf.getvalue()
        assert "#12" in out
        assert "Progress: 1/3 tasks completed" in out


if __name__ == "__main__":
    unittest.main()
