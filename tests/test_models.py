import unittest
from datetime import date

import pytest

from shimekiri.core.models import Task


def _task(
    target_date: date = date(2025, 1, 10),
    *,
    completed: bool = False,
) -> Task:
    return Task(
        id=1,
        title="Buy milk",
        description="2 bottles",
        target_date=target_date,
        created_date=date(2025, 1, 1),
        completed=completed,
    )


class TestOverdue(unittest.TestCase):
    def test_overdue_only_after_target_date(self) -> None:
        t = _task()
        assert not t.is_overdue(date(2025, 1, 9))
        assert not t.is_overdue(date(2025, 1, 10))
        assert t.is_overdue(date(2025, 1, 11))

    def test_completed_is_never_overdue(self) -> None:
        t = _task(completed=True)
        assert not t.is_overdue(date(2030, 1, 1))

    def test_status_class(self) -> None:
        assert _task().status_class(date(2025, 1, 1)) == "normal"
        assert _task().status_class(date(2025, 2, 1)) == "overdue"
        assert _task(completed=True).status_class(date(2025, 2, 1)) == "completed"

    def test_overdue_is_recomputed_on_each_call(self) -> None:
        t = _task()
        assert not t.is_overdue(date(2025, 1, 10))
        # 日付が変わったら同じタスクでも結果が変わる
        assert t.is_overdue(date(2025, 1, 11))


class TestTaskDict(unittest.TestCase):
    def test_to_dict_uses_iso_dates(self) -> None:
        d = _task().to_dict()
        assert d == {
            "id": 1,
            "title": "Buy milk",
            "description": "2 bottles",
            "target_date": "2025-01-10",
            "created_date": "2025-01-01",
            "completed": False,
        }

    def test_from_dict_restores_fields(self) -> None:
        t = _task(completed=True)
        assert Task.from_dict(t.to_dict()) == t

    def test_from_dict_ignores_unknown_keys(self) -> None:
        d = _task().to_dict()
        d["priority"] = 3
        assert Task.from_dict(d) == _task()

    def test_from_dict_accepts_date_objects(self) -> None:
        d = _task().to_dict()
        d["target_date"] = date(2025, 1, 10)
        assert Task.from_dict(d).target_date == date(2025, 1, 10)


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("id", "1"),
        ("id", True),
        ("title", None),
        ("completed", "yes"),
        ("target_date", "2024-13-40"),
        ("created_date", 20250101),
    ],
)
def test_from_dict_rejects_bad_field(key: str, value: object) -> None:
    d = _task().to_dict()
    d[key] = value
    with pytest.raises(ValueError):  # noqa: PT011
        Task.from_dict(d)


def test_from_dict_rejects_missing_field() -> None:
    d = _task().to_dict()
    del d["completed"]
    with pytest.raises(ValueError, match="Missing fields"):
        Task.from_dict(d)


def test_from_dict_rejects_non_mapping() -> None:
    with pytest.raises(ValueError, match="mapping"):
        Task.from_dict(["not", "a", "dict"])  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
