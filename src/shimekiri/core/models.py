from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Literal

from pyresults import Err, Ok

from shimekiri.util.time import format_date, parse_date, today

StatusClass = Literal["completed", "overdue", "normal"]

TASK_FIELDS = ("id", "title", "description", "target_date", "created_date", "completed")


@dataclass
class Task:
    id: int
    title: str
    description: str
    target_date: date
    created_date: date = field(default_factory=today)
    completed: bool = False

    def is_overdue(self, on: date | None = None) -> bool:
        """未完了かつ target_date を過ぎているか。

        保存はせず、呼ばれるたびに `on` (省略時は今日) と比較する。
        """
        return not self.completed and (on or today()) > self.target_date

    def status_class(self, on: date | None = None) -> StatusClass:
        if self.completed:
            return "completed"
        if self.is_overdue(on):
            return "overdue"
        return "normal"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "target_date": format_date(self.target_date),
            "created_date": format_date(self.created_date),
            "completed": self.completed,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Task":
        """永続化レコードから Task を復元する。

        未知のキーは無視する。必須キーの欠落や型違いは ValueError。
        """
        if not isinstance(d, dict):
            _msg = f"Task record must be a mapping: {d!r}"
            raise ValueError(_msg)  # noqa: TRY004
        missing = [k for k in TASK_FIELDS if k not in d]
        if missing:
            _msg = f"Missing fields {missing} in task record"
            raise ValueError(_msg)
        tid = d["id"]
        # bool は int のサブクラスなので弾く
        if not isinstance(tid, int) or isinstance(tid, bool):
            _msg = f"Invalid id: {tid!r}"
            raise ValueError(_msg)  # noqa: TRY004
        for key in ("title", "description"):
            if not isinstance(d[key], str):
                _msg = f"Invalid {key}: {d[key]!r}"
                raise ValueError(_msg)  # noqa: TRY004
        if not isinstance(d["completed"], bool):
            _msg = f"Invalid completed: {d['completed']!r}"
            raise ValueError(_msg)  # noqa: TRY004
        return Task(
            id=tid,
            title=d["title"],
            description=d["description"],
            target_date=_require_date(d["target_date"]),
            created_date=_require_date(d["created_date"]),
            completed=d["completed"],
        )


def _require_date(value: Any) -> date:
    # YAML は引用符なしの日付を date として読み込む
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        _msg = f"Invalid date: {value!r}"
        raise ValueError(_msg)  # noqa: TRY004
    match parse_date(value):
        case Ok(d):
            return d  # type: ignore[no-any-return]
        case Err(e):
            raise ValueError(e)
        case _:
            _msg = "Unexpected error"
            raise ValueError(_msg)
