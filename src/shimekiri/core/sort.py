from enum import Enum

from shimekiri.core.models import Task


class SortMode(Enum):
    CREATED_DATE = "created"
    TARGET_DATE = "target"
    COMPLETION = "completion"

    @property
    def label(self) -> str:
        return SORT_LABELS[self]


SORT_LABELS: dict[SortMode, str] = {
    SortMode.CREATED_DATE: "Sorted by Date",
    SortMode.TARGET_DATE: "Sorted by Target",
    SortMode.COMPLETION: "Sorted by Status",
}


def sort_tasks(tasks: list[Task], mode: SortMode) -> list[Task]:
    """mode に従って並べ替えた新しいリストを返す。

    - CREATED_DATE: created_date 降順 (新しいものが先)
    - TARGET_DATE : target_date 昇順 (近いものが先)
    - COMPLETION  : 未完了 → 完了。同じ completed 同士の相対順は保つ
    sorted() は安定ソートなので、どのモードでも同値の要素は元の順序を保つ。
    """
    if mode is SortMode.CREATED_DATE:
        return sorted(tasks, key=lambda t: t.created_date, reverse=True)
    if mode is SortMode.TARGET_DATE:
        return sorted(tasks, key=lambda t: t.target_date)
    return sorted(tasks, key=lambda t: t.completed)
