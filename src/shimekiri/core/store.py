from collections.abc import Callable, Iterable
from datetime import date

from pyresults import Err, Ok, Result

from shimekiri.core.models import Task
from shimekiri.core.sort import SortMode, sort_tasks
from shimekiri.util.time import today


class TaskStore:
    """並び順付きのタスク集合と選択位置を保持する。

    Public API:
        - add() / edit() / toggle() / delete(): タスクの変更
        - set_sort_mode() / resort(): 並べ替え
        - progress(): (完了数, 総数)
        - move(): 選択位置の移動 (両端で折り返す)
        - get() / index_of() / select_task() / selected_task(): 参照と選択

    対象が存在しない操作はすべて何もしない (例外は投げない)。
    """

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        *,
        sort_mode: SortMode = SortMode.CREATED_DATE,
        clock: Callable[[], date] = today,
    ) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self._selected: int | None = None
        self._sort_mode = sort_mode
        self._clock = clock
        self.replace_all(tasks)

    # ---- 参照 ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def sort_mode(self) -> SortMode:
        return self._sort_mode

    @property
    def selected(self) -> int | None:
        return self._selected

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: int) -> Result[Task, str]:
        for t in self._tasks:
            if t.id == task_id:
                return Ok[Task, str](t)
        return Err[Task, str](f"Task not found: {task_id}")

    def index_of(self, task_id: int) -> int | None:
        for idx, t in enumerate(self._tasks):
            if t.id == task_id:
                return idx
        return None

    def selected_task(self) -> Task | None:
        if self._selected is None or not (0 <= self._selected < len(self._tasks)):
            return None
        return self._tasks[self._selected]

    def progress(self) -> tuple[int, int]:
        completed = sum(1 for t in self._tasks if t.completed)
        return completed, len(self._tasks)

    # ---- 読み込み ----

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """保存済みのタスクで中身を置き換える。

        next_id は max(既存ID) + 1 で再計算するが、小さくはしない。
        """
        self._tasks = list(tasks)
        if self._tasks:
            self._next_id = max(self._next_id, max(t.id for t in self._tasks) + 1)
        self.resort()
        self._clamp_selection()

    # ---- 変更 ----

    def add(self, title: str, description: str, target_date: date) -> int:
        tid = self._next_id
        self._next_id += 1
        self._tasks.append(
            Task(
                id=tid,
                title=title,
                description=description,
                target_date=target_date,
                created_date=self._clock(),
            ),
        )
        self.resort()
        self._clamp_selection()
        return tid

    def edit(self, task_id: int, title: str, description: str, target_date: date) -> None:
        match self.get(task_id):
            case Ok(t):
                t.title = title
                t.description = description
                t.target_date = target_date
                self.resort()
            case Err(_):
                # 呼び出し側で存在確認済みの想定なので何もしない
                return

    def toggle(self, index: int) -> None:
        if 0 <= index < len(self._tasks):
            t = self._tasks[index]
            t.completed = not t.completed

    def delete(self, index: int) -> None:
        if not (0 <= index < len(self._tasks)):
            return
        del self._tasks[index]
        self._clamp_selection()

    # ---- 並べ替え ----

    def set_sort_mode(self, mode: SortMode) -> None:
        self._sort_mode = mode
        self.resort()

    def resort(self) -> None:
        self._tasks = sort_tasks(self._tasks, self._sort_mode)

    # ---- 選択 ----

    def move(self, delta: int) -> None:
        if not self._tasks:
            return
        if self._selected is None:
            self._selected = 0
            return
        self._selected = (self._selected + delta) % len(self._tasks)

    def select(self, index: int) -> None:
        if 0 <= index < len(self._tasks):
            self._selected = index

    def select_task(self, task_id: int) -> None:
        idx = self.index_of(task_id)
        if idx is not None:
            self._selected = idx

    def _clamp_selection(self) -> None:
        if not self._tasks:
            self._selected = None
        elif self._selected is None:
            self._selected = 0
        else:
            self._selected = max(0, min(self._selected, len(self._tasks) - 1))
