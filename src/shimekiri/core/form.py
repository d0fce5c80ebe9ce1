from dataclasses import dataclass
from datetime import date

from pyresults import Result

from shimekiri.core.models import Task
from shimekiri.util.time import format_date, parse_date

FIELD_NAMES = ("title", "description", "target_date")
FIELD_LABELS = {
    "title": "Title",
    "description": "Description",
    "target_date": "Target Date (YYYY-MM-DD)",
}


@dataclass
class Form:
    """タスク作成/編集用の入力フォーム。

    field_index: 0=title, 1=description, 2=target_date (両方向に折り返す)
    """

    title: str = ""
    description: str = ""
    target_date: str = ""
    field_index: int = 0

    @property
    def current_field_name(self) -> str:
        return FIELD_NAMES[self.field_index]

    @property
    def current_value(self) -> str:
        return getattr(self, self.current_field_name)  # type: ignore[no-any-return]

    def values(self) -> tuple[str, str, str]:
        return self.title, self.description, self.target_date

    # ---- フィールド移動 ----

    def next_field(self) -> None:
        self.field_index = (self.field_index + 1) % len(FIELD_NAMES)

    def prev_field(self) -> None:
        self.field_index = (self.field_index - 1) % len(FIELD_NAMES)

    # ---- 編集 ----

    def append_char(self, c: str) -> None:
        if not c or c < " ":
            return
        setattr(self, self.current_field_name, self.current_value + c)

    def backspace(self) -> None:
        value = self.current_value
        if value:
            setattr(self, self.current_field_name, value[:-1])

    def load_from(self, task: Task) -> None:
        self.title = task.title
        self.description = task.description
        self.target_date = format_date(task.target_date)
        self.field_index = 0

    def clear(self) -> None:
        self.title = ""
        self.description = ""
        self.target_date = ""
        self.field_index = 0

    # ---- 確定 ----

    def parse_target_date(self) -> Result[date, str]:
        return parse_date(self.target_date)
