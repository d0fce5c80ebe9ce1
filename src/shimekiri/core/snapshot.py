from dataclasses import dataclass
from datetime import date

from shimekiri.core.form import Form
from shimekiri.core.models import StatusClass, Task
from shimekiri.core.modes import ModeName


@dataclass(frozen=True)
class RowView:
    id: int
    title: str
    description: str
    target_date: date
    completed: bool
    overdue: bool
    status_class: StatusClass

    @staticmethod
    def from_task(t: Task, on: date) -> "RowView":
        return RowView(
            id=t.id,
            title=t.title,
            description=t.description,
            target_date=t.target_date,
            completed=t.completed,
            overdue=t.is_overdue(on),
            status_class=t.status_class(on),
        )


@dataclass(frozen=True)
class FormView:
    title: str
    description: str
    target_date: str
    field_index: int
    edit_id: int | None

    @staticmethod
    def from_form(f: Form, edit_id: int | None = None) -> "FormView":
        return FormView(
            title=f.title,
            description=f.description,
            target_date=f.target_date,
            field_index=f.field_index,
            edit_id=edit_id,
        )


@dataclass(frozen=True)
class Snapshot:
    """描画層に渡す読み取り専用の状態。"""

    rows: tuple[RowView, ...]
    selected: int | None
    sort_label: str
    progress: tuple[int, int]
    mode: ModeName
    form: FormView | None = None
    message: str | None = None
