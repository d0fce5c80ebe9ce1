from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from pyresults import Err, Ok

from shimekiri.core.commands import (
    Backspace,
    Cancel,
    Command,
    DeleteSelected,
    InsertChar,
    MoveDown,
    MoveUp,
    NextField,
    PrevField,
    Quit,
    SetSort,
    StartCreate,
    StartEdit,
    Submit,
    ToggleSelected,
)
from shimekiri.core.form import Form
from shimekiri.core.modes import AppMode, Browsing, Creating, Editing
from shimekiri.core.snapshot import FormView, RowView, Snapshot
from shimekiri.core.sort import SortMode
from shimekiri.core.store import TaskStore
from shimekiri.storage import Persistence, get_persistence
from shimekiri.util.logger import setup_logger
from shimekiri.util.time import today

logger = setup_logger("shimekiri", is_stream=False, is_file=True)


@dataclass
class AppContext:
    """起動時に一度だけ組み立てるアプリケーション文脈。

    Attributes:
        data_path: 保存先ファイルのパス
        persistence: 永続化アダプタ
        store: タスクストア
        clock: 今日の日付を返す関数 (テストで差し替え可能)
    """

    data_path: str
    persistence: Persistence
    store: TaskStore
    clock: Callable[[], date] = field(default=today)

    @classmethod
    def create(
        cls,
        data_path: str,
        *,
        persistence: Persistence | None = None,
        sort_mode: SortMode = SortMode.CREATED_DATE,
        clock: Callable[[], date] = today,
    ) -> "AppContext":
        persistence = persistence or get_persistence(data_path)
        store = TaskStore(persistence.load(), sort_mode=sort_mode, clock=clock)
        logger.info("Loaded %d task(s) from %s", len(store), data_path)
        return cls(data_path=data_path, persistence=persistence, store=store, clock=clock)

    def save(self) -> None:
        self.persistence.save(list(self.store.tasks))


class Controller:
    """論理コマンドを受けて Store / Form に振り分ける。

    Browsing ⇄ Creating, Browsing ⇄ Editing のみ遷移する。
    Store を変更するコマンド (toggle, delete, submit) は戻る前に必ず保存する。
    """

    def __init__(self, ctx: AppContext) -> None:
        self.ctx = ctx
        self.mode: AppMode = Browsing()
        self.message: str | None = None
        self.running = True

    @property
    def store(self) -> TaskStore:
        return self.ctx.store

    def dispatch(self, command: Command) -> bool:
        """コマンドを1つ処理する。Quit 後は False を返す。"""
        self.message = None
        match self.mode:
            case Creating(form=form) | Editing(form=form):
                self._handle_form(command, form)
            case _:
                self._handle_browsing(command)
        return self.running

    # ---- browsing --------------------------------------------------------

    def _handle_browsing(self, command: Command) -> None:  # noqa: C901
        store = self.store
        match command:
            case Quit():
                self.running = False
            case MoveUp():
                store.move(-1)
            case MoveDown():
                store.move(+1)
            case ToggleSelected():
                if store.selected is None:
                    return
                store.toggle(store.selected)
                self._commit("toggle")
            case StartCreate():
                self.mode = Creating(form=Form())
            case StartEdit():
                task = store.selected_task()
                if task is None:
                    return
                form = Form()
                form.load_from(task)
                self.mode = Editing(edit_id=task.id, form=form)
            case DeleteSelected():
                if store.selected is None:
                    return
                store.delete(store.selected)
                self._commit("delete")
            case SetSort(mode=mode):
                store.set_sort_mode(mode)
                self.message = mode.label
            case _:
                # form用のコマンドは無視
                return

    # ---- form ------------------------------------------------------------

    def _handle_form(self, command: Command, form: Form) -> None:
        match command:
            case Cancel():
                self._close_form()
                self.message = "Canceled"
            case Submit():
                self._submit(form)
            case NextField():
                form.next_field()
            case PrevField():
                form.prev_field()
            case InsertChar(char=c):
                form.append_char(c)
            case Backspace():
                form.backspace()
            case _:
                # browsing用のコマンドは無視
                return

    def _submit(self, form: Form) -> None:
        match form.parse_target_date():
            case Ok(target_date):
                pass
            case Err(e):
                # 日付が不正なら何も確定せずフォームを開いたままにする
                logger.debug("Rejected form submission: %s", e)
                self.message = f"{e}: not saved"
                return
            case _:
                self.message = "Unexpected error"
                return

        title, description, _ = form.values()
        match self.mode:
            case Creating():
                tid = self.store.add(title, description, target_date)
                self.store.select_task(tid)
                self._commit(f"add {tid}")
                self.message = f"Added: #{tid}"
            case Editing(edit_id=edit_id):
                self.store.edit(edit_id, title, description, target_date)
                self.store.select_task(edit_id)
                self._commit(f"edit {edit_id}")
                self.message = f"Updated: #{edit_id}"
        self._close_form()

    def _close_form(self) -> None:
        match self.mode:
            case Creating(form=form) | Editing(form=form):
                form.clear()
        self.mode = Browsing()

    def _commit(self, action: str) -> None:
        logger.debug("Commit (%s): saving %d task(s)", action, len(self.store))
        self.ctx.save()

    # ---- snapshot --------------------------------------------------------

    def snapshot(self) -> Snapshot:
        """描画用のスナップショットを作る。overdue は毎回 clock() で判定する。"""
        on = self.ctx.clock()
        form_view: FormView | None = None
        match self.mode:
            case Creating(form=form):
                form_view = FormView.from_form(form)
            case Editing(edit_id=edit_id, form=form):
                form_view = FormView.from_form(form, edit_id)
        return Snapshot(
            rows=tuple(RowView.from_task(t, on) for t in self.store.tasks),
            selected=self.store.selected,
            sort_label=self.store.sort_mode.label,
            progress=self.store.progress(),
            mode=self.mode.name,
            form=form_view,
            message=self.message,
        )
