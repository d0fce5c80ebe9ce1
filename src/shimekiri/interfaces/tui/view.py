import curses
from dataclasses import dataclass

from shimekiri.core.form import FIELD_LABELS, FIELD_NAMES
from shimekiri.core.snapshot import RowView, Snapshot
from shimekiri.interfaces.tui.helper import _fit_width, _string_width, progress_bar
from shimekiri.interfaces.tui.style import (
    ACTIVE_FIELD_COLOR,
    COLUMN_RATIOS,
    COLUMN_TITLES,
    COMPLETED_COLOR,
    DIALOG_BG_COLOR,
    FOOTER_COLOR,
    MAIN_THEME_COLOR,
    MAX_DIALOG_BOX_WIDTH,
    NORMAL_COLOR,
    OVERDUE_COLOR,
    PROGRESS_BAR_WIDTH,
    STATUS_MARK_MAP,
    FooterLines,
    HeaderLines,
)
from shimekiri.util.logger import setup_logger
from shimekiri.util.time import format_date

logger = setup_logger("shimekiri", is_stream=False, is_file=True)


@dataclass
class AppView:
    """AppView class to draw overall app screen from a snapshot.

    Attributes:
        stdscr: curses.window
        list_offset: first visible row of the task table
    """

    stdscr: curses.window
    list_offset: int = 0

    def draw(self, snap: Snapshot) -> None:
        """Draw overall app screen."""
        self.stdscr.erase()
        max_y, max_x = self.stdscr.getmaxyx()
        if max_y < 2 or max_x < 2:
            # give up drawing if terminal size is too small
            self.stdscr.refresh()
            return

        header_height = HeaderLines.height()
        footer_height = FooterLines.height()
        content_height = max_y - header_height - footer_height
        if content_height <= 0:
            self.stdscr.refresh()
            return

        # header/footer
        self._draw_header(snap, 0, max_x)
        self._draw_footer(snap, max_y - footer_height, max_x)

        # main
        self._draw_table(snap, header_height, content_height, max_x)

        # dialog
        if snap.form is not None:
            self._draw_dialog(snap, header_height, content_height, max_x)
        else:
            try:
                curses.curs_set(0)
            except curses.error:
                logger.exception("Error (cursor off)")

        self.stdscr.refresh()

    def _safe_addnstr(self, y: int, x: int, s: str, n: int, attr: int = 0) -> None:
        """Add a string to the screen safely."""
        max_y, max_x = self.stdscr.getmaxyx()
        # 画面外なら描かない
        if y < 0 or y >= max_y or x < 0 or x >= max_x:
            return
        # 右端を超えないようにクリップ
        limit = max_x - x
        if limit <= 0 or n <= 0:
            return
        # 最終行では右端1マスを開ける
        if y == max_y - 1 and limit == max_x:
            limit -= 1

        s = s.replace("\t", " ")
        n = min(n, len(s), limit)
        # nを減らしながらトライ (例外が発生したら1文字ずつ減らして再試行)
        while n > 0:
            try:
                self.stdscr.addnstr(y, x, s[:n], n, attr)
            except curses.error:
                n -= 1
            else:
                return

    # header/footer
    def _draw_header(self, snap: Snapshot, y: int, width: int) -> None:
        completed, total = snap.progress
        attr = curses.color_pair(MAIN_THEME_COLOR) if curses.has_colors() else 0
        bar = progress_bar(completed, total, PROGRESS_BAR_WIDTH)
        self._safe_addnstr(y, 0, HeaderLines.title(snap.sort_label).ljust(width), width, attr | curses.A_BOLD)
        self._safe_addnstr(y + 1, 0, HeaderLines.progress(completed, total, bar).ljust(width), width, attr)
        self._safe_addnstr(y + 2, 0, self._format_columns(COLUMN_TITLES, width), width, attr | curses.A_BOLD)

    def _draw_footer(self, snap: Snapshot, y: int, width: int) -> None:
        for i, line in enumerate(FooterLines.help()):
            self._safe_addnstr(y + i, 0, line.ljust(width), width, curses.A_DIM)
        msg = snap.message or ""
        attr = curses.color_pair(FOOTER_COLOR) if curses.has_colors() else 0
        self._safe_addnstr(y + len(FooterLines.help()), 0, msg.ljust(width), width, attr)

    # task table
    def _draw_table(self, snap: Snapshot, y: int, height: int, width: int) -> None:
        rows = snap.rows
        if not rows:
            self._safe_addnstr(y, 0, "(no tasks: press 'n' to add one)".ljust(width), width, curses.A_DIM)
            return

        selected = snap.selected if snap.selected is not None else 0
        # list_offsetをclamp
        if selected < self.list_offset:
            self.list_offset = selected
        elif selected >= self.list_offset + height:
            self.list_offset = selected - height + 1
        self.list_offset = max(0, min(self.list_offset, max(0, len(rows) - height)))

        start = self.list_offset
        end = min(start + height, len(rows))
        for i, idx in enumerate(range(start, end)):
            row = rows[idx]
            attr = self._row_attr(row)
            if idx == snap.selected:
                attr |= curses.A_REVERSE
            self._safe_addnstr(y + i, 0, self._format_row(row, width), width, attr)

    def _row_attr(self, row: RowView) -> int:
        colors = curses.has_colors()
        if row.status_class == "completed":
            return (curses.color_pair(COMPLETED_COLOR) if colors else 0) | curses.A_DIM
        if row.status_class == "overdue":
            return (curses.color_pair(OVERDUE_COLOR) if colors else 0) | curses.A_BOLD
        return curses.color_pair(NORMAL_COLOR) if colors else 0

    def _format_row(self, row: RowView, width: int) -> str:
        return self._format_columns(
            (row.title, row.description, format_date(row.target_date), STATUS_MARK_MAP[row.status_class]),
            width,
        )

    def _format_columns(self, cells: tuple[str, ...], width: int) -> str:
        inner = max(0, width - 2)
        parts = [_fit_width(cell, inner * ratio // 100) for cell, ratio in zip(cells, COLUMN_RATIOS, strict=True)]
        return ("  " + "".join(parts)).ljust(width)

    # dialog
    def _draw_dialog(self, snap: Snapshot, content_y: int, content_height: int, max_x: int) -> None:
        """Draw the create/edit form.

        Args:
            snap: Snapshot
            content_y: int
            content_height: int
            max_x: int
        """
        form = snap.form
        if form is None:
            return

        box_width = min(MAX_DIALOG_BOX_WIDTH, max_x - 4)
        # title(1) + empty(1) + fields + hint(1)
        box_height = min(3 + len(FIELD_NAMES), content_height)
        top = content_y + max(0, (content_height - box_height) // 2)
        left = max(2, (max_x - box_width) // 2)

        attr = curses.color_pair(DIALOG_BG_COLOR) if curses.has_colors() else 0

        for row in range(box_height):
            self._safe_addnstr(top + row, left, " " * box_width, box_width, attr)

        title = "[Add New Task]" if form.edit_id is None else f"[Edit Task #{form.edit_id}]"
        self._safe_addnstr(top, left, title.ljust(box_width), box_width, attr | curses.A_BOLD)

        label_width = max(len(label) for label in FIELD_LABELS.values())
        values = (form.title, form.description, form.target_date)
        max_input_width = max(1, box_width - label_width - 4)
        cursor_pos: tuple[int, int] | None = None
        for idx, (name, value) in enumerate(zip(FIELD_NAMES, values, strict=True)):
            row_y = top + 2 + idx
            marker = ">" if idx == form.field_index else " "
            label = f"{marker} {FIELD_LABELS[name].ljust(label_width)}: "
            # show last part if input overflows
            shown = value[-max_input_width:] if len(value) > max_input_width else value
            line_attr = attr
            if idx == form.field_index:
                line_attr = (curses.color_pair(ACTIVE_FIELD_COLOR) if curses.has_colors() else attr) | curses.A_BOLD
            self._safe_addnstr(row_y, left, (label + shown).ljust(box_width), box_width, line_attr)
            if idx == form.field_index:
                cursor_pos = (row_y, left + _string_width(label) + _string_width(shown))

        self._safe_addnstr(top + box_height - 1, left, FooterLines.dialog_hint().ljust(box_width), box_width, attr)

        # ---- draw text cursor ---------------------------------------------
        if cursor_pos is None:
            return
        try:
            curses.curs_set(1)
            max_y, max_x2 = self.stdscr.getmaxyx()
            cursor_row, cursor_col = cursor_pos
            if 0 <= cursor_row < max_y and 0 <= cursor_col < max_x2:
                self.stdscr.move(cursor_row, cursor_col)
            else:
                _msg = f"Cursor position out of screen: row={cursor_row}, col={cursor_col}"
                logger.warning(_msg)
        except curses.error:
            # cursor control may be failed depending on the terminal environment
            logger.warning("Failed to move text cursor")
