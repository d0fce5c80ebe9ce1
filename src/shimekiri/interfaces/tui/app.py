import curses

from shimekiri.core.controller import AppContext, Controller
from shimekiri.core.modes import Browsing
from shimekiri.interfaces.tui.keymap import decode_key
from shimekiri.interfaces.tui.style import (
    ACTIVE_FIELD_COLOR,
    COMPLETED_COLOR,
    DIALOG_BG_COLOR,
    FOOTER_COLOR,
    MAIN_THEME_COLOR,
    NORMAL_COLOR,
    OVERDUE_COLOR,
)
from shimekiri.interfaces.tui.view import AppView


class App:
    """curses の画面と Controller をつなぐ。"""

    def __init__(self, stdscr: curses.window, ctx: AppContext) -> None:
        self.stdscr = stdscr
        self.controller = Controller(ctx)
        self.view = AppView(stdscr)
        self._init_curses()

    def _init_curses(self) -> None:
        curses.curs_set(0)
        self.stdscr.keypad(True)  # noqa: FBT003
        # Esc を押してから反応するまでの待ち時間を短くする
        curses.set_escdelay(25)

        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            # color pair indexes (idx, foreground, background)
            curses.init_pair(MAIN_THEME_COLOR, curses.COLOR_YELLOW, -1)  # header
            curses.init_pair(COMPLETED_COLOR, curses.COLOR_GREEN, -1)  # completed
            curses.init_pair(OVERDUE_COLOR, curses.COLOR_RED, -1)  # overdue
            curses.init_pair(NORMAL_COLOR, -1, -1)  # normal
            curses.init_pair(DIALOG_BG_COLOR, -1, curses.COLOR_BLACK)  # dialog-bg
            curses.init_pair(ACTIVE_FIELD_COLOR, curses.COLOR_YELLOW, curses.COLOR_BLACK)  # active field
            curses.init_pair(FOOTER_COLOR, curses.COLOR_WHITE, -1)  # footer

    def draw(self) -> None:
        self.view.draw(self.controller.snapshot())

    def handle_key(self, key: int, ch: str | None = None) -> bool:
        """Decode a key and dispatch it. Returns False when the app should exit."""
        in_form = not isinstance(self.controller.mode, Browsing)
        command = decode_key(key, ch, in_form=in_form)
        if command is None:
            return True
        return self.controller.dispatch(command)
