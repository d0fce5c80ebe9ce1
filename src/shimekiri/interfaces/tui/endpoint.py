import curses
import locale

from shimekiri.core.controller import AppContext
from shimekiri.interfaces.tui.app import App


def main(stdscr: curses.window, ctx: AppContext) -> int:
    app = App(stdscr, ctx)
    while True:
        app.draw()
        key_raw = stdscr.get_wch()
        key = ord(key_raw) if isinstance(key_raw, str) else key_raw
        ch = key_raw if isinstance(key_raw, str) else None
        if not app.handle_key(key, ch):
            break
    return 0


def run(ctx: AppContext) -> int:
    # 全角文字を正しく扱うため
    locale.setlocale(locale.LC_ALL, "")
    return curses.wrapper(main, ctx)
