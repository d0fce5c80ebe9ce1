import curses

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
from shimekiri.core.sort import SortMode

# get_wch() は通常文字を str、ファンクションキーを int で返す。
# 'š' (353) == KEY_BTAB のように番号が重なる文字があるので、両者を別の表で引く。

BROWSE_CHARS: dict[str, Command] = {
    "q": Quit(),
    "\x1b": Quit(),
    "k": MoveUp(),
    "j": MoveDown(),
    " ": ToggleSelected(),
    "n": StartCreate(),
    "e": StartEdit(),
    "d": DeleteSelected(),
    "s": SetSort(SortMode.CREATED_DATE),
    "t": SetSort(SortMode.TARGET_DATE),
    "c": SetSort(SortMode.COMPLETION),
}
BROWSE_KEYS: dict[int, Command] = {
    curses.KEY_UP: MoveUp(),
    curses.KEY_DOWN: MoveDown(),
}

FORM_CHARS: dict[str, Command] = {
    "\x1b": Cancel(),
    "\n": Submit(),
    "\r": Submit(),
    "\t": NextField(),
    "\x7f": Backspace(),
    "\x08": Backspace(),
}
FORM_KEYS: dict[int, Command] = {
    curses.KEY_ENTER: Submit(),
    curses.KEY_DOWN: NextField(),
    curses.KEY_BTAB: PrevField(),
    curses.KEY_UP: PrevField(),
    curses.KEY_BACKSPACE: Backspace(),
}


def _as_char(key: int, ch: str | None) -> str | None:
    if ch is not None:
        return ch
    # int だけ渡ってきた場合、ASCII の範囲は文字として扱う
    if 0 <= key < 128:
        return chr(key)
    return None


def decode_browse_key(key: int, ch: str | None = None) -> Command | None:
    c = _as_char(key, ch)
    if c is None:
        return BROWSE_KEYS.get(key)
    # 英字は大文字小文字を区別しない
    if "A" <= c <= "Z":
        c = c.lower()
    return BROWSE_CHARS.get(c)


def decode_form_key(key: int, ch: str | None = None) -> Command | None:
    c = _as_char(key, ch)
    if c is None:
        return FORM_KEYS.get(key)
    if c in FORM_CHARS:
        return FORM_CHARS[c]
    return InsertChar(c) if c.isprintable() else None


def decode_key(key: int, ch: str | None = None, *, in_form: bool) -> Command | None:
    """Translate a raw curses key into a logical command (None = ignored)."""
    if in_form:
        return decode_form_key(key, ch)
    return decode_browse_key(key, ch)
