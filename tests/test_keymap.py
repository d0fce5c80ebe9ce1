import curses
import unittest

from shimekiri.core.commands import (
    Backspace,
    Cancel,
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
from shimekiri.interfaces.tui.keymap import decode_key


class TestBrowseKeys(unittest.TestCase):
    def test_bindings(self) -> None:
        cases = {
            ord("q"): Quit(),
            27: Quit(),
            curses.KEY_UP: MoveUp(),
            curses.KEY_DOWN: MoveDown(),
            ord(" "): ToggleSelected(),
            ord("n"): StartCreate(),
            ord("e"): StartEdit(),
            ord("d"): DeleteSelected(),
            ord("s"): SetSort(SortMode.CREATED_DATE),
            ord("t"): SetSort(SortMode.TARGET_DATE),
            ord("c"): SetSort(SortMode.COMPLETION),
        }
        for key, expected in cases.items():
            assert decode_key(key, in_form=False) == expected

    def test_upper_case_letters(self) -> None:
        assert decode_key(ord("N"), "N", in_form=False) == StartCreate()
        assert decode_key(ord("T"), "T", in_form=False) == SetSort(SortMode.TARGET_DATE)

    def test_unknown_key(self) -> None:
        assert decode_key(ord("z"), "z", in_form=False) is None

    def test_accented_letters_are_not_arrow_keys(self) -> None:
        assert decode_key(ord("ă"), "ă", in_form=False) is None
        assert decode_key(ord("Ă"), "Ă", in_form=False) is None


class TestFormKeys(unittest.TestCase):
    def test_control_keys(self) -> None:
        assert decode_key(27, "\x1b", in_form=True) == Cancel()
        assert decode_key(10, "\n", in_form=True) == Submit()
        assert decode_key(curses.KEY_ENTER, in_form=True) == Submit()
        assert decode_key(9, "\t", in_form=True) == NextField()
        assert decode_key(curses.KEY_BTAB, in_form=True) == PrevField()
        assert decode_key(127, "\x7f", in_form=True) == Backspace()
        assert decode_key(curses.KEY_BACKSPACE, in_form=True) == Backspace()

    def test_letters_are_text_in_form(self) -> None:
        # browsing ではコマンドになる文字も、フォームでは入力文字
        assert decode_key(ord("q"), "q", in_form=True) == InsertChar("q")
        assert decode_key(ord(" "), " ", in_form=True) == InsertChar(" ")

    def test_wide_char(self) -> None:
        assert decode_key(ord("締"), "締", in_form=True) == InsertChar("締")
        # 文字コードが KEY_BTAB / KEY_BACKSPACE / KEY_ENTER / KEY_UP と重なる文字
        for ch in ("š", "ć", "ŗ", "ă", "Ă"):
            assert decode_key(ord(ch), ch, in_form=True) == InsertChar(ch)

    def test_int_only_ascii(self) -> None:
        assert decode_key(ord("a"), in_form=True) == InsertChar("a")
        assert decode_key(curses.KEY_F1, in_form=True) is None


if __name__ == "__main__":
    unittest.main()
