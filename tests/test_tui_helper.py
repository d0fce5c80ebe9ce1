import unittest

from shimekiri.interfaces.tui.helper import _fit_width, _string_width, progress_bar


class TestStringWidth(unittest.TestCase):
    def test_ascii(self) -> None:
        assert _string_width("abc") == 3

    def test_wide(self) -> None:
        assert _string_width("締切") == 4


class TestFitWidth(unittest.TestCase):
    def test_pads(self) -> None:
        assert _fit_width("ab", 5) == "ab   "

    def test_cuts(self) -> None:
        assert _fit_width("abcdef", 3) == "abc"

    def test_does_not_split_wide_char(self) -> None:
        out = _fit_width("締切日", 5)
        assert out == "締切 "
        assert _string_width(out) == 5

    def test_newlines_flattened(self) -> None:
        assert _fit_width("a\nb", 3) == "a b"


class TestProgressBar(unittest.TestCase):
    def test_empty_total(self) -> None:
        assert progress_bar(0, 0, 6) == "[----]"

    def test_half(self) -> None:
        assert progress_bar(1, 2, 6) == "[##--]"

    def test_full(self) -> None:
        assert progress_bar(3, 3, 6) == "[####]"


if __name__ == "__main__":
    unittest.main()
