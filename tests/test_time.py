import unittest
from datetime import date

from shimekiri.util.time import format_date, parse_date, today


class TestParseDate(unittest.TestCase):
    def test_valid(self) -> None:
        r = parse_date("2025-01-01")
        assert r.is_ok()
        assert r.unwrap() == date(2025, 1, 1)

    def test_strips_whitespace(self) -> None:
        assert parse_date("  2025-02-03 ").unwrap() == date(2025, 2, 3)

    def test_invalid_calendar_date(self) -> None:
        r = parse_date("2024-13-40")
        assert r.is_err()
        assert "2024-13-40" in r.unwrap_err()

    def test_empty(self) -> None:
        assert parse_date("").is_err()

    def test_other_format(self) -> None:
        assert parse_date("01/02/2025").is_err()
        assert parse_date("2025-01-01T10:00:00").is_err()


class TestFormatDate(unittest.TestCase):
    def test_zero_padded(self) -> None:
        assert format_date(date(2025, 3, 4)) == "2025-03-04"


class TestToday(unittest.TestCase):
    def test_returns_date(self) -> None:
        d = today()
        assert isinstance(d, date)
        assert parse_date(format_date(d)).unwrap() == d


if __name__ == "__main__":
    unittest.main()
