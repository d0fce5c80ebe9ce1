from datetime import date, datetime

from pyresults import Err, Ok, Result

ISO_DATE_FMT = "%Y-%m-%d"


def today() -> date:
    """ローカルタイムゾーンでの今日の日付を返す。"""
    return datetime.now().astimezone().date()


def format_date(d: date) -> str:
    return d.strftime(ISO_DATE_FMT)


def parse_date(s: str) -> Result[date, str]:
    """`YYYY-MM-DD` 形式の文字列を date に変換する。

    Args:
        s: 変換する文字列 (前後の空白は無視する)

    Returns:
        Ok(date): 成功時
        Err(str): 失敗時 (例: 2024-13-40 のような存在しない日付)
    """
    text = s.strip()
    try:
        return Ok[date, str](datetime.strptime(text, ISO_DATE_FMT).date())
    except ValueError as e:
        return Err[date, str](f"Invalid date '{text}' (expected YYYY-MM-DD): {e}")
