import unicodedata


def _char_width(ch: str) -> int:
    """Calculate the width of a character in the terminal."""
    if len(ch) == 0:
        return 0
    # 制御文字
    if ch < " ":
        return 0
    # 結合文字 (濁点など)
    if unicodedata.combining(ch):
        return 0
    # 東アジア文字幅プロパティ
    # F: full-width, W: wide, A: ambiguous を2倍にして返す
    if unicodedata.east_asian_width(ch) in ("F", "W", "A"):
        return 2
    return 1


def _string_width(s: str) -> int:
    """Calculate the width of a string in the terminal."""
    return sum(map(_char_width, s))


def _fit_width(s: str, width: int) -> str:
    """Cut or pad `s` so that it occupies exactly `width` terminal cells."""
    out: list[str] = []
    used = 0
    for ch in s.replace("\n", " ").replace("\t", " "):
        w = _char_width(ch)
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out) + " " * max(0, width - used)


def progress_bar(completed: int, total: int, width: int) -> str:
    """Text gauge such as ``[#####-----]``."""
    inner = max(0, width - 2)
    ratio = completed / total if total > 0 else 0.0
    filled = int(inner * ratio)
    return "[" + "#" * filled + "-" * (inner - filled) + "]"
