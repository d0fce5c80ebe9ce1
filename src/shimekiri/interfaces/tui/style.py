STATUS_MARK_MAP = {
    "completed": "✓ Done",
    "overdue": "○ Pending",
    "normal": "○ Pending",
}

MAIN_THEME_COLOR = 1
DIALOG_BG_COLOR = 2
COMPLETED_COLOR = 3
OVERDUE_COLOR = 4
NORMAL_COLOR = 5
ACTIVE_FIELD_COLOR = 6
FOOTER_COLOR = 7

MAX_DIALOG_BOX_WIDTH = 80
PROGRESS_BAR_WIDTH = 32

# 一覧の列幅 (%)
COLUMN_RATIOS = (30, 40, 15, 15)
COLUMN_TITLES = ("Title", "Description", "Target Date", "Status")


class HeaderLines:
    """Header lines for the TUI."""

    @classmethod
    def height(cls) -> int:
        return 3

    @classmethod
    def title(cls, sort_label: str) -> str:
        return f"--- shimekiri (TUI) > Todo List [{sort_label}] ---"

    @classmethod
    def progress(cls, completed: int, total: int, bar: str) -> str:
        return f"Progress: {bar} {completed}/{total} tasks completed"


class FooterLines:
    """Footer lines for the TUI."""

    @classmethod
    def height(cls) -> int:
        return 3

    @classmethod
    def help(cls) -> list[str]:
        return [
            "[ESC/q: quit] [↑/↓: navigate] [Space: toggle] [(N)ew] [(E)dit] [(D)elete]",
            "[(S)ort by date] [(T)arget] [(C)ompletion] -- overdue: red, completed: green",
        ]

    @classmethod
    def dialog_hint(cls) -> str:
        return "[Tab/Shift+Tab: Move, Enter: Save, Esc: Cancel]"
