"""Logical commands consumed by the controller.

Raw key presses are decoded into these by the interface layer
(see ``shimekiri.interfaces.tui.keymap``).
"""

from dataclasses import dataclass

from shimekiri.core.sort import SortMode


# ---- browsing ----


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class MoveUp:
    pass


@dataclass(frozen=True)
class MoveDown:
    pass


@dataclass(frozen=True)
class ToggleSelected:
    pass


@dataclass(frozen=True)
class StartCreate:
    pass


@dataclass(frozen=True)
class StartEdit:
    pass


@dataclass(frozen=True)
class DeleteSelected:
    pass


@dataclass(frozen=True)
class SetSort:
    mode: SortMode


# ---- form ----


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class NextField:
    pass


@dataclass(frozen=True)
class PrevField:
    pass


@dataclass(frozen=True)
class InsertChar:
    char: str


@dataclass(frozen=True)
class Backspace:
    pass


BrowseCommand = Quit | MoveUp | MoveDown | ToggleSelected | StartCreate | StartEdit | DeleteSelected | SetSort
FormCommand = Cancel | Submit | NextField | PrevField | InsertChar | Backspace
Command = BrowseCommand | FormCommand
