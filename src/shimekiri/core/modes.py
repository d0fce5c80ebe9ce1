from dataclasses import dataclass, field
from typing import Literal

from shimekiri.core.form import Form

ModeName = Literal["browsing", "creating", "editing"]


@dataclass
class Browsing:
    name: ModeName = field(default="browsing", init=False)


@dataclass
class Creating:
    form: Form = field(default_factory=Form)
    name: ModeName = field(default="creating", init=False)


@dataclass
class Editing:
    edit_id: int
    form: Form = field(default_factory=Form)
    name: ModeName = field(default="editing", init=False)


AppMode = Browsing | Creating | Editing
FormMode = Creating | Editing
