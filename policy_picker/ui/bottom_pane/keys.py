"""
ui/bottom_pane/keys.py
Terminal-agnostic key events delivered to bottom-pane views.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyCode(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESC = "esc"
    TAB = "tab"
    BACKSPACE = "backspace"
    CHAR = "char"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    char: Optional[str] = None

    @classmethod
    def character(cls, char: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, char)
