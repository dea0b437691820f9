"""
ui/textual/keymap.py
Translate Textual key names into bottom-pane KeyEvents.
"""

from typing import Optional

from ..bottom_pane.keys import KeyCode, KeyEvent

_NAMED_KEYS = {
    "up": KeyCode.UP,
    "down": KeyCode.DOWN,
    "left": KeyCode.LEFT,
    "right": KeyCode.RIGHT,
    "enter": KeyCode.ENTER,
    "escape": KeyCode.ESC,
    "tab": KeyCode.TAB,
    "backspace": KeyCode.BACKSPACE,
}


def key_event_from_textual(key: str, character: Optional[str] = None) -> KeyEvent:
    code = _NAMED_KEYS.get(key)
    if code is not None:
        return KeyEvent(code)
    if character is not None and len(character) == 1 and character.isprintable():
        return KeyEvent.character(character)
    return KeyEvent(KeyCode.OTHER)
