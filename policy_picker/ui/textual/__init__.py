"""Textual front end for bottom-pane views."""

from .app import PolicyPickerApp
from .keymap import key_event_from_textual
from .pane_host import BottomPaneHost

__all__ = ["PolicyPickerApp", "BottomPaneHost", "key_event_from_textual"]
