"""
ui/bottom_pane/bottom_pane_view.py
Contract every modal shown in the bottom pane implements.
"""

from abc import ABC, abstractmethod
from typing import Any

from .geometry import Buffer, Rect
from .keys import KeyEvent


class BottomPaneView(ABC):
    """
    The bottom pane drives its active view through these three calls only,
    so unrelated modals can be swapped in without the pane knowing them.
    """

    @abstractmethod
    def handle_key_event(self, pane: Any, key_event: KeyEvent) -> None:
        """Handle one key press. `pane` is the hosting pane and may be None."""

    @abstractmethod
    def is_complete(self) -> bool:
        """True once the view is finished and can be discarded."""

    @abstractmethod
    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw into `buf`, touching only cells inside `area`."""
