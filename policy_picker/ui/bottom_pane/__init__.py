"""Bottom pane contract and the primitives views render with.

Concrete views live in their own modules, e.g.
`ui.bottom_pane.change_approval_policy_view`.
"""

from .bottom_pane_view import BottomPaneView
from .geometry import Buffer, Cell, Rect
from .keys import KeyCode, KeyEvent

__all__ = [
    "BottomPaneView",
    "Buffer",
    "Cell",
    "Rect",
    "KeyCode",
    "KeyEvent",
]
