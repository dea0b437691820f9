"""
ui/textual/pane_host.py
Textual widget that hosts a single BottomPaneView.
"""

import logging
from typing import List

from rich.segment import Segment
from textual import events
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from ..bottom_pane.bottom_pane_view import BottomPaneView
from ..bottom_pane.geometry import Buffer
from .keymap import key_event_from_textual

logger = logging.getLogger(__name__)


class BottomPaneHost(Widget, can_focus=True):
    """
    Feeds key presses to the hosted view and paints it line by line.
    Posts ViewCompleted once, the first time the view reports completion.
    """

    DEFAULT_CSS = """
    BottomPaneHost {
        height: 8;
        width: 100%;
    }
    """

    class ViewCompleted(Message):
        """The hosted view finished and can be dismissed."""

        def __init__(self, view: BottomPaneView):
            self.view = view
            super().__init__()

    def __init__(self, view: BottomPaneView, *, name=None, id=None, classes=None):
        super().__init__(name=name, id=id, classes=classes)
        self.view = view
        self._buffer = Buffer.empty(0, 0)
        self._dirty = True
        self._completion_posted = False

    def on_key(self, event: events.Key) -> None:
        if self.view.is_complete():
            return
        event.stop()
        self.view.handle_key_event(self, key_event_from_textual(event.key, event.character))
        self._dirty = True
        self.refresh()
        if self.view.is_complete() and not self._completion_posted:
            self._completion_posted = True
            logger.debug("Hosted view %s completed", type(self.view).__name__)
            self.post_message(self.ViewCompleted(self.view))

    def on_resize(self, event: events.Resize) -> None:
        self._dirty = True

    def _repaint(self) -> None:
        width, height = self.size
        self._buffer = Buffer.empty(width, height)
        self.view.render(self._buffer.area, self._buffer)
        self._dirty = False

    def render_line(self, y: int) -> Strip:
        width, height = self.size
        area = self._buffer.area
        if self._dirty or (area.width, area.height) != (width, height):
            self._repaint()
        if not 0 <= y < height:
            return Strip.blank(width)
        segments: List[Segment] = self._buffer.row_segments(y)
        return Strip(segments, width)
