"""
ui/approval_policy_widget.py
Bottom-pane widget for switching the agent's approval policy.
"""

import io
import logging
from typing import Any, List, Tuple

from rich import box
from rich.console import Console
from rich.style import Style
from rich.text import Text

from ..protocol.bus import AppEventSender
from ..protocol.objects import (
    APPROVAL_POLICY_OPTIONS,
    AppEvent,
    AskForApproval,
    ChangeApprovalPolicy,
)
from .bottom_pane.geometry import Buffer, Rect
from .bottom_pane.keys import KeyCode, KeyEvent

logger = logging.getLogger(__name__)

HEADER_TEXT = "Switch approval policy"

PLAIN = Style.null()
GREEN_STYLE = Style(color="green")
BLUE_STYLE = Style(color="blue")

SELECTED_MARKER = "▶"

# Only used to wrap and style text; nothing is ever printed to it.
_measure_console = Console(file=io.StringIO(), width=80, legacy_windows=False)


class ChangeApprovalPolicyWidget:
    """
    Lets the user pick a new approval policy from a fixed list.

    Up/Down move the cursor (wrapping at both ends), Enter sends the
    highlighted policy to the app as an AgentOp and completes the widget,
    Esc completes it without sending anything. Once complete, every key
    is ignored.
    """

    def __init__(self, app_event_tx: AppEventSender, current_approval_policy: AskForApproval):
        self._app_event_tx = app_event_tx
        # Snapshot of the policy in force when the modal opened.
        self._change_prompt: Tuple[Text, ...] = (
            Text.assemble("Current policy: ", (str(current_approval_policy), GREEN_STYLE)),
            Text(""),
        )
        self._selected_option = 0
        self._complete = False

    @property
    def selected_option(self) -> int:
        return self._selected_option

    def is_complete(self) -> bool:
        return self._complete

    def _send_decision(self) -> None:
        policy = APPROVAL_POLICY_OPTIONS[self._selected_option]
        logger.info("Requesting approval policy change to %s", policy)
        self._app_event_tx.send(AppEvent.agent_op(ChangeApprovalPolicy(approval_policy=policy)))

    def handle_key_event(self, pane: Any, key_event: KeyEvent) -> None:
        if self._complete:
            return

        option_count = len(APPROVAL_POLICY_OPTIONS)
        code = key_event.code
        if code is KeyCode.UP:
            if self._selected_option == 0:
                self._selected_option = option_count - 1
            else:
                self._selected_option -= 1
        elif code is KeyCode.DOWN:
            self._selected_option = (self._selected_option + 1) % option_count
        elif code is KeyCode.ESC:
            logger.debug("Approval policy change cancelled")
            self._complete = True
        elif code is KeyCode.ENTER:
            self._send_decision()
            self._complete = True
        else:
            return

        logger.debug(
            "key=%s selected=%d complete=%s", code.value, self._selected_option, self._complete
        )

    # --- Rendering ---

    def _wrapped_prompt(self, width: int) -> List[Text]:
        if width <= 0:
            return []
        lines: List[Text] = []
        for line in self._change_prompt:
            lines.extend(line.wrap(_measure_console, width))
        return lines

    def prompt_height(self, width: int) -> int:
        """Rows the header needs when wrapped to `width` columns."""
        return len(self._wrapped_prompt(width))

    def render(self, area: Rect, buf: Buffer) -> None:
        area = area.intersection(buf.area)
        if area.is_empty:
            return

        _render_frame(area, buf)
        inner = area.inner()
        if inner.is_empty:
            return

        full_prompt_height = self.prompt_height(inner.width)
        min_response_rows = len(APPROVAL_POLICY_OPTIONS)
        # The option list always gets its rows; the header gives way first.
        prompt_height = min(full_prompt_height, max(0, inner.height - min_response_rows))

        prompt_chunk, response_chunk = inner.split_vertical(prompt_height)
        self._render_prompt(prompt_chunk, buf)
        self._render_options(response_chunk, buf)

    def _render_prompt(self, area: Rect, buf: Buffer) -> None:
        for row, line in enumerate(self._wrapped_prompt(area.width)[: area.height]):
            buf.set_segments(
                area.x, area.y + row, line.render(_measure_console), max_width=area.width
            )

    def _render_options(self, area: Rect, buf: Buffer) -> None:
        for idx, option in enumerate(APPROVAL_POLICY_OPTIONS[: area.height]):
            if idx == self._selected_option:
                prefix, style = SELECTED_MARKER, BLUE_STYLE
            else:
                prefix, style = " ", PLAIN
            line = Text(f"  {prefix} {option}")
            line.stylize(style)
            buf.set_segments(
                area.x, area.y + idx, line.render(_measure_console), max_width=area.width
            )


def _render_frame(area: Rect, buf: Buffer) -> None:
    """Rounded border around `area` with HEADER_TEXT on the top edge."""
    frame = box.ROUNDED
    last_x = area.right - 1
    last_y = area.bottom - 1

    top = frame.top_left + frame.top * max(0, area.width - 2)
    if area.width > 1:
        top += frame.top_right
    buf.set_string(area.x, area.y, top, max_width=area.width)

    if area.height > 1:
        bottom = frame.bottom_left + frame.bottom * max(0, area.width - 2)
        if area.width > 1:
            bottom += frame.bottom_right
        buf.set_string(area.x, last_y, bottom, max_width=area.width)

    for y in range(area.y + 1, last_y):
        buf.set_string(area.x, y, frame.mid_left)
        if area.width > 1:
            buf.set_string(last_x, y, frame.mid_right)

    if area.width > 2:
        buf.set_string(area.x + 1, area.y, HEADER_TEXT, max_width=area.width - 2)
