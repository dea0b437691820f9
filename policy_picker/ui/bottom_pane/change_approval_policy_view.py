"""
ui/bottom_pane/change_approval_policy_view.py
Modal view for choosing an approval policy.
"""

from typing import Any

from ...protocol.bus import AppEventSender
from ...protocol.objects import AskForApproval
from ..approval_policy_widget import ChangeApprovalPolicyWidget
from .bottom_pane_view import BottomPaneView
from .geometry import Buffer, Rect
from .keys import KeyEvent


class ChangeApprovalPolicyView(BottomPaneView):
    """Forwards everything to a ChangeApprovalPolicyWidget."""

    def __init__(self, app_event_tx: AppEventSender, current_approval_policy: AskForApproval):
        self._widget = ChangeApprovalPolicyWidget(app_event_tx, current_approval_policy)

    def handle_key_event(self, pane: Any, key_event: KeyEvent) -> None:
        self._widget.handle_key_event(pane, key_event)

    def is_complete(self) -> bool:
        return self._widget.is_complete()

    def render(self, area: Rect, buf: Buffer) -> None:
        self._widget.render(area, buf)
