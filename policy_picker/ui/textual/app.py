"""
ui/textual/app.py
Minimal Textual app that opens the approval policy picker and reports the choice.
"""

import logging
from typing import Optional

from textual.app import App, ComposeResult

from ...protocol.bus import EventBus, app_event_channel
from ...protocol.events import EventTypes
from ...protocol.objects import AskForApproval, ChangeApprovalPolicy
from ..bottom_pane.change_approval_policy_view import ChangeApprovalPolicyView
from .pane_host import BottomPaneHost

logger = logging.getLogger(__name__)


class PolicyPickerApp(App[Optional[AskForApproval]]):
    """
    Shows the picker, relays its AppEvents onto the EventBus and exits
    with the chosen policy (None when cancelled).
    """

    CSS = """
    Screen {
        align: center bottom;
    }
    """

    def __init__(self, current_policy: AskForApproval, event_bus: Optional[EventBus] = None):
        super().__init__()
        self.current_policy = current_policy
        self.event_bus = event_bus or EventBus()
        self.app_event_tx, self._app_events = app_event_channel()
        self.chosen_policy: Optional[AskForApproval] = None

    def compose(self) -> ComposeResult:
        view = ChangeApprovalPolicyView(self.app_event_tx, self.current_policy)
        yield BottomPaneHost(view, id="bottom-pane")

    async def on_mount(self) -> None:
        await self.event_bus.subscribe(EventTypes.AGENT_OP, self._on_agent_op)
        self.query_one(BottomPaneHost).focus()

    async def _on_agent_op(self, op) -> None:
        if isinstance(op, ChangeApprovalPolicy):
            self.chosen_policy = op.approval_policy

    async def on_bottom_pane_host_view_completed(
        self, message: BottomPaneHost.ViewCompleted
    ) -> None:
        dispatched = await self.event_bus.dispatch_pending(self._app_events)
        logger.info("Picker closed (%d event(s) dispatched)", dispatched)
        self.exit(self.chosen_policy)
