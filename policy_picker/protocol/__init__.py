from .events import EventTypes
from .objects import (
    APPROVAL_POLICY_OPTIONS,
    AppEvent,
    AskForApproval,
    ChangeApprovalPolicy,
)
from .bus import AppEventSender, EventBus, app_event_channel

__all__ = [
    "EventTypes",
    "EventBus",
    "AppEvent",
    "AppEventSender",
    "app_event_channel",
    "AskForApproval",
    "APPROVAL_POLICY_OPTIONS",
    "ChangeApprovalPolicy",
]
