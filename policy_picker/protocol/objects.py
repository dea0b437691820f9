from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple

from ..exceptions.config import InvalidApprovalPolicyError
from .events import EventTypes


class AskForApproval(str, Enum):
    """
    How much user confirmation the agent needs before acting.
    """

    UNLESS_TRUSTED = "unless-trusted"
    ON_FAILURE = "on-failure"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "AskForApproval":
        """Accept either the value ("on-failure") or the member name ("ON_FAILURE")."""
        if isinstance(text, cls):
            return text
        normalized = str(text).strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == normalized:
                return policy
        raise InvalidApprovalPolicyError(text, choices=[p.value for p in cls])


# Display and navigation order of the picker.
APPROVAL_POLICY_OPTIONS: Tuple[AskForApproval, ...] = (
    AskForApproval.UNLESS_TRUSTED,
    AskForApproval.ON_FAILURE,
    AskForApproval.NEVER,
)


@dataclass(frozen=True)
class ChangeApprovalPolicy:
    """
    Op asking the agent to switch to a new approval policy.
    """

    approval_policy: AskForApproval


@dataclass(frozen=True)
class AppEvent:
    """
    Payload placed on the app-event channel.
    """

    type: EventTypes
    payload: Any = None

    @classmethod
    def agent_op(cls, op: Any) -> "AppEvent":
        return cls(type=EventTypes.AGENT_OP, payload=op)
