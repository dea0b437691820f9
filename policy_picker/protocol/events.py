from enum import Enum


class EventTypes(str, Enum):
    """
    Names of events the UI hands to the host over the app-event channel.
    """

    # Operations for the agent (Upstream: UI -> Agent)
    AGENT_OP = "agent_op"
