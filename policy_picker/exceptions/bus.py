from .base import PickerBaseError


class EventBusError(PickerBaseError):
    """
    Failure in the event distribution system.

    Used when:
    - Something other than an AppEvent is found on an app-event queue.
    """

    pass
