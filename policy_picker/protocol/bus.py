import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Tuple

from ..exceptions.bus import EventBusError
from .events import EventTypes
from .objects import AppEvent

# Type definition for event handlers
EventHandler = Callable[[Any], Awaitable[None]]


class EventBus:
    """
    Asynchronous Event Bus.

    Design Philosophy:
    - Locked registration: subscriber lists are only changed under the lock.
    - Snapshot Execution: Iterates over a copy of handlers to allow
      dynamic subscription changes while emitting.
    - Sequential Consistency: Handlers run in order to preserve state integrity.
    """

    def __init__(self):
        self._lock = asyncio.Lock()
        self._subscribers: Dict[EventTypes, List[EventHandler]] = {}
        self._logger = logging.getLogger("EventBus")

    async def subscribe(self, event_type: EventTypes, handler: EventHandler) -> None:
        """
        Register a callback for a specific event type.
        """
        async with self._lock:
            self._subscribers.setdefault(event_type, []).append(handler)

    async def unsubscribe(self, event_type: EventTypes, handler: EventHandler) -> None:
        async with self._lock:
            handlers = self._subscribers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

    async def emit(self, event_type: EventTypes, data: Any = None) -> None:
        """
        Emit an event to all subscribers.
        """
        if event_type not in self._subscribers:
            return

        async with self._lock:
            handlers_snapshot = list(self._subscribers.get(event_type, []))

        for handler in handlers_snapshot:
            # Skip handlers unsubscribed by an earlier handler in this emit.
            async with self._lock:
                if handler not in self._subscribers.get(event_type, []):
                    continue

            try:
                await handler(data)
            except Exception as e:
                # Log error but keep the bus alive (Fail-soft)
                self._logger.error(
                    f"Error in handler for {event_type.value}: {e}", exc_info=True
                )

    async def dispatch_pending(self, queue: "asyncio.Queue[AppEvent]") -> int:
        """
        Drain everything currently queued on an app-event channel and emit it.
        Returns the number of events dispatched.
        """
        dispatched = 0
        while True:
            try:
                event = queue.get_nowait()
            except asyncio.QueueEmpty:
                return dispatched
            try:
                if not isinstance(event, AppEvent):
                    raise EventBusError(
                        f"Unexpected item on app-event queue: {event!r}",
                        details={"item_type": type(event).__name__},
                    )
                await self.emit(event.type, event.payload)
                dispatched += 1
            finally:
                queue.task_done()


class AppEventSender:
    """
    Fire-and-forget handle the UI uses to post AppEvents to the host.
    """

    def __init__(self, queue: "asyncio.Queue[AppEvent]"):
        self._queue = queue
        self._logger = logging.getLogger("AppEventSender")

    def send(self, event: AppEvent) -> None:
        # Senders never branch on delivery; a full channel is the host's problem.
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            self._logger.error(f"Failed to send event {event.type.value}: channel is full")


def app_event_channel(maxsize: int = 0) -> Tuple[AppEventSender, "asyncio.Queue[AppEvent]"]:
    """Create a sender and the queue it feeds."""
    queue: "asyncio.Queue[AppEvent]" = asyncio.Queue(maxsize=maxsize)
    return AppEventSender(queue), queue
