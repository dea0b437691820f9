# Tests for the event bus and the app-event channel

import asyncio
import logging

import pytest

from policy_picker.exceptions.bus import EventBusError
from policy_picker.protocol.bus import AppEventSender, EventBus, app_event_channel
from policy_picker.protocol.events import EventTypes
from policy_picker.protocol.objects import AppEvent, AskForApproval, ChangeApprovalPolicy


@pytest.mark.asyncio
async def test_emit_runs_handlers_in_subscription_order():
    bus = EventBus()
    calls = []

    async def first(data):
        calls.append(("first", data))

    async def second(data):
        calls.append(("second", data))

    await bus.subscribe(EventTypes.AGENT_OP, first)
    await bus.subscribe(EventTypes.AGENT_OP, second)
    await bus.emit(EventTypes.AGENT_OP, "hello")

    assert calls == [("first", "hello"), ("second", "hello")]


@pytest.mark.asyncio
async def test_failing_handler_does_not_stop_the_bus(caplog):
    bus = EventBus()
    received = []

    async def broken(data):
        raise RuntimeError("boom")

    async def healthy(data):
        received.append(data)

    await bus.subscribe(EventTypes.AGENT_OP, broken)
    await bus.subscribe(EventTypes.AGENT_OP, healthy)
    with caplog.at_level(logging.ERROR, logger="EventBus"):
        await bus.emit(EventTypes.AGENT_OP, 1)

    assert received == [1]
    assert "boom" in caplog.text


@pytest.mark.asyncio
async def test_handler_unsubscribed_mid_emit_is_skipped():
    bus = EventBus()
    calls = []

    async def late(data):
        calls.append("late")

    async def remover(data):
        calls.append("remover")
        await bus.unsubscribe(EventTypes.AGENT_OP, late)

    await bus.subscribe(EventTypes.AGENT_OP, remover)
    await bus.subscribe(EventTypes.AGENT_OP, late)
    await bus.emit(EventTypes.AGENT_OP)

    assert calls == ["remover"]


@pytest.mark.asyncio
async def test_emit_without_subscribers_is_a_no_op():
    await EventBus().emit(EventTypes.AGENT_OP, {"x": 1})


@pytest.mark.asyncio
async def test_dispatch_pending_drains_channel_onto_bus():
    bus = EventBus()
    sender, queue = app_event_channel()
    ops = []

    async def on_op(op):
        ops.append(op)

    await bus.subscribe(EventTypes.AGENT_OP, on_op)
    op = ChangeApprovalPolicy(approval_policy=AskForApproval.ON_FAILURE)
    sender.send(AppEvent.agent_op(op))
    later = ChangeApprovalPolicy(approval_policy=AskForApproval.NEVER)
    sender.send(AppEvent.agent_op(later))

    assert await bus.dispatch_pending(queue) == 2
    assert ops == [op, later]
    assert queue.empty()
    assert await bus.dispatch_pending(queue) == 0


@pytest.mark.asyncio
async def test_dispatch_pending_rejects_foreign_items():
    queue: asyncio.Queue = asyncio.Queue()
    queue.put_nowait("not an event")
    with pytest.raises(EventBusError):
        await EventBus().dispatch_pending(queue)


def test_sender_logs_and_drops_when_channel_full(caplog):
    queue: asyncio.Queue = asyncio.Queue(maxsize=1)
    sender = AppEventSender(queue)
    event = AppEvent(type=EventTypes.AGENT_OP, payload="x")

    sender.send(event)
    with caplog.at_level(logging.ERROR, logger="AppEventSender"):
        sender.send(event)

    assert queue.qsize() == 1
    assert "channel is full" in caplog.text
