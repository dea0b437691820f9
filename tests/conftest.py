import asyncio

import pytest

from policy_picker.config.settings import get_settings
from policy_picker.protocol.bus import app_event_channel
from policy_picker.protocol.objects import AskForApproval
from policy_picker.ui.approval_policy_widget import ChangeApprovalPolicyWidget


@pytest.fixture
def channel():
    """A sender plus the queue it writes to."""
    return app_event_channel()


@pytest.fixture
def widget(channel):
    sender, _ = channel
    return ChangeApprovalPolicyWidget(sender, AskForApproval.UNLESS_TRUSTED)


@pytest.fixture
def clean_settings(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    for name in ("LOG_LEVEL", "LOG_FILE", "APPROVAL_POLICY"):
        monkeypatch.delenv(f"POLICY_PICKER_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def drain():
    """Pop everything currently sitting on an app-event queue."""

    def _drain(queue: asyncio.Queue) -> list:
        items = []
        while not queue.empty():
            items.append(queue.get_nowait())
        return items

    return _drain
