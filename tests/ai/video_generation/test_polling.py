import asyncio
import threading

import pytest

from reelcraft.ai.video_generation import OperationHandle, OperationPoller
from reelcraft.ai.video_generation import _polling
from reelcraft.core.exceptions import (
    OperationCancelledError,
    OperationTimeoutError,
)

from ._providers import finished, pending


class Script:
    def __init__(self, *handles: OperationHandle):
        self.handles = list(handles)
        self.calls = 0

    def __call__(self, handle: OperationHandle) -> OperationHandle:
        self.calls += 1
        if len(self.handles) > 1:
            return self.handles.pop(0)
        return self.handles[0]

    async def arefresh(self, handle: OperationHandle) -> OperationHandle:
        return self(handle)


@pytest.fixture
def sleeps(monkeypatch) -> list[float]:
    recorded: list[float] = []

    def sleep(seconds: float) -> None:
        recorded.append(seconds)

    monkeypatch.setattr(_polling.time, "sleep", sleep)
    return recorded


def test_done_on_third_poll(sleeps: list[float]):
    script = Script(pending(), pending(), finished())
    handle = OperationPoller().poll(pending(), refresh=script)
    assert handle.done
    assert script.calls == 3
    assert sleeps == [10.0, 10.0, 10.0]


def test_already_done(sleeps: list[float]):
    script = Script(finished())
    handle = OperationPoller().poll(finished(), refresh=script)
    assert handle.done
    assert script.calls == 0
    assert sleeps == []


def test_timeout(sleeps: list[float]):
    script = Script(pending())
    with pytest.raises(OperationTimeoutError) as exc_info:
        OperationPoller().poll(pending(), refresh=script)
    assert script.calls == 60
    assert len(sleeps) == 60
    assert str(exc_info.value) == (
        "Video generation timed out after 10 minutes. Please try again."
    )


def test_done_on_last_attempt(sleeps: list[float]):
    script = Script(*([pending()] * 4), finished())
    handle = OperationPoller(max_attempts=5).poll(pending(), refresh=script)
    assert handle.done
    assert script.calls == 5


def test_timeout_message_in_seconds(sleeps: list[float]):
    with pytest.raises(OperationTimeoutError) as exc_info:
        OperationPoller(interval=2, max_attempts=3).poll(
            pending(), refresh=Script(pending())
        )
    assert "6 seconds" in str(exc_info.value)


def test_cancel():
    script = Script(pending())
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(OperationCancelledError):
        OperationPoller(interval=0.01).poll(
            pending(), refresh=script, cancel=cancel
        )
    assert script.calls == 0


def test_cancel_from_another_thread():
    script = Script(pending())
    cancel = threading.Event()
    timer = threading.Timer(0.05, cancel.set)
    timer.start()
    try:
        with pytest.raises(OperationCancelledError):
            OperationPoller(interval=0.01, max_attempts=1000).poll(
                pending(), refresh=script, cancel=cancel
            )
    finally:
        timer.cancel()
    assert 0 < script.calls < 1000


@pytest.mark.asyncio
async def test_apoll(monkeypatch):
    recorded: list[float] = []

    async def asleep(seconds: float) -> None:
        recorded.append(seconds)

    monkeypatch.setattr(_polling.asyncio, "sleep", asleep)
    script = Script(pending(), finished())
    handle = await OperationPoller().apoll(
        pending(), refresh=script.arefresh
    )
    assert handle.done
    assert script.calls == 2
    assert recorded == [10.0, 10.0]


@pytest.mark.asyncio
async def test_apoll_timeout():
    script = Script(pending())
    with pytest.raises(OperationTimeoutError):
        await OperationPoller(interval=0, max_attempts=4).apoll(
            pending(), refresh=script.arefresh
        )
    assert script.calls == 4


@pytest.mark.asyncio
async def test_apoll_cancel():
    script = Script(pending())
    cancel = asyncio.Event()

    async def refresh(handle: OperationHandle) -> OperationHandle:
        cancel.set()
        return await script.arefresh(handle)

    with pytest.raises(OperationCancelledError):
        await OperationPoller(interval=0.01).apoll(
            pending(), refresh=refresh, cancel=cancel
        )
    assert script.calls == 1
