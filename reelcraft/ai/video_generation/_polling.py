from __future__ import annotations

import asyncio
import logging
import threading
import time
from typing import Awaitable, Callable

from reelcraft.core.exceptions import (
    OperationCancelledError,
    OperationTimeoutError,
)

from ._models import OperationHandle

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 10.0
DEFAULT_MAX_POLL_ATTEMPTS = 60


class OperationPoller:
    """Fixed cadence polling of a long running operation.

    Each attempt waits `interval` seconds, then refreshes the handle once.
    Polling stops when the handle is done; after `max_attempts` refreshes
    without completion an `OperationTimeoutError` is raised. There is no
    backoff and never more than one refresh in flight.
    """

    interval: float
    max_attempts: int

    def __init__(
        self,
        interval: float = DEFAULT_POLL_INTERVAL,
        max_attempts: int = DEFAULT_MAX_POLL_ATTEMPTS,
    ):
        self.interval = interval
        self.max_attempts = max_attempts

    def poll(
        self,
        handle: OperationHandle,
        refresh: Callable[[OperationHandle], OperationHandle],
        cancel: threading.Event | None = None,
    ) -> OperationHandle:
        attempts = 0
        while not handle.done and attempts < self.max_attempts:
            self._wait(cancel)
            attempts += 1
            logger.debug(
                "Polling %s (attempt %d/%d)",
                handle.name,
                attempts,
                self.max_attempts,
            )
            handle = refresh(handle)
        return self._check(handle, attempts)

    async def apoll(
        self,
        handle: OperationHandle,
        refresh: Callable[[OperationHandle], Awaitable[OperationHandle]],
        cancel: asyncio.Event | None = None,
    ) -> OperationHandle:
        attempts = 0
        while not handle.done and attempts < self.max_attempts:
            await self._await(cancel)
            attempts += 1
            logger.debug(
                "Polling %s (attempt %d/%d)",
                handle.name,
                attempts,
                self.max_attempts,
            )
            handle = await refresh(handle)
        return self._check(handle, attempts)

    def _wait(self, cancel: threading.Event | None) -> None:
        if cancel is None:
            time.sleep(self.interval)
        elif cancel.wait(self.interval):
            raise OperationCancelledError("Video generation was cancelled.")

    async def _await(self, cancel: asyncio.Event | None) -> None:
        if cancel is None:
            await asyncio.sleep(self.interval)
            return
        try:
            await asyncio.wait_for(cancel.wait(), timeout=self.interval)
        except asyncio.TimeoutError:
            return
        raise OperationCancelledError("Video generation was cancelled.")

    def _check(
        self, handle: OperationHandle, attempts: int
    ) -> OperationHandle:
        if not handle.done:
            raise OperationTimeoutError(
                "Video generation timed out after "
                f"{self._describe_bound()}. Please try again."
            )
        logger.info("Operation %s done after %d polls", handle.name, attempts)
        return handle

    def _describe_bound(self) -> str:
        seconds = self.interval * self.max_attempts
        if seconds >= 60 and seconds % 60 == 0:
            minutes = int(seconds // 60)
            return f"{minutes} minute{'s' if minutes != 1 else ''}"
        return f"{seconds:g} seconds"
