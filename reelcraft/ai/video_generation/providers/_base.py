from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any

from reelcraft.core import Provider, Response

from .._builder import build_submission_payload
from .._models import (
    GenerationParameters,
    GenerationResult,
    OperationHandle,
    SubmissionPayload,
)
from .._polling import (
    DEFAULT_MAX_POLL_ATTEMPTS,
    DEFAULT_POLL_INTERVAL,
    OperationPoller,
)
from .._resolver import decode_uri, materialize, select_video

logger = logging.getLogger(__name__)


class BaseVideoGenerationProvider(Provider):
    """Submit, poll and resolve flow shared by video generation providers.

    Providers implement `submit`, `get` and `_fetch` (plus their async
    counterparts); everything else is built on those.
    """

    poll_interval: float
    max_poll_attempts: int
    output_dir: str | None

    def __init__(
        self,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        max_poll_attempts: int = DEFAULT_MAX_POLL_ATTEMPTS,
        output_dir: str | None = None,
        **kwargs: Any,
    ):
        self.poll_interval = poll_interval
        self.max_poll_attempts = max_poll_attempts
        self.output_dir = output_dir
        super().__init__(**kwargs)

    def submit(
        self, payload: SubmissionPayload, **kwargs: Any
    ) -> Response[OperationHandle]:
        raise NotImplementedError(
            "Submit method must be implemented by provider."
        )

    async def asubmit(
        self, payload: SubmissionPayload, **kwargs: Any
    ) -> Response[OperationHandle]:
        raise NotImplementedError(
            "Submit method must be implemented by provider."
        )

    def get(
        self, handle: OperationHandle, **kwargs: Any
    ) -> Response[OperationHandle]:
        raise NotImplementedError(
            "Get method must be implemented by provider."
        )

    async def aget(
        self, handle: OperationHandle, **kwargs: Any
    ) -> Response[OperationHandle]:
        raise NotImplementedError(
            "Get method must be implemented by provider."
        )

    def _fetch(self, uri: str) -> bytes:
        raise NotImplementedError

    async def _afetch(self, uri: str) -> bytes:
        raise NotImplementedError

    def poll(
        self,
        handle: OperationHandle,
        cancel: threading.Event | None = None,
        **kwargs: Any,
    ) -> Response[OperationHandle]:
        handle = self._get_poller().poll(
            handle,
            refresh=lambda h: self.get(h).result,
            cancel=cancel,
        )
        return Response(result=handle)

    async def apoll(
        self,
        handle: OperationHandle,
        cancel: asyncio.Event | None = None,
        **kwargs: Any,
    ) -> Response[OperationHandle]:
        async def _refresh(h: OperationHandle) -> OperationHandle:
            return (await self.aget(h)).result

        handle = await self._get_poller().apoll(
            handle, refresh=_refresh, cancel=cancel
        )
        return Response(result=handle)

    def resolve(
        self, handle: OperationHandle, **kwargs: Any
    ) -> Response[GenerationResult]:
        video = select_video(handle)
        url = decode_uri(video.uri or "")
        logger.info("Fetching video from %s", url)
        content = self._fetch(url)
        return Response(result=materialize(video, content, self.output_dir))

    async def aresolve(
        self, handle: OperationHandle, **kwargs: Any
    ) -> Response[GenerationResult]:
        video = select_video(handle)
        url = decode_uri(video.uri or "")
        logger.info("Fetching video from %s", url)
        content = await self._afetch(url)
        return Response(result=materialize(video, content, self.output_dir))

    def generate(
        self,
        params: GenerationParameters,
        cancel: threading.Event | None = None,
        **kwargs: Any,
    ) -> Response[GenerationResult]:
        payload = build_submission_payload(params)
        logger.info(
            "Submitting %s generation with %s", params.mode, payload.model
        )
        handle = self.submit(payload).result
        logger.info("Operation %s started", handle.name)
        handle = self.poll(handle, cancel=cancel).result
        return self.resolve(handle)

    async def agenerate(
        self,
        params: GenerationParameters,
        cancel: asyncio.Event | None = None,
        **kwargs: Any,
    ) -> Response[GenerationResult]:
        payload = build_submission_payload(params)
        logger.info(
            "Submitting %s generation with %s", params.mode, payload.model
        )
        handle = (await self.asubmit(payload)).result
        logger.info("Operation %s started", handle.name)
        handle = (await self.apoll(handle, cancel=cancel)).result
        return await self.aresolve(handle)

    def _get_poller(self) -> OperationPoller:
        return OperationPoller(
            interval=self.poll_interval,
            max_attempts=self.max_poll_attempts,
        )
