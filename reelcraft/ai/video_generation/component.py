import asyncio
import threading
from typing import Any

from reelcraft.core import Component, Response, operation

from ._builder import build_submission_payload, validate_parameters
from ._models import (
    GenerationParameters,
    GenerationResult,
    OperationHandle,
    SubmissionPayload,
)


class VideoGeneration(Component):
    @operation()
    def validate(
        self, params: GenerationParameters, **kwargs: Any
    ) -> Response[None]:
        """
        Check that the parameters hold every input their mode needs.

        Args:
            params:
                Generation parameters.

        Raises:
            ValidationError: naming the missing input.
        """
        validate_parameters(params)
        return Response(result=None)

    @operation()
    def build(
        self, params: GenerationParameters, **kwargs: Any
    ) -> Response[SubmissionPayload]:
        """
        Build the submission payload for the parameters. No I/O.

        Args:
            params:
                Generation parameters.

        Raises:
            ValidationError: extending without a video reference.
        """
        return Response(result=build_submission_payload(params))

    @operation()
    def submit(
        self, payload: SubmissionPayload, **kwargs: Any
    ) -> Response[OperationHandle]:
        """
        Submit a payload and return the handle of the started operation.

        Args:
            payload:
                Submission payload.
        """
        raise NotImplementedError

    @operation()
    def get(
        self, handle: OperationHandle, **kwargs: Any
    ) -> Response[OperationHandle]:
        """
        Fetch the current status of an operation.

        Args:
            handle:
                Operation handle.
        """
        raise NotImplementedError

    @operation()
    def poll(
        self,
        handle: OperationHandle,
        cancel: threading.Event | None = None,
        **kwargs: Any,
    ) -> Response[OperationHandle]:
        """
        Poll an operation until it is done.

        Args:
            handle:
                Operation handle returned by submit.
            cancel:
                Event that aborts polling when set.

        Raises:
            OperationTimeoutError: not done within the attempt cap.
            OperationCancelledError: the cancel event was set.
        """
        raise NotImplementedError

    @operation()
    def resolve(
        self, handle: OperationHandle, **kwargs: Any
    ) -> Response[GenerationResult]:
        """
        Download the video of a finished operation to a local file.

        Args:
            handle:
                Terminal operation handle.

        Raises:
            GenerationFailedError: the operation produced no usable video.
            DownloadError: the video could not be fetched.
        """
        raise NotImplementedError

    @operation()
    def generate(
        self,
        params: GenerationParameters,
        cancel: threading.Event | None = None,
        **kwargs: Any,
    ) -> Response[GenerationResult]:
        """
        Generate a video: build, submit, poll and resolve.

        Args:
            params:
                Generation parameters.
            cancel:
                Event that aborts polling when set.
        """
        raise NotImplementedError

    @operation()
    async def avalidate(
        self, params: GenerationParameters, **kwargs: Any
    ) -> Response[None]:
        """
        Check that the parameters hold every input their mode needs.

        Args:
            params:
                Generation parameters.
        """
        validate_parameters(params)
        return Response(result=None)

    @operation()
    async def abuild(
        self, params: GenerationParameters, **kwargs: Any
    ) -> Response[SubmissionPayload]:
        """
        Build the submission payload for the parameters. No I/O.

        Args:
            params:
                Generation parameters.
        """
        return Response(result=build_submission_payload(params))

    @operation()
    async def asubmit(
        self, payload: SubmissionPayload, **kwargs: Any
    ) -> Response[OperationHandle]:
        """
        Submit a payload and return the handle of the started operation.

        Args:
            payload:
                Submission payload.
        """
        raise NotImplementedError

    @operation()
    async def aget(
        self, handle: OperationHandle, **kwargs: Any
    ) -> Response[OperationHandle]:
        """
        Fetch the current status of an operation.

        Args:
            handle:
                Operation handle.
        """
        raise NotImplementedError

    @operation()
    async def apoll(
        self,
        handle: OperationHandle,
        cancel: asyncio.Event | None = None,
        **kwargs: Any,
    ) -> Response[OperationHandle]:
        """
        Poll an operation until it is done.

        Args:
            handle:
                Operation handle returned by submit.
            cancel:
                Event that aborts polling when set.
        """
        raise NotImplementedError

    @operation()
    async def aresolve(
        self, handle: OperationHandle, **kwargs: Any
    ) -> Response[GenerationResult]:
        """
        Download the video of a finished operation to a local file.

        Args:
            handle:
                Terminal operation handle.
        """
        raise NotImplementedError

    @operation()
    async def agenerate(
        self,
        params: GenerationParameters,
        cancel: asyncio.Event | None = None,
        **kwargs: Any,
    ) -> Response[GenerationResult]:
        """
        Generate a video: build, submit, poll and resolve.

        Args:
            params:
                Generation parameters.
            cancel:
                Event that aborts polling when set.
        """
        raise NotImplementedError
