import base64
import logging
from typing import Any

import httpx
from google.genai import types

from reelcraft._common.google_provider import GoogleProvider
from reelcraft.core import Response
from reelcraft.core.exceptions import DownloadError, UnauthorizedError

from .._models import (
    GeneratedVideo,
    ImagePayload,
    OperationHandle,
    OperationResponse,
    SubmissionPayload,
)
from .._polling import DEFAULT_MAX_POLL_ATTEMPTS, DEFAULT_POLL_INTERVAL
from ._base import BaseVideoGenerationProvider

logger = logging.getLogger(__name__)


class Google(GoogleProvider, BaseVideoGenerationProvider):
    download_timeout: float

    def __init__(
        self,
        vertexai: bool = False,
        project: str | None = None,
        location: str = "us-central1",
        api_key: str | None = None,
        service_account_info: str | dict | None = None,
        service_account_file: str | None = None,
        access_token: str | None = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        max_poll_attempts: int = DEFAULT_MAX_POLL_ATTEMPTS,
        output_dir: str | None = None,
        download_timeout: float = 120.0,
        nparams: dict[str, Any] | None = None,
        **kwargs,
    ):
        self.download_timeout = download_timeout
        super().__init__(
            vertexai=vertexai,
            project=project,
            location=location,
            api_key=api_key,
            service_account_info=service_account_info,
            service_account_file=service_account_file,
            access_token=access_token,
            nparams=nparams,
            poll_interval=poll_interval,
            max_poll_attempts=max_poll_attempts,
            output_dir=output_dir,
            **kwargs,
        )

    def submit(
        self, payload: SubmissionPayload, **kwargs: Any
    ) -> Response[OperationHandle]:
        args = self._convert_submit_args(payload)
        operation = self._get_client().models.generate_videos(**args)
        return Response(
            result=self._convert_operation(operation),
            native=dict(operation=operation),
        )

    async def asubmit(
        self, payload: SubmissionPayload, **kwargs: Any
    ) -> Response[OperationHandle]:
        args = self._convert_submit_args(payload)
        client = self._get_client()
        operation = await client.aio.models.generate_videos(**args)
        return Response(
            result=self._convert_operation(operation),
            native=dict(operation=operation),
        )

    def get(
        self, handle: OperationHandle, **kwargs: Any
    ) -> Response[OperationHandle]:
        operation = self._get_client().operations.get(
            types.GenerateVideosOperation(name=handle.name)
        )
        return Response(
            result=self._convert_operation(operation),
            native=dict(operation=operation),
        )

    async def aget(
        self, handle: OperationHandle, **kwargs: Any
    ) -> Response[OperationHandle]:
        client = self._get_client()
        operation = await client.aio.operations.get(
            types.GenerateVideosOperation(name=handle.name)
        )
        return Response(
            result=self._convert_operation(operation),
            native=dict(operation=operation),
        )

    def _fetch(self, uri: str) -> bytes:
        url, headers = self._get_fetch_request(uri)
        with httpx.Client(
            follow_redirects=True, timeout=self.download_timeout
        ) as client:
            res = client.get(url, headers=headers)
        return self._check_fetch_response(res)

    async def _afetch(self, uri: str) -> bytes:
        url, headers = self._get_fetch_request(uri)
        async with httpx.AsyncClient(
            follow_redirects=True, timeout=self.download_timeout
        ) as client:
            res = await client.get(url, headers=headers)
        return self._check_fetch_response(res)

    def _get_fetch_request(
        self, uri: str
    ) -> tuple[httpx.URL, dict[str, str]]:
        # Keep the query of the locator (alt=media).
        params, headers = self._get_fetch_auth()
        return httpx.URL(uri).copy_merge_params(params), headers

    def _get_fetch_auth(self) -> tuple[dict[str, str], dict[str, str]]:
        api_key = self._get_api_key()
        if api_key:
            return {"key": api_key}, {}
        if self.vertexai:
            return {}, {"Authorization": f"Bearer {self._get_token()}"}
        raise UnauthorizedError("No credential available to fetch the video.")

    def _check_fetch_response(self, res: httpx.Response) -> bytes:
        if not res.is_success:
            raise DownloadError(
                "Failed to fetch video: "
                f"{res.status_code} {res.reason_phrase}",
                fetch_status=res.status_code,
            )
        return res.content

    def _convert_submit_args(
        self, payload: SubmissionPayload
    ) -> dict[str, Any]:
        config: dict[str, Any] = {
            "number_of_videos": payload.config.number_of_videos,
            "resolution": payload.config.resolution,
        }
        if payload.config.aspect_ratio is not None:
            config["aspect_ratio"] = payload.config.aspect_ratio
        if payload.config.reference_images is not None:
            config["reference_images"] = [
                types.VideoGenerationReferenceImage(
                    image=self._convert_image(reference.image),
                    reference_type=str(reference.reference_type).upper(),
                )
                for reference in payload.config.reference_images
            ]
        if payload.config.last_frame is not None:
            config["last_frame"] = self._convert_image(
                payload.config.last_frame
            )

        args: dict[str, Any] = {
            "model": payload.model,
            "config": types.GenerateVideosConfig(**config),
        }
        if payload.prompt is not None:
            args["prompt"] = payload.prompt
        if payload.image is not None:
            args["image"] = self._convert_image(payload.image)
        if payload.video is not None:
            args["video"] = types.Video(
                uri=payload.video.uri, mime_type=payload.video.media_type
            )
        return args

    def _convert_image(self, image: ImagePayload) -> types.Image:
        return types.Image(
            image_bytes=base64.b64decode(image.image_bytes),
            mime_type=image.mime_type,
        )

    def _convert_operation(
        self, operation: types.GenerateVideosOperation
    ) -> OperationHandle:
        response = None
        if operation.response is not None:
            videos = []
            for generated in operation.response.generated_videos or []:
                video = generated.video
                videos.append(
                    GeneratedVideo(
                        uri=video.uri if video else None,
                        media_type=video.mime_type if video else None,
                    )
                )
            response = OperationResponse(videos=videos)
        error = None
        if operation.error:
            error = operation.error.get("message") or str(operation.error)
        return OperationHandle(
            name=operation.name or "",
            done=bool(operation.done) or error is not None,
            response=response,
            error=error,
        )
