from __future__ import annotations

import logging
import mimetypes
import os
import tempfile
from urllib.parse import unquote

from reelcraft.core.exceptions import GenerationFailedError

from ._models import (
    GeneratedVideo,
    GenerationResult,
    OperationHandle,
    VideoReference,
)

logger = logging.getLogger(__name__)


def select_video(handle: OperationHandle) -> GeneratedVideo:
    """Return the first generated video of a terminal handle.

    Raises:
        GenerationFailedError: no response, no videos, or no URI.
    """
    if handle.response is None:
        logger.error("Operation %s failed: %s", handle.name, handle.error)
        message = "No videos generated."
        if handle.error:
            message = f"{message} {handle.error}"
        raise GenerationFailedError(message, reason="no_response")
    videos = handle.response.videos
    if not videos:
        raise GenerationFailedError(
            "Video generation completed but no videos were returned. This "
            "may indicate an issue with the API or the request parameters.",
            reason="no_videos",
        )
    video = videos[0]
    if not video.uri:
        raise GenerationFailedError(
            "Generated video is missing a URI.", reason="missing_uri"
        )
    return video


def decode_uri(uri: str) -> str:
    return unquote(uri)


def materialize(
    video: GeneratedVideo,
    content: bytes,
    output_dir: str | None = None,
) -> GenerationResult:
    """Write fetched bytes to a new local file.

    The file belongs to the caller, who removes it with
    `GenerationResult.release()`.
    """
    uri = video.uri or ""
    media_type = video.media_type or "video/mp4"
    suffix = mimetypes.guess_extension(media_type) or ".mp4"
    if output_dir is not None:
        os.makedirs(output_dir, exist_ok=True)
    fd, path = tempfile.mkstemp(
        prefix="reelcraft-", suffix=suffix, dir=output_dir
    )
    with os.fdopen(fd, "wb") as f:
        f.write(content)
    logger.info("Saved %d bytes to %s", len(content), path)
    return GenerationResult(
        path=path,
        uri=decode_uri(uri),
        reference=VideoReference(uri=uri, media_type=video.media_type),
        media_type=media_type,
        size=len(content),
    )
