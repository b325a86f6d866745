from __future__ import annotations

from typing import IO

from reelcraft.content.file import FileData, encode_file
from reelcraft.core.exceptions import BadRequestError


class VideoData(FileData):
    media_type: str | None = "video/mp4"

    @staticmethod
    def load(
        video: str | bytes | IO[bytes],
        media_type: str | None = None,
    ) -> VideoData:
        data = encode_file(video, media_type=media_type, model=VideoData)
        if data.media_type is None:
            data.media_type = "video/mp4"
        elif not data.media_type.startswith("video/"):
            raise BadRequestError(
                f"Not a video file: {data.source} ({data.media_type})"
            )
        return data
