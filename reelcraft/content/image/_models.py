from __future__ import annotations

from typing import IO

from reelcraft.content.file import FileData, encode_file
from reelcraft.core.exceptions import BadRequestError


class ImageData(FileData):
    media_type: str | None = "image/png"

    @staticmethod
    def load(
        image: str | bytes | IO[bytes],
        media_type: str | None = None,
    ) -> ImageData:
        data = encode_file(image, media_type=media_type, model=ImageData)
        if data.media_type is None:
            data.media_type = "image/png"
        elif not data.media_type.startswith("image/"):
            raise BadRequestError(
                f"Not an image file: {data.source} ({data.media_type})"
            )
        return data
