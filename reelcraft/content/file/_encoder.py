import base64
import mimetypes
import os
from typing import IO, TypeVar

from reelcraft.core.exceptions import BadRequestError

from ._models import FileData

T = TypeVar("T", bound=FileData)


def encode_file(
    file: str | bytes | IO[bytes],
    *,
    source: str | None = None,
    media_type: str | None = None,
    model: type[T] = FileData,  # type: ignore[assignment]
) -> T:
    """Read a file into a base64 encoded data model.

    Args:
        file:
            Local path, raw bytes or a binary stream.
        source:
            File name to record. Defaults to the path or the stream name.
        media_type:
            MIME type. Guessed from the file name when omitted.
        model:
            Data model to build, `FileData` or a subclass.

    Returns:
        Encoded file data.
    """
    if isinstance(file, str):
        if not os.path.isfile(file):
            raise BadRequestError(f"File not found: {file}")
        with open(file, "rb") as f:
            content = f.read()
        source = source or os.path.basename(file)
    elif isinstance(file, bytes):
        content = file
    else:
        content = file.read()
        name = getattr(file, "name", None)
        if source is None and isinstance(name, str):
            source = os.path.basename(name)

    if not content:
        raise BadRequestError(
            f"Failed to read file as base64: {source or 'empty content'}"
        )
    if media_type is None and source:
        media_type, _ = mimetypes.guess_type(source)
    return model(
        source=source,
        content=base64.b64encode(content).decode("ascii"),
        media_type=media_type,
    )
