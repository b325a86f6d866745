import base64

from reelcraft.core import DataModel


class FileData(DataModel):
    source: str | None = None
    """File name or path the content was read from."""

    content: str
    """Base64 encoded file content."""

    media_type: str | None = None
    """MIME type of the content."""

    def get_bytes(self) -> bytes:
        return base64.b64decode(self.content)
