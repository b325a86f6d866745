import base64
import io

import pytest

from reelcraft.content.file import FileData, encode_file
from reelcraft.content.image import ImageData
from reelcraft.content.video import VideoData
from reelcraft.core.exceptions import BadRequestError


def test_encode_path(tmp_path):
    path = tmp_path / "frame.jpg"
    path.write_bytes(b"jpeg-bytes")
    data = encode_file(str(path))
    assert isinstance(data, FileData)
    assert data.source == "frame.jpg"
    assert data.media_type == "image/jpeg"
    assert data.get_bytes() == b"jpeg-bytes"
    assert data.content == base64.b64encode(b"jpeg-bytes").decode("ascii")


def test_encode_bytes_and_stream():
    data = encode_file(b"raw", media_type="image/webp")
    assert data.source is None
    assert data.media_type == "image/webp"

    stream = io.BytesIO(b"streamed")
    stream.name = "/tmp/clip.mp4"
    data = encode_file(stream)
    assert data.source == "clip.mp4"
    assert data.media_type == "video/mp4"


def test_encode_missing_file(tmp_path):
    with pytest.raises(BadRequestError):
        encode_file(str(tmp_path / "missing.png"))


def test_encode_empty_file(tmp_path):
    path = tmp_path / "empty.png"
    path.write_bytes(b"")
    with pytest.raises(BadRequestError) as exc_info:
        encode_file(str(path))
    assert "empty.png" in str(exc_info.value)


def test_image_load(tmp_path):
    path = tmp_path / "style.gif"
    path.write_bytes(b"GIF89a")
    image = ImageData.load(str(path))
    assert image.media_type == "image/gif"
    assert ImageData.load(b"unknown").media_type == "image/png"


def test_image_load_rejects_video(tmp_path):
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"mp4")
    with pytest.raises(BadRequestError):
        ImageData.load(str(path))


def test_video_load(tmp_path):
    path = tmp_path / "clip.mov"
    path.write_bytes(b"mov")
    assert VideoData.load(str(path)).media_type == "video/quicktime"
    assert VideoData.load(b"unknown").media_type == "video/mp4"
    with pytest.raises(BadRequestError):
        VideoData.load(b"png", media_type="image/png")
