from __future__ import annotations

import os
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter

from reelcraft.content.image import ImageData
from reelcraft.content.video import VideoData
from reelcraft.core import DataModel, FrozenDataModel


class GenerationMode(str, Enum):
    TEXT_TO_VIDEO = "text_to_video"
    FRAMES_TO_VIDEO = "frames_to_video"
    REFERENCES_TO_VIDEO = "references_to_video"
    EXTEND_VIDEO = "extend_video"


class VeoModel(str, Enum):
    VEO_FAST = "veo-3.1-fast-generate-preview"
    VEO = "veo-3.1-generate-preview"


class AspectRatio(str, Enum):
    LANDSCAPE = "16:9"
    PORTRAIT = "9:16"


class Resolution(str, Enum):
    P720 = "720p"
    P1080 = "1080p"


class ReferenceType(str, Enum):
    ASSET = "asset"
    STYLE = "style"


MAX_REFERENCE_IMAGES = 3


class VideoReference(FrozenDataModel):
    """Service issued reference to a generated video.

    Required to extend that video. It is only ever taken from a service
    response and travels next to the local file, never in its place.
    """

    uri: str
    media_type: str | None = None


class BaseGenerationParameters(DataModel):
    prompt: str = ""
    """Free text prompt."""

    model: VeoModel = VeoModel.VEO_FAST
    """Requested model."""

    aspect_ratio: AspectRatio = AspectRatio.LANDSCAPE
    """Target aspect ratio."""

    resolution: Resolution = Resolution.P720
    """Target resolution."""


class TextToVideoParameters(BaseGenerationParameters):
    mode: Literal["text_to_video"] = "text_to_video"


class FramesToVideoParameters(BaseGenerationParameters):
    mode: Literal["frames_to_video"] = "frames_to_video"
    start_frame: ImageData | None = None
    end_frame: ImageData | None = None
    is_looping: bool = False


class ReferencesToVideoParameters(BaseGenerationParameters):
    mode: Literal["references_to_video"] = "references_to_video"
    reference_images: list[ImageData] = Field(
        default_factory=list, max_length=MAX_REFERENCE_IMAGES
    )
    style_image: ImageData | None = None


class ExtendVideoParameters(BaseGenerationParameters):
    mode: Literal["extend_video"] = "extend_video"
    input_video: VideoData | None = None
    """Local copy of the video, kept for display only."""

    video_reference: VideoReference | None = None
    """Reference of the video to extend."""

    end_frame: ImageData | None = None
    reference_images: list[ImageData] = Field(
        default_factory=list, max_length=MAX_REFERENCE_IMAGES
    )
    style_image: ImageData | None = None


GenerationParameters = Annotated[
    Union[
        TextToVideoParameters,
        FramesToVideoParameters,
        ReferencesToVideoParameters,
        ExtendVideoParameters,
    ],
    Field(discriminator="mode"),
]

_parameters_adapter: TypeAdapter[GenerationParameters] = TypeAdapter(
    GenerationParameters
)


def parse_parameters(obj: dict[str, Any]) -> GenerationParameters:
    """Validate a dict with a `mode` key into its parameter variant."""
    mode = obj.get("mode")
    if isinstance(mode, GenerationMode):
        obj = {**obj, "mode": mode.value}
    return _parameters_adapter.validate_python(obj)


class ImagePayload(DataModel):
    image_bytes: str
    """Base64 encoded image."""

    mime_type: str | None = None


class ReferenceImagePayload(DataModel):
    image: ImagePayload
    reference_type: ReferenceType


class SubmissionConfig(DataModel):
    number_of_videos: Literal[1] = 1
    resolution: Resolution
    aspect_ratio: AspectRatio | None = None
    reference_images: list[ReferenceImagePayload] | None = None
    last_frame: ImagePayload | None = None


class SubmissionPayload(DataModel):
    model: VeoModel
    config: SubmissionConfig
    prompt: str | None = None
    image: ImagePayload | None = None
    video: VideoReference | None = None

    def to_request(self) -> dict[str, Any]:
        """Request body with every unset field left out."""
        return self.model_dump(exclude_none=True, mode="json")


class GeneratedVideo(DataModel):
    uri: str | None = None
    media_type: str | None = None


class OperationResponse(DataModel):
    videos: list[GeneratedVideo] = Field(default_factory=list)


class OperationHandle(FrozenDataModel):
    """Snapshot of a remote generation job."""

    name: str
    done: bool = False
    response: OperationResponse | None = None
    error: str | None = None


class GenerationResult(DataModel):
    path: str
    """Local file holding the generated video."""

    uri: str
    """Decoded remote URL the video was fetched from."""

    reference: VideoReference
    """Reference needed to extend this video."""

    media_type: str | None = None
    size: int = 0

    def read(self) -> bytes:
        with open(self.path, "rb") as f:
            return f.read()

    def release(self) -> None:
        """Delete the local file. Safe to call more than once."""
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass
