from ._builder import (
    TRANSITION_INSTRUCTION,
    build_submission_payload,
    validate_parameters,
)
from ._models import (
    AspectRatio,
    ExtendVideoParameters,
    FramesToVideoParameters,
    GeneratedVideo,
    GenerationMode,
    GenerationParameters,
    GenerationResult,
    ImagePayload,
    OperationHandle,
    OperationResponse,
    ReferenceImagePayload,
    ReferencesToVideoParameters,
    ReferenceType,
    Resolution,
    SubmissionConfig,
    SubmissionPayload,
    TextToVideoParameters,
    VeoModel,
    VideoReference,
    parse_parameters,
)
from ._polling import OperationPoller
from ._presets import PRESETS, Preset, get_preset
from ._scenes import Scene, SceneHistory
from .component import VideoGeneration

__all__ = [
    "AspectRatio",
    "ExtendVideoParameters",
    "FramesToVideoParameters",
    "GeneratedVideo",
    "GenerationMode",
    "GenerationParameters",
    "GenerationResult",
    "ImagePayload",
    "OperationHandle",
    "OperationPoller",
    "OperationResponse",
    "PRESETS",
    "Preset",
    "ReferenceImagePayload",
    "ReferenceType",
    "ReferencesToVideoParameters",
    "Resolution",
    "Scene",
    "SceneHistory",
    "SubmissionConfig",
    "SubmissionPayload",
    "TRANSITION_INSTRUCTION",
    "TextToVideoParameters",
    "VeoModel",
    "VideoGeneration",
    "VideoReference",
    "build_submission_payload",
    "get_preset",
    "parse_parameters",
    "validate_parameters",
]
