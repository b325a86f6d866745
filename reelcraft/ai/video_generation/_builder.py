"""Mapping from mode-specific generation parameters to a submission payload."""

from __future__ import annotations

import logging

from reelcraft.content.image import ImageData
from reelcraft.core.exceptions import NotSupportedError, ValidationError

from ._models import (
    MAX_REFERENCE_IMAGES,
    ExtendVideoParameters,
    FramesToVideoParameters,
    GenerationParameters,
    ImagePayload,
    ReferenceImagePayload,
    ReferencesToVideoParameters,
    ReferenceType,
    SubmissionConfig,
    SubmissionPayload,
    TextToVideoParameters,
    VeoModel,
)

logger = logging.getLogger(__name__)

TRANSITION_INSTRUCTION = (
    ". The video must seamlessly transition from the input video to the "
    "provided last frame. Correct any inconsistencies between the input "
    "video's end and the target frame so the camera moves in one unified "
    "approach to the final frame."
)

REFERENCE_MODEL = VeoModel.VEO


def build_submission_payload(
    params: GenerationParameters,
) -> SubmissionPayload:
    """Build the request for a generation.

    Only the fields relevant to the mode of `params` are set; everything
    else stays None and is left out of the request.

    Raises:
        ValidationError: extending without a video reference.
    """
    if isinstance(params, TextToVideoParameters):
        return _build_text(params)
    if isinstance(params, FramesToVideoParameters):
        return _build_frames(params)
    if isinstance(params, ReferencesToVideoParameters):
        return _build_references(params)
    if isinstance(params, ExtendVideoParameters):
        return _build_extend(params)
    raise NotSupportedError(
        f"Unsupported generation parameters: {type(params).__name__}"
    )


def _build_text(params: TextToVideoParameters) -> SubmissionPayload:
    return SubmissionPayload(
        model=params.model,
        config=SubmissionConfig(
            resolution=params.resolution,
            aspect_ratio=params.aspect_ratio,
        ),
        prompt=_prompt(params.prompt),
    )


def _build_frames(params: FramesToVideoParameters) -> SubmissionPayload:
    end_frame = params.start_frame if params.is_looping else params.end_frame
    return SubmissionPayload(
        model=params.model,
        config=SubmissionConfig(
            resolution=params.resolution,
            aspect_ratio=params.aspect_ratio,
            last_frame=_image(end_frame),
        ),
        prompt=_prompt(params.prompt),
        image=_image(params.start_frame),
    )


def _build_references(
    params: ReferencesToVideoParameters,
) -> SubmissionPayload:
    return SubmissionPayload(
        model=_model(params.model, params.reference_images),
        config=SubmissionConfig(
            resolution=params.resolution,
            aspect_ratio=params.aspect_ratio,
            reference_images=_references(
                params.reference_images, params.style_image
            ),
        ),
        prompt=_prompt(params.prompt),
    )


def _build_extend(params: ExtendVideoParameters) -> SubmissionPayload:
    if params.video_reference is None:
        raise ValidationError(
            "An input video reference from a previous generation is "
            "required to extend a video."
        )
    prompt = _prompt(params.prompt)
    if prompt is not None and params.end_frame is not None:
        logger.debug("Adding transition instruction to prompt")
        prompt += TRANSITION_INSTRUCTION
    return SubmissionPayload(
        model=_model(params.model, params.reference_images),
        # Aspect ratio is inherited from the source video.
        config=SubmissionConfig(
            resolution=params.resolution,
            reference_images=_references(
                params.reference_images, params.style_image
            ),
            last_frame=_image(params.end_frame),
        ),
        prompt=prompt,
        video=params.video_reference,
    )


def _prompt(prompt: str) -> str | None:
    if not prompt or not prompt.strip():
        return None
    return prompt


def _model(model: VeoModel, reference_images: list[ImageData]) -> VeoModel:
    if reference_images:
        if model != REFERENCE_MODEL:
            logger.info(
                "Reference images require %s, overriding %s",
                REFERENCE_MODEL.value,
                model,
            )
        return REFERENCE_MODEL
    return model


def _image(image: ImageData | None) -> ImagePayload | None:
    if image is None:
        return None
    return ImagePayload(image_bytes=image.content, mime_type=image.media_type)


def _references(
    reference_images: list[ImageData],
    style_image: ImageData | None,
) -> list[ReferenceImagePayload] | None:
    references = [
        ReferenceImagePayload(
            image=ImagePayload(
                image_bytes=image.content, mime_type=image.media_type
            ),
            reference_type=ReferenceType.ASSET,
        )
        for image in reference_images
    ]
    if style_image is not None:
        references.append(
            ReferenceImagePayload(
                image=ImagePayload(
                    image_bytes=style_image.content,
                    mime_type=style_image.media_type,
                ),
                reference_type=ReferenceType.STYLE,
            )
        )
    return references or None


def validate_parameters(params: GenerationParameters) -> None:
    """Check that a request is complete enough to submit.

    Raises:
        ValidationError: naming the first missing input.
    """
    has_prompt = bool(params.prompt and params.prompt.strip())
    if isinstance(params, TextToVideoParameters):
        if not has_prompt:
            raise ValidationError("Please enter a prompt.")
    elif isinstance(params, FramesToVideoParameters):
        if params.start_frame is None:
            raise ValidationError("A start frame is required.")
    elif isinstance(params, ReferencesToVideoParameters):
        has_references = len(params.reference_images) > 0
        if not has_references and not has_prompt:
            raise ValidationError(
                "Please add reference image(s) and enter a prompt."
            )
        if not has_references:
            raise ValidationError(
                "At least one reference image is required."
            )
        if len(params.reference_images) > MAX_REFERENCE_IMAGES:
            raise ValidationError(
                f"At most {MAX_REFERENCE_IMAGES} reference images are "
                "supported."
            )
        if not has_prompt:
            raise ValidationError("Please enter a prompt.")
    elif isinstance(params, ExtendVideoParameters):
        if params.video_reference is None:
            if params.input_video is not None:
                raise ValidationError(
                    "Video data lost. Please regenerate or re-select the "
                    "scene from the gallery."
                )
            raise ValidationError(
                "An input video from a previous generation is required "
                "to extend."
            )
        if len(params.reference_images) > MAX_REFERENCE_IMAGES:
            raise ValidationError(
                f"At most {MAX_REFERENCE_IMAGES} reference images are "
                "supported."
            )
        if not has_prompt:
            raise ValidationError(
                "Please describe what happens next in the prompt."
            )
    else:
        raise NotSupportedError(
            f"Unsupported generation parameters: {type(params).__name__}"
        )
