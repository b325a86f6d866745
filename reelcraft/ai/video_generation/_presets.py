from reelcraft.core import DataModel
from reelcraft.core.exceptions import NotFoundError

from ._models import AspectRatio, TextToVideoParameters, VeoModel


class Preset(DataModel):
    id: str
    title: str
    description: str
    params: TextToVideoParameters


PRESETS: list[Preset] = [
    Preset(
        id="nature",
        title="Cinematic Nature",
        description="Majestic landscapes with photorealistic lighting",
        params=TextToVideoParameters(
            prompt=(
                "Aerial drone shot of a majestic waterfall in Iceland, mossy "
                "green cliffs, overcast dramatic sky, cinematic 4k."
            ),
            model=VeoModel.VEO,
            aspect_ratio=AspectRatio.LANDSCAPE,
        ),
    ),
    Preset(
        id="city",
        title="Cyberpunk City",
        description="Futuristic urban vibes with neon aesthetics",
        params=TextToVideoParameters(
            prompt=(
                "Cyberpunk street level view, neon signs reflecting in rain "
                "puddles, steam rising from vents, futuristic cars, night "
                "time."
            ),
            model=VeoModel.VEO_FAST,
            aspect_ratio=AspectRatio.LANDSCAPE,
        ),
    ),
    Preset(
        id="character",
        title="3D Character",
        description="Cute animated characters in studio quality",
        params=TextToVideoParameters(
            prompt=(
                "A cute fluffy robot with big glowing eyes holding a flower, "
                "pixar style, studio lighting, 3d render, high detail."
            ),
            model=VeoModel.VEO_FAST,
            aspect_ratio=AspectRatio.PORTRAIT,
        ),
    ),
    Preset(
        id="abstract",
        title="Fluid Abstract",
        description="Mesmerizing colors and liquid motion",
        params=TextToVideoParameters(
            prompt=(
                "Swirling colorful ink in water, macro shot, slow motion, "
                "vibrant red and blue colors mixing, artistic abstract "
                "background."
            ),
            model=VeoModel.VEO_FAST,
            aspect_ratio=AspectRatio.LANDSCAPE,
        ),
    ),
]


def get_preset(id: str) -> TextToVideoParameters:
    """Return a copy of the parameters of a built-in preset."""
    for preset in PRESETS:
        if preset.id == id:
            return preset.params.model_copy(deep=True)
    raise NotFoundError(f"Preset {id} not found.")
