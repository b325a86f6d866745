from __future__ import annotations

import logging
import os
import threading
import uuid

from reelcraft.content.image import ImageData
from reelcraft.content.video import VideoData
from reelcraft.core import DataModel
from reelcraft.core.exceptions import NotFoundError, ValidationError

from ._models import (
    ExtendVideoParameters,
    GenerationResult,
    Resolution,
    VideoReference,
)

logger = logging.getLogger(__name__)


class Scene(DataModel):
    id: str
    prompt: str = ""
    path: str
    reference: VideoReference | None = None

    @property
    def extendable(self) -> bool:
        return self.reference is not None


class SceneHistory:
    """Recently generated videos, newest first.

    A scene keeps the reference returned with its video. Scenes added from
    a plain file have no reference and cannot be extended until the video
    is generated again.
    """

    def __init__(self, limit: int | None = None):
        self.limit = limit
        self._scenes: list[Scene] = []
        self._results: dict[str, GenerationResult] = {}
        self._lock = threading.Lock()

    def add(self, result: GenerationResult, prompt: str = "") -> Scene:
        scene = Scene(
            id=uuid.uuid4().hex,
            prompt=prompt,
            path=result.path,
            reference=result.reference,
        )
        with self._lock:
            self._results[scene.id] = result
            self._scenes.insert(0, scene)
            evicted = self._trim()
        for old in evicted:
            self._release(old)
        return scene

    def add_file(self, path: str, prompt: str = "") -> Scene:
        scene = Scene(id=uuid.uuid4().hex, prompt=prompt, path=path)
        with self._lock:
            self._scenes.insert(0, scene)
            evicted = self._trim()
        for old in evicted:
            self._release(old)
        return scene

    def get(self, id: str) -> Scene:
        with self._lock:
            for scene in self._scenes:
                if scene.id == id:
                    return scene
        raise NotFoundError(f"Scene {id} not found.")

    def list(self) -> list[Scene]:
        with self._lock:
            return list(self._scenes)

    def remove(self, id: str) -> None:
        scene = self.get(id)
        with self._lock:
            self._scenes = [s for s in self._scenes if s.id != id]
        self._release(scene)

    def clear(self) -> None:
        with self._lock:
            scenes, self._scenes = self._scenes, []
        for scene in scenes:
            self._release(scene)

    def extend(
        self,
        id: str,
        prompt: str,
        *,
        end_frame: ImageData | None = None,
        reference_images: list[ImageData] | None = None,
        style_image: ImageData | None = None,
        resolution: Resolution = Resolution.P720,
    ) -> ExtendVideoParameters:
        """Parameters to extend a scene with a new prompt.

        Raises:
            ValidationError: the scene has no video reference.
        """
        scene = self.get(id)
        if scene.reference is None:
            raise ValidationError(
                "Video data lost. Please regenerate or re-select the scene "
                "from the gallery."
            )
        return ExtendVideoParameters(
            prompt=prompt,
            resolution=resolution,
            input_video=self._load_video(scene),
            video_reference=scene.reference,
            end_frame=end_frame,
            reference_images=reference_images or [],
            style_image=style_image,
        )

    def _load_video(self, scene: Scene) -> VideoData | None:
        # Display copy only.
        if not os.path.isfile(scene.path):
            logger.debug("Scene file %s is gone", scene.path)
            return None
        return VideoData.load(scene.path)

    def _trim(self) -> list[Scene]:
        if self.limit is None or len(self._scenes) <= self.limit:
            return []
        evicted = self._scenes[self.limit :]  # noqa: E203
        self._scenes = self._scenes[: self.limit]
        return evicted

    def _release(self, scene: Scene) -> None:
        with self._lock:
            result = self._results.pop(scene.id, None)
        if result is not None:
            logger.debug("Releasing %s", result.path)
            result.release()
