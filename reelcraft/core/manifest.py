from __future__ import annotations

import os
from typing import Any

import yaml

from .data_model import DataModel

__all__ = [
    "Manifest",
    "ProviderConfig",
    "MANIFEST_FILE",
]


MANIFEST_FILE = "reelcraft.yaml"


class ProviderConfig(DataModel):
    type: str = "google"
    parameters: dict[str, Any] = dict()

    def to_binding(self) -> dict[str, Any]:
        return dict(type=self.type, parameters=dict(self.parameters))


class Manifest(DataModel):
    log_level: str = "INFO"
    video_generation: ProviderConfig = ProviderConfig()
    prompt_enhancement: ProviderConfig = ProviderConfig()

    @staticmethod
    def parse(path: str) -> Manifest:
        with open(path, "r") as file:
            obj = yaml.safe_load(file) or {}
        return Manifest.from_dict(obj)

    @staticmethod
    def load(path: str | None = None) -> Manifest:
        """Parse the manifest at `path`, or the default one if present."""
        if path is not None:
            return Manifest.parse(path)
        if os.path.exists(MANIFEST_FILE):
            return Manifest.parse(MANIFEST_FILE)
        return Manifest()
