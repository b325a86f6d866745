from __future__ import annotations

import importlib
import inspect
from typing import TYPE_CHECKING, Any

from .exceptions import LoadError

if TYPE_CHECKING:
    from ._provider import Provider


class Loader:
    @staticmethod
    def load_class(path: str, type: Any) -> Any:
        """Load a class from `module` or `module:Class`.

        Without an explicit class name, the first class defined in the
        module that derives from `type` is returned.
        """
        module_name, _, class_name = path.partition(":")
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise LoadError(f"Module {module_name} could not be loaded: {e}")
        if class_name:
            cls = getattr(module, class_name, None)
            if cls is None:
                raise LoadError(f"Class {class_name} not found in {path}")
            return cls
        for _, member in inspect.getmembers(module, inspect.isclass):
            if (
                member.__module__ == module.__name__
                and issubclass(member, type)
                and not member.__name__.startswith("_")
            ):
                return member
        raise LoadError(f"No {type.__name__} found in {module_name}")

    @staticmethod
    def load_provider_instance(
        path: str | None = None,
        parameters: dict[str, Any] | None = None,
    ) -> Provider:
        from ._provider import Provider

        if path is None:
            return Provider(**(parameters or {}))
        provider = Loader.load_class(path, Provider)
        return provider(**(parameters or {}))
