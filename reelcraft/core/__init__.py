from ._component import Component
from ._context import Context
from ._decorators import operation
from ._loader import Loader
from ._log_helper import configure_logging
from ._operation import Operation
from ._provider import Provider
from ._response import Response
from .data_model import DataModel, FrozenDataModel
from .manifest import MANIFEST_FILE, Manifest, ProviderConfig

__all__ = [
    "Component",
    "Context",
    "DataModel",
    "FrozenDataModel",
    "Loader",
    "MANIFEST_FILE",
    "Manifest",
    "Operation",
    "Provider",
    "ProviderConfig",
    "Response",
    "configure_logging",
    "operation",
]
