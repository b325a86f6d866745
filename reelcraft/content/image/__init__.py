from ._models import ImageData

__all__ = ["ImageData"]
