from ._models import VideoData

__all__ = ["VideoData"]
