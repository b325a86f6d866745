from ._encoder import encode_file
from ._models import FileData

__all__ = ["FileData", "encode_file"]
