import logging
import sys

from .exceptions import BadRequestError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
ROOT_LOGGER = "reelcraft"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again only updates the level. An unknown level name raises
    `BadRequestError`.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise BadRequestError(f"Unknown log level: {name}")
    logger.setLevel(level)
    if not any(
        getattr(h, "_reelcraft", False) for h in logger.handlers
    ):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, "_reelcraft", True)
        logger.addHandler(handler)
    return logger
