import logging
import sys

from .constants import LOGGER_NAME

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the package logger.

    Adds a single stream handler the first time it is called; later calls only
    adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if not any(getattr(h, "_searchapi", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._searchapi = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
