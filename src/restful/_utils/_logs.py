import logging
import sys

from .constants import LOGGER_NAME

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach a stderr handler to the ``restful`` logger.

    Calling it again only updates the level, so handlers are never duplicated.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if not any(getattr(h, "_restful", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._restful = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
