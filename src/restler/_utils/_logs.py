import logging
import sys

from .constants import LOGGER_NAME

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the package logger.

    A stream handler is attached only once, so calling this for every client
    instance does not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(getattr(h, "_restler_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._restler_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger


def masked_headers(headers: dict[str, str]) -> dict[str, str]:
    """Copy of ``headers`` safe to log."""
    return {
        key: "***" if key.lower() == "authorization" else value
        for key, value in headers.items()
    }
