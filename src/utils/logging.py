"""Simple logging wrapper for the MCP4VAPI tool server."""

import logging
import sys

# Parent of every module logger in this project; carries the shared level.
ROOT_LOGGER = "src"
DEFAULT_LEVEL = "INFO"

logging.getLogger(ROOT_LOGGER).setLevel(DEFAULT_LEVEL)


def _resolve_level(level: int | str) -> int:
    """Map a level name or number onto a logging level, falling back to INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.getLevelName(DEFAULT_LEVEL)


def configure_logging(level: int | str) -> int:
    """
    Apply *level* to every logger created through :func:`get_logger`.

    Unknown level names fall back to INFO.  Returns the level applied.
    """
    resolved = _resolve_level(level)
    logging.getLogger(ROOT_LOGGER).setLevel(resolved)
    return resolved


def get_logger(name: str, level: int | str | None = None) -> logging.Logger:
    """
    Return a configured logger with the given name.

    Logging format:  [LEVEL]  logger_name — message

    Records go to stderr: in stdio mode stdout carries the MCP message stream.

    Parameters
    ----------
    name : str
        Typically __name__ of the calling module.
    level : int | str | None
        Logging level.  When omitted the logger inherits the project level
        set by :func:`configure_logging` (INFO until configured).

    Returns
    -------
    logging.Logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            fmt="%(asctime)s  [%(levelname)s]  %(name)s — %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False

    if level is not None:
        logger.setLevel(_resolve_level(level))
    return logger
