"""Logging setup for the nutrition_coach package."""

import logging

PACKAGE_LOGGER = "nutrition_coach"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# httpx logs every request URL at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore")


def resolve_level(level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: int | str = logging.INFO, log_format: str = DEFAULT_LOG_FORMAT
) -> logging.Logger:
    """Attach one stream handler to the package logger.

    Calling again only updates the level and format.
    """
    numeric_level = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)
    logger.propagate = False

    handler = next(
        (h for h in logger.handlers if isinstance(h, logging.StreamHandler)), None
    )
    if handler is None:
        handler = logging.StreamHandler()
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(log_format))

    vendor_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(vendor_level)
    return logger
