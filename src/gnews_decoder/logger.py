"""Logging setup with structured ``extra`` fields."""

import logging
import sys

LOGGER_NAME = "gnews_decoder"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}
        if not extras:
            return base
        fields = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} | {fields}"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get the package logger, configuring it on first use.

    Args:
        name: Optional module name inside the package, e.g. ``__name__``

    Returns:
        Configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ExtraFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    if not name or name == LOGGER_NAME:
        return logger
    return logging.getLogger(name if name.startswith(f"{LOGGER_NAME}.") else f"{LOGGER_NAME}.{name}")


def configure_logging(level: int | str = logging.INFO) -> None:
    """Set the package log level."""
    get_logger().setLevel(level)
