"""Logging setup for the buildergen command line."""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT = "buildergen"
_CONSOLE_FORMAT = "[%(shortname)s] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``buildergen.<name>``, or the package logger itself."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


class _ShortNameFilter(logging.Filter):
    """Adds ``shortname``: the logger name without the package prefix."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        record.shortname = name[len(_ROOT) + 1 :] if name.startswith(f"{_ROOT}.") else name
        return True


def _level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send buildergen records to stderr and, optionally, to ``log_file``.

    ``verbose`` wins over ``quiet``. The file sink always records DEBUG so a
    failed run can be inspected after the fact.
    """
    logger = get_logger()
    logger.setLevel(logging.DEBUG if log_file is not None else _level(verbose, quiet))
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(_level(verbose, quiet))
    console.addFilter(_ShortNameFilter())
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    return logger


__all__ = ["configure_logging", "get_logger"]
