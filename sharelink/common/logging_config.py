"""Logging for the share link service.

Everything logs under one ``sharelink`` logger tree::

    sharelink          configured by setup_logging
    sharelink.links    vanity resolution fallbacks
    sharelink.web      request / response lines from the middleware

Child loggers carry no handlers of their own and propagate to ``sharelink``,
so a single ``setup_logging`` call controls the whole service.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional


ROOT_LOGGER = "sharelink"

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per line, safe for messages containing quotes."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATEFMT)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the ``sharelink`` logger tree.

    Calling it again replaces the previous handlers, so the CLI and tests can
    reconfigure freely.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Optional file to append to, besides stdout
        json_format: Emit JSON lines instead of plain text

    Returns:
        The ``sharelink`` logger
    """
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    formatter = _build_formatter(json_format)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger inside the ``sharelink`` tree.

    ``get_logger("web")`` and ``get_logger("sharelink.web")`` return the same
    logger; ``get_logger()`` returns the tree's root.
    """
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
