"""
Logging for the learning backend: one "cbc_learning" logger tree, a rotating
file under LOG_DIR, an optional stdout handler (LOG_CONSOLE), and the request id
stamped on every record.
"""

from __future__ import annotations

import logging
import os
import sys
import time
import uuid
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "cbc_learning"

REQUEST_ID: ContextVar[str] = ContextVar("request_id", default="-")

LOG_FORMAT = (
    "%(asctime)s %(levelname)-8s %(name)s "
    "request_id=%(request_id)s src=%(filename)s:%(lineno)d "
    "%(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 10


class RequestContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.request_id = REQUEST_ID.get()
        return True


def _level(name: str) -> int:
    return logging.getLevelNamesMapping().get((name or "INFO").upper(), logging.INFO)


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.addFilter(RequestContextFilter())
    logger.addHandler(handler)


def configure_logging(
    *,
    log_dir: str | Path | None = None,
    log_file: str = "backend.log",
    level: str = "INFO",
    console: bool | None = None,
) -> logging.Logger:
    """
    Set up the "cbc_learning" logger once; later calls return it unchanged.
    LOG_LEVEL, LOG_DIR and LOG_CONSOLE in the environment override the arguments.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if getattr(logger, "_configured", False):
        return logger

    numeric_level = _level(os.getenv("LOG_LEVEL", level))
    log_path = Path(log_dir or os.getenv("LOG_DIR", "logs"))
    if console is None:
        console = bool(os.getenv("LOG_CONSOLE"))

    logger.setLevel(numeric_level)
    logger.propagate = False

    log_path.mkdir(parents=True, exist_ok=True)
    _attach(
        logger,
        RotatingFileHandler(
            filename=str(log_path / log_file),
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        ),
        numeric_level,
    )
    if console:
        _attach(logger, logging.StreamHandler(sys.stdout), numeric_level)

    logger._configured = True  # type: ignore[attr-defined]
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger sharing the configured handlers, e.g. get_logger(__name__)."""
    configure_logging()
    return logging.getLogger(LOGGER_NAME).getChild(name)


def set_request_id(request_id: Optional[str] = None) -> str:
    rid = request_id or uuid.uuid4().hex
    REQUEST_ID.set(rid)
    return rid


def clear_request_id() -> None:
    REQUEST_ID.set("-")


class log_request:
    """
    Times a block and logs its outcome:
      with log_request(logger, "rafiki.reply"):
          reply = await tutor.generate_reply(...)
    """

    def __init__(self, logger: logging.Logger, name: str):
        self.logger = logger
        self.name = name
        self.start = 0.0

    def __enter__(self):
        self.start = time.monotonic()
        self.logger.debug("start %s", self.name)
        return self

    def __exit__(self, exc_type, exc, tb):
        dur_ms = int((time.monotonic() - self.start) * 1000)
        if exc is None:
            self.logger.info("%s ok duration_ms=%s", self.name, dur_ms)
        else:
            self.logger.warning("%s failed duration_ms=%s error=%s", self.name, dur_ms, exc)
        return False
