from __future__ import annotations

import logging
import os

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def configure_logging(level: str | int | None = None) -> None:
    """Attach a stream handler to the package logger. Safe to call repeatedly."""
    global _configured
    if level is None:
        level = os.environ.get("SCENEKIT_LOG_LEVEL", "WARNING")
    if isinstance(level, str):
        level = level.upper()
    root = logging.getLogger("scenekit")
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        _configured = True
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
