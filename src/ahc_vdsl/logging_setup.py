"""Logging setup for the ahc-vdsl command line tool.

Frames are written to stderr unless a file sink is configured, so stderr
only gets a log handler once it is known not to carry the protocol.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import sys

LOG_LEVEL_ENV = "AHC_VDSL_LOG_LEVEL"
LOG_FILE_NAME = "ahc_vdsl.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _default_log_dir() -> Path:
    local_appdata = os.getenv("LOCALAPPDATA")
    if local_appdata:
        return Path(local_appdata) / "ahc-vdsl" / "logs"
    return Path.home() / ".ahc_vdsl" / "logs"


def _level_from_env() -> int:
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _writes_to_stderr(handler: logging.Handler) -> bool:
    return (
        isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.FileHandler)
        and handler.stream is sys.stderr
    )


def init_logging(console: bool = True) -> Path:
    """Initialize logging and return the log file path.

    With ``console=False`` stderr stays free for visualization output: any
    stderr handler already on the root logger is detached, and records go
    to the log file only.
    """
    level = _level_from_env()
    log_path = _default_log_dir() / LOG_FILE_NAME
    root = logging.getLogger()
    root.setLevel(level)

    if not console:
        for handler in [h for h in root.handlers if _writes_to_stderr(h)]:
            root.removeHandler(handler)

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=1_000_000,
                backupCount=3,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(file_handler)
    except OSError:
        if not console and not root.handlers:
            # keeps logging.lastResort from printing to stderr
            root.addHandler(logging.NullHandler())

    if console:
        attach_console()
    logging.getLogger("ahc_vdsl").info("Logging initialized at %s", log_path)
    return log_path


def attach_console() -> None:
    """Add a stderr handler for warnings and above, once."""
    root = logging.getLogger()
    if any(_writes_to_stderr(h) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(max(root.level, logging.WARNING))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


def set_console_level(level: int) -> None:
    """Adjust console (stderr) handler level."""
    root = logging.getLogger()
    for handler in root.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, logging.FileHandler
        ):
            handler.setLevel(level)
