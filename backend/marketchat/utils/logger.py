"""
Logging utilities.

WHAT: Logging setup plus room/connection context for chat logs
WHY: Chat activity from many rooms interleaves; every line should say which
     room and connection it belongs to
HOW: Root console + file handlers tagged as ours, a filter defaulting the
     context fields, and a LoggerAdapter that fills them in
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [room=%(room)s conn=%(conn)s] %(message)s"
FILE_LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - "
    "[room=%(room)s conn=%(conn)s] %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# marks handlers installed by setup_logging so a re-run replaces only those
_HANDLER_TAG = "_marketchat_handler"


class ChatContextFilter(logging.Filter):
    """Default the room/conn fields so records logged without context still format."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "room"):
            record.room = "-"
        if not hasattr(record, "conn"):
            record.conn = "-"
        return True


def _resolve_level(level: Optional[str]) -> int:
    return getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> List[logging.Handler]:
    """
    Configure application logging.

    Safe to call more than once: handlers from an earlier call are closed and
    replaced, handlers installed by anyone else (pytest, uvicorn) are kept.

    Args:
        level: Console/root level name (defaults to settings.LOG_LEVEL)
        log_file: Log file path (defaults to settings.LOG_FILE)

    Returns:
        The handlers that were installed
    """
    resolved = _resolve_level(level)
    path = Path(log_file or settings.LOG_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    for handler in [h for h in root_logger.handlers if getattr(h, _HANDLER_TAG, False)]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(resolved)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(resolved)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=DATE_FORMAT))

    installed = [console_handler, file_handler]
    for handler in installed:
        setattr(handler, _HANDLER_TAG, True)
        handler.addFilter(ChatContextFilter())
        root_logger.addHandler(handler)

    root_logger.info(f"Logging initialized (level={logging.getLevelName(resolved)}, file={path})")
    return installed


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module (typically __name__)."""
    return logging.getLogger(name)


def chat_logger(logger: logging.Logger, room_id: str, connection_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Bind a chat room (and optionally a connection) to a module logger.

    Example:
        >>> log = chat_logger(logger, "p2", "3f9c")
        >>> log.info("Vendor joined")   # ... [room=p2 conn=3f9c] Vendor joined
    """
    return logging.LoggerAdapter(logger, {"room": room_id, "conn": connection_id or "-"})
