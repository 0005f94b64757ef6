"""
Structured logger with JSON output and file support.

Wraps the standard ``logging`` module so flatenv's messages carry their
structured context either as ``key=value`` text or as JSON objects.
"""

import json
import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .interface import Logger

# LogRecord attributes that are never treated as structured context
RESERVED_KEYS = frozenset({
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module",
    "msecs", "message", "msg", "name", "pathname", "process",
    "processName", "relativeCreated", "stack_info", "thread",
    "threadName", "taskName",
})

# Marks handlers installed by StructuredLogger itself
OWN_HANDLER_ATTR = "_flatenv_handler"


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in RESERVED_KEYS and key != "session_id"
    }


class JsonFormatter(logging.Formatter):
    """Formats log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        session_id = getattr(record, "session_id", None)
        if session_id:
            log_data["session_id"] = str(session_id)

        log_data.update(_extra_fields(record))
        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Text formatter that appends structured context as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        s = super().format(record)
        extra_args = _extra_fields(record)
        if extra_args:
            s += " " + " ".join(f"{k}={v}" for k, v in extra_args.items())
        return s


class StructuredLogger(Logger):
    """Logger implementation with text or JSON output and optional file output.

    Example:
        logger = StructuredLogger(name="flatenv")
        logger.info("Config loaded", path=".env", keys=4)

        logger = StructuredLogger(
            name="flatenv",
            json_format=True,
            log_file="/var/log/flatenv.log",
        )
    """

    def __init__(
        self,
        name: str = "flatenv",
        level: int = logging.INFO,
        log_file: Optional[str] = None,
        json_format: bool = False,
        stream: Any = None,
    ):
        """Initialize the structured logger.

        If the named logger already carries handlers that some other code
        attached, and neither ``stream`` nor ``log_file`` is given, the
        logger is left exactly as configured and messages go to those
        handlers.

        Args:
            name: Logger name
            level: Logging level (logging.DEBUG, logging.INFO, etc.)
            log_file: Optional file path for log output
            json_format: If True, output logs as JSON; otherwise use text format
            stream: Console stream (default: stderr)
        """
        self._name = name
        self._session_id = str(uuid.uuid4())[:8]
        self._logger = logging.getLogger(name)

        # Handlers attached by the host application are left in charge
        foreign = [h for h in self._logger.handlers if not getattr(h, OWN_HANDLER_ATTR, False)]
        if foreign and stream is None and not log_file:
            return

        # Drop handlers from a previous instance to avoid duplication
        for handler in self._logger.handlers[:]:
            if getattr(handler, OWN_HANDLER_ATTR, False):
                self._logger.removeHandler(handler)
                handler.close()

        self._logger.setLevel(level)
        self._logger.propagate = False

        if json_format:
            formatter: logging.Formatter = JsonFormatter()
        else:
            formatter = TextFormatter(
                "%(asctime)s [%(levelname)s] [%(name)s] [session:%(session_id)s] %(message)s"
            )

        console_handler = logging.StreamHandler(sys.stderr if stream is None else stream)
        console_handler.setFormatter(formatter)
        setattr(console_handler, OWN_HANDLER_ATTR, True)
        self._logger.addHandler(console_handler)

        if log_file:
            try:
                file_handler = logging.FileHandler(log_file)
                file_handler.setFormatter(formatter)
                setattr(file_handler, OWN_HANDLER_ATTR, True)
                self._logger.addHandler(file_handler)
            except OSError as e:
                # Fallback to console if file cannot be opened
                print(f"Failed to setup log file {log_file}: {e}", file=sys.stderr)

    def get_session_id(self) -> str:
        """Get the current session ID."""
        return self._session_id

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        extra: Dict[str, Any] = {"session_id": self._session_id}
        for k, v in kwargs.items():
            # Prefix reserved keys to preserve them but avoid collision
            extra[f"_{k}" if k in RESERVED_KEYS else k] = v
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)
