"""
Logging configuration for piiscan.

Provides:
- JSON-formatted logs (machine-readable)
- Human-readable logs for interactive use
- A scan correlation ID carried across threads of one scan

Logs go to stderr so scan output on stdout stays clean. Matched text is
never logged anywhere in the package; log offsets, counts and rule names.

Usage:
    from piiscan.logging_config import setup_logging

    setup_logging(level="DEBUG")
    logger = logging.getLogger(__name__)
    logger.info("Scan started", extra={"document": "invoice.txt"})
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

# Context variable for scan correlation ID
scan_id_var: ContextVar[str | None] = ContextVar("scan_id", default=None)

# Standard LogRecord attributes, not treated as extra fields
_SKIP_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "taskName", "message",
})


def get_scan_id() -> str | None:
    """Get the current scan correlation ID."""
    return scan_id_var.get()


def set_scan_id(scan_id: str | None) -> None:
    """Set the current scan correlation ID."""
    scan_id_var.set(scan_id)


class JSONFormatter(logging.Formatter):
    """
    JSON log formatter for structured logging.

    Output format:
    {
        "timestamp": "2026-03-12T10:30:00.123456+00:00",
        "level": "INFO",
        "logger": "piiscan.core.detectors.orchestrator",
        "message": "ScanEngine initialized with 17 families, 94 rules",
        "scan_id": "abc123",
        ...
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        scan_id = get_scan_id()
        if scan_id:
            log_data["scan_id"] = scan_id

        if record.levelno >= logging.WARNING:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _SKIP_ATTRS and not key.startswith("_"):
                try:
                    json.dumps(value)
                    log_data[key] = value
                except (TypeError, ValueError):
                    log_data[key] = str(value)

        return json.dumps(log_data, default=str)


class DevelopmentFormatter(logging.Formatter):
    """
    Human-readable log formatter.

    Output format:
    2026-03-12 10:30:00 INFO     [piiscan.cli.commands.scan] Scanning invoice.txt
    """

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname

        if self.use_colors:
            color = self.COLORS.get(level, "")
            level = f"{color}{level}{self.RESET}"

        extras = [
            f"{key}={value}"
            for key, value in record.__dict__.items()
            if key not in _SKIP_ATTRS and not key.startswith("_")
        ]
        extra_str = (" " + " ".join(extras)) if extras else ""

        scan_id = get_scan_id()
        scan_str = f" [{scan_id[:8]}]" if scan_id else ""

        message = f"{timestamp} {level:8}{scan_str} [{record.name}] {record.getMessage()}{extra_str}"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


def setup_logging(
    level: str = "WARNING",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON formatting
        log_file: Optional file path to write logs (always JSON)

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if json_format:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = DevelopmentFormatter(use_colors=sys.stderr.isatty())

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)
