"""Logging setup for workflow runs.

Diagnostics go to stderr so that stdout carries nothing but the rendered
result. Notices, warnings and errors are emitted as GitHub workflow
annotations; everything else gets a timestamped log line.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

_ANNOTATIONS = {
    NOTICE: "notice",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


class WorkflowFormatter(logging.Formatter):
    """Formatter that produces GitHub Actions annotations and log lines."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        annotation = _ANNOTATIONS.get(record.levelno)
        if annotation:
            return f"::{annotation}::{message}"

        timestamp = datetime.now(timezone.utc).strftime("%H:%M:%S")
        level = record.levelname.ljust(7)
        return f"[{record.name}] {timestamp} {level} {message}"


def setup_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> None:
    """Configure root logger for workflow output.

    Args:
        verbose: If True, set level to DEBUG. Otherwise INFO.
        stream: Destination stream. Defaults to sys.stderr at call time.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Remove existing handlers to avoid duplicates
    root.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(WorkflowFormatter())
    handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.addHandler(handler)
