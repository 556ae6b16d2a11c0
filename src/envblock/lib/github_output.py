"""Append named step outputs to the file GitHub Actions passes in GITHUB_OUTPUT."""

import logging
import uuid
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def _delimiter_for(value: str) -> str:
    while True:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter not in value:
            return delimiter


def write_output(path: Union[str, Path], name: str, value: str) -> None:
    """Append a multi-line output using the heredoc delimiter syntax.

    Args:
        path: Output file, usually the value of GITHUB_OUTPUT.
        name: Output name visible to later steps.
        value: Output value; may span several lines.

    Raises:
        OSError: If the file cannot be opened for appending.
    """
    delimiter = _delimiter_for(value)
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n")
        f.write(f"{value}\n")
        f.write(f"{delimiter}\n")
        f.flush()
    logger.debug(f"Wrote {name} output to {path}")
