"""Parse ENV block lines into ordered key/value pairs.

Malformed lines never abort the parse: each one is logged as a warning,
recorded on the result and skipped.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

logger = logging.getLogger(__name__)

_ASSIGNMENT = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*=")


@dataclass(frozen=True)
class VariablePair:
    """A single KEY=VALUE assignment taken from the block."""

    key: str
    value: str


@dataclass(frozen=True)
class ParseResult:
    """Pairs in order of appearance plus the lines that were skipped."""

    variables: tuple[VariablePair, ...] = field(default_factory=tuple)
    malformed: tuple[str, ...] = field(default_factory=tuple)


def strip_quotes(value: str) -> str:
    """Remove one layer of matching single or double quotes.

    A lone quote character is left alone. Interior characters are never
    unescaped.
    """
    if len(value) < 2:
        return value
    if value.startswith("'") and value.endswith("'"):
        return value[1:-1]
    if value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def parse_lines(lines: Iterable[str]) -> ParseResult:
    """Parse block lines into a ParseResult.

    Args:
        lines: Raw lines from the ENV block.

    Returns:
        ParseResult with every valid pair, duplicates included, and the
        trimmed text of each malformed line.
    """
    variables = []
    malformed = []

    for line in lines:
        trimmed = line.strip()

        if not trimmed or trimmed.startswith("#"):
            continue

        if not _ASSIGNMENT.match(trimmed):
            logger.warning(f"Skipping malformed line: '{trimmed}'")
            malformed.append(trimmed)
            continue

        key, value = trimmed.split("=", 1)
        logger.debug(f"Found variable: {key}")
        variables.append(VariablePair(key=key, value=strip_quotes(value)))

    return ParseResult(variables=tuple(variables), malformed=tuple(malformed))
