"""Locate the fenced ENV block inside free-form text.

Only the first block is used. Fence lines must match exactly, with no
surrounding whitespace, no carriage return and no language tag other
than ENV.
"""

from typing import Optional

OPEN_FENCE = "```ENV"
CLOSE_FENCE = "```"


def extract_block(text: str) -> Optional[list[str]]:
    """Return the lines strictly between the first ENV fence pair.

    Args:
        text: Raw input, e.g. a pull-request body.

    Returns:
        The enclosed lines, unmodified and in order. An empty list means the
        block was found but holds nothing. None means there is no opening
        fence, or no closing fence after it.
    """
    lines = text.split("\n")

    try:
        start = lines.index(OPEN_FENCE) + 1
    except ValueError:
        return None

    block = []
    for line in lines[start:]:
        if line == CLOSE_FENCE:
            return block
        block.append(line)

    # Unterminated block
    return None
