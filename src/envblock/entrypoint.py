#!/usr/bin/env python3
"""envblock — parse a fenced ENV block and print its variables.

Reads the text to scan and the output format from the environment, writes
the rendered variables to stdout and, inside GitHub Actions, to the VARS
step output. Diagnostics go to stderr.

An unknown output format is the only fatal condition: a missing block or
a malformed line still produces a complete, possibly empty, result.
"""

import logging
import sys

from envblock.lib.block_extractor import OPEN_FENCE, extract_block
from envblock.lib.env_settings import ParseSettings
from envblock.lib.github_output import write_output
from envblock.lib.line_parser import parse_lines
from envblock.lib.logging_config import NOTICE, setup_logging
from envblock.lib.serializers import UnsupportedFormatError, get_serializer

logger = logging.getLogger("envblock")

OUTPUT_NAME = "VARS"


def run_pipeline(text: str, output_format: str) -> str:
    """Extract, parse and serialize the ENV block found in text.

    Args:
        text: Raw input to scan.
        output_format: One of serializers.SUPPORTED_FORMATS.

    Returns:
        Rendered variables. A missing or empty block renders as the
        format's empty result.

    Raises:
        UnsupportedFormatError: If output_format is unknown. Raised before
            any parsing takes place.
    """
    serializer = get_serializer(output_format)

    logger.info("Parsing variables from 'to-parse' input...")
    logger.info(f"Looking for content within a '{OPEN_FENCE}' block...")
    logger.info(f"Output format: {output_format}")

    block = extract_block(text)
    if block is None:
        logger.log(
            NOTICE,
            f"Could not find a '{OPEN_FENCE}' block to parse. Returning empty result.",
        )
        return serializer(())

    logger.info(
        f"Successfully extracted {len(block)} line(s) from ENV block. "
        f"Now parsing for variables."
    )
    result = parse_lines(block)

    if not result.variables:
        logger.log(NOTICE, "ENV block found but contained no variables.")
    else:
        logger.info(f"Parsed {len(result.variables)} variable(s)")
    if result.malformed:
        logger.info(f"Skipped {len(result.malformed)} malformed line(s)")

    return serializer(result.variables)


def main() -> int:
    setup_logging()
    settings = ParseSettings()
    if settings.runner_debug:
        setup_logging(verbose=True)

    output = run_pipeline(settings.to_parse, settings.output_format)

    if output:
        sys.stdout.write(output + "\n")
        sys.stdout.flush()

    if settings.github_output:
        write_output(settings.github_output, OUTPUT_NAME, output)
        logger.info(f"Set {OUTPUT_NAME} output for GitHub Actions.")

    logger.info("Parsing complete.")
    return 0


def run() -> None:
    """Console-script entry point; converts failures into exit codes."""
    try:
        code = main()
    except UnsupportedFormatError as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error(f"envblock failed: {e}", exc_info=True)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    run()
