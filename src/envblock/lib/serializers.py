"""Render parsed variables into the supported output formats.

Each serializer is a pure function over the ordered pairs and returns the
rendered text without a trailing newline.
"""

import re
from typing import Callable, Sequence

from envblock.lib.line_parser import VariablePair

Serializer = Callable[[Sequence[VariablePair]], str]

_YAML_NEEDS_QUOTES = re.compile(r"[\s:\[\]{}]")
_YAML_LEADING_DIGIT = re.compile(r"[0-9]")
_YAML_RESERVED = frozenset({"true", "false", "null"})


class UnsupportedFormatError(ValueError):
    """Raised when the output format selector is not recognised."""

    def __init__(self, output_format: str):
        super().__init__(
            f"Unsupported output format: {output_format}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
        self.output_format = output_format


def _json_escape(text: str) -> str:
    # Control characters are passed through unescaped.
    return text.replace("\\", "\\\\").replace('"', '\\"')


def to_json(variables: Sequence[VariablePair]) -> str:
    members = ",".join(
        f'"{_json_escape(pair.key)}":"{_json_escape(pair.value)}"'
        for pair in variables
    )
    return "{" + members + "}"


def to_env(variables: Sequence[VariablePair]) -> str:
    return "\n".join(f"{pair.key}={pair.value}" for pair in variables)


def to_shell(variables: Sequence[VariablePair]) -> str:
    return "\n".join(f"export {pair.key}={pair.value}" for pair in variables)


def yaml_scalar(value: str) -> str:
    """Return value as a YAML scalar, double-quoting it when a bare scalar
    would be misread (numbers, booleans, null, flow or mapping syntax)."""
    if (
        _YAML_NEEDS_QUOTES.search(value)
        or _YAML_LEADING_DIGIT.match(value)
        or value in _YAML_RESERVED
    ):
        escaped = value.replace('"', '\\"')
        return f'"{escaped}"'
    return value


def to_yaml(variables: Sequence[VariablePair]) -> str:
    if not variables:
        return "{}"
    return "\n".join(f"{pair.key}: {yaml_scalar(pair.value)}" for pair in variables)


_SERIALIZERS: dict[str, Serializer] = {
    "json": to_json,
    "env": to_env,
    "dotenv": to_env,
    "shell": to_shell,
    "yaml": to_yaml,
}

SUPPORTED_FORMATS = tuple(_SERIALIZERS)


def get_serializer(output_format: str) -> Serializer:
    """Look up the serializer for a format selector.

    Raises:
        UnsupportedFormatError: If the selector is not one of SUPPORTED_FORMATS.
    """
    try:
        return _SERIALIZERS[output_format]
    except KeyError:
        raise UnsupportedFormatError(output_format) from None


def serialize(variables: Sequence[VariablePair], output_format: str) -> str:
    return get_serializer(output_format)(variables)
