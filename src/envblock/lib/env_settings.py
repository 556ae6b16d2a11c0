"""Pydantic settings for environment variable validation.

A GitHub Action step receives its inputs as INPUT_<NAME> variables; the bare
names are accepted too so the tool can be run by hand. Pydantic-settings
reads from the process environment and raises ValidationError when a
required variable is missing.
"""

from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParseSettings(BaseSettings):
    """Inputs for one parse run."""

    model_config = SettingsConfigDict(populate_by_name=True)

    to_parse: str = Field(
        validation_alias=AliasChoices("INPUT_TO_PARSE", "TO_PARSE", "to_parse"),
    )
    output_format: str = Field(
        default="json",
        validation_alias=AliasChoices(
            "INPUT_OUTPUT_FORMAT", "OUTPUT_FORMAT", "output_format"
        ),
    )
    github_output: Optional[str] = None  # Path of the step's output file
    runner_debug: bool = False

    @field_validator("runner_debug", mode="before")
    @classmethod
    def _empty_debug_is_off(cls, value):
        # Workflows map unset variables to an empty string
        if isinstance(value, str) and not value.strip():
            return False
        return value
