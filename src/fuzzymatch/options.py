"""Normalization of heterogeneous Matcher options.

A Matcher only understands the canonical triple of dictionary values,
threshold and case sensitivity. Callers may describe that triple in several
shapes; everything here exists to turn those shapes into a MatcherOptions.
"""

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from .consts import DEFAULT_CASE_SENSITIVE, DEFAULT_THRESHOLD, VALUE_SEPARATOR_PATTERN
from .exceptions import ConfigError

logger = logging.getLogger("fuzzymatch.options")


def split_values(text: str) -> list[str]:
    """Split a dictionary string on commas and/or whitespace.

    >>> split_values("init, install update,upgrade")
    ['init', 'install', 'update', 'upgrade']
    """
    return [value for value in re.split(VALUE_SEPARATOR_PATTERN, text) if value]


class MatcherOptions(BaseModel):
    """Canonical Matcher configuration."""

    model_config = ConfigDict(extra="ignore")

    values: list[str] = Field(
        default_factory=list, description="Dictionary entries, in insertion order"
    )
    threshold: int = Field(
        default=DEFAULT_THRESHOLD, description="Maximum accepted edit distance"
    )
    case_sensitive: bool = Field(
        default=DEFAULT_CASE_SENSITIVE,
        validation_alias=AliasChoices("case_sensitive", "caseSensitive"),
        description="Compare without folding case when True",
    )

    @field_validator("values", mode="before")
    @classmethod
    def _split_string_values(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return split_values(value)
        return value

    @field_validator("threshold", mode="before")
    @classmethod
    def _default_missing_threshold(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("threshold must be an integer, not a boolean")
        return DEFAULT_THRESHOLD if value is None else value


def normalize_options(options: Any = None) -> MatcherOptions:
    """Map any accepted options shape to a MatcherOptions.

    Accepted shapes:
        - None: all defaults
        - str: dictionary values separated by commas and/or whitespace
        - sequence of str: dictionary values in order
        - mapping with ``values``, ``threshold`` and ``case_sensitive``
          (or ``caseSensitive``) keys
        - MatcherOptions: returned unchanged

    Raises:
        ConfigError: If the shape is unsupported or a field fails validation.
    """
    if options is None:
        return MatcherOptions()
    if isinstance(options, MatcherOptions):
        return options

    if isinstance(options, (str, Sequence)):
        options = {"values": options}
    elif not isinstance(options, Mapping):
        raise ConfigError(
            f"Unsupported matcher options type: {type(options).__name__}",
            suggestions=[
                "Pass a string, a list of strings, or a mapping with "
                "'values', 'threshold' and 'case_sensitive'",
            ],
            context={"options_type": type(options).__name__},
        )

    try:
        normalized = MatcherOptions.model_validate(options)
    except ValidationError as e:
        raise ConfigError(
            "Invalid matcher options",
            errors=[
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ],
            suggestions=[
                "Use an integer threshold",
                "Use strings for dictionary values",
            ],
            context={"error_count": e.error_count()},
        ) from e

    logger.debug(
        f"Normalized options: {len(normalized.values)} values, "
        f"threshold={normalized.threshold}, case_sensitive={normalized.case_sensitive}"
    )
    return normalized
