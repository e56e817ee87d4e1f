"""Configuration management."""

import logging
from functools import cache

from pydantic import ConfigDict, Field, computed_field, field_validator
from pydantic_settings import BaseSettings

from .consts import DEFAULT_CASE_SENSITIVE, DEFAULT_THRESHOLD
from .options import MatcherOptions


class Config(BaseSettings):
    """Application settings, overridable through FUZZYMATCH_* variables."""

    model_config = ConfigDict(
        env_prefix="FUZZYMATCH_", case_sensitive=False, extra="ignore"
    )
    values: str = Field(
        default="",
        description="Initial dictionary, separated by commas and/or whitespace",
    )
    threshold: int = Field(
        default=DEFAULT_THRESHOLD, ge=0, description="Maximum accepted edit distance"
    )
    case_sensitive: bool = Field(
        default=DEFAULT_CASE_SENSITIVE, description="Match without folding case"
    )
    log_level: str = Field(
        default="INFO",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
        description="Logging level",
    )

    @field_validator("threshold", mode="before")
    @classmethod
    def _reject_bool_threshold(cls, value):
        if isinstance(value, bool):
            raise ValueError("threshold must be an integer, not a boolean")
        return value

    @computed_field
    @property
    def matcher_options(self) -> MatcherOptions:
        """Options for the matcher described by these settings."""
        return MatcherOptions(
            values=self.values,
            threshold=self.threshold,
            case_sensitive=self.case_sensitive,
        )


@cache
def get_config() -> Config:
    """Get a cached Config instance."""
    return Config()


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Configure logging for the entire application"""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,  # Override any existing configuration
    )
    return logging.getLogger("fuzzymatch")
