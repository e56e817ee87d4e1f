"""Pytest configuration and shared fixtures"""

import os

import pytest

from fuzzymatch.config import Config, get_config
from fuzzymatch.matcher import Matcher

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)

COMMANDS = ["init", "install", "update", "upgrade"]


@pytest.fixture
def commands():
    """Command names used as a small dictionary"""
    return list(COMMANDS)


@pytest.fixture
def matcher(commands):
    """Matcher over the command dictionary with default settings"""
    return Matcher(commands)


@pytest.fixture
def clean_env():
    """Fixture that temporarily clears FUZZYMATCH_* environment variables.

    This ensures Config tests see the true defaults without interference
    from environment variables that might be set in the user's shell.
    """
    fuzzymatch_vars = {
        key: value
        for key, value in os.environ.items()
        if key.startswith("FUZZYMATCH_")
    }

    for key in fuzzymatch_vars:
        os.environ.pop(key, None)
    get_config.cache_clear()

    try:
        yield
    finally:
        for key, value in fuzzymatch_vars.items():
            os.environ[key] = value
        get_config.cache_clear()


@pytest.fixture
def clean_config(clean_env):
    """Fixture that provides a Config instance with clean environment."""
    return Config()
