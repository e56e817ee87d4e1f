"""fuzzymatch Package

Fuzzy string matching for "did you mean" suggestions: rank dictionary words
by Levenshtein distance to a query, within a configurable threshold.
"""

from .config import Config, get_config, setup_logging
from .consts import PACKAGE_VERSION
from .distance import levenshtein_distance
from .exceptions import ConfigError, FuzzyMatchError
from .matcher import Matcher, MatchResult
from .options import MatcherOptions, normalize_options, split_values

__version__ = PACKAGE_VERSION

__all__ = [
    "__version__",
    "get_config",
    "setup_logging",
    "levenshtein_distance",
    "normalize_options",
    "split_values",
    "Config",
    "Matcher",
    "MatchResult",
    "MatcherOptions",
    "FuzzyMatchError",
    "ConfigError",
]
