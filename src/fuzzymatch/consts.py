"""Package-wide constants for fuzzymatch."""

# Package metadata
PACKAGE_VERSION = "1.0.0"
SERVER_NAME = "fuzzymatch"

# Matching defaults
DEFAULT_THRESHOLD = 2
DEFAULT_CASE_SENSITIVE = False

# Dictionary strings are split on commas and/or whitespace
VALUE_SEPARATOR_PATTERN = r"[,\s]+"
