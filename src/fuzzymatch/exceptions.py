"""fuzzymatch custom exceptions.

Matching itself never raises on valid string input: an empty dictionary or a
query with no close candidates is a normal, empty result. Exceptions are
reserved for the configuration boundary, where caller-supplied options are
normalized before a Matcher ever sees them.
"""


class FuzzyMatchError(Exception):
    """Base exception for all fuzzymatch errors.

    Besides the message, an error can list what exactly was wrong with the
    options (``errors``), how to fix them (``suggestions``), and the offending
    input (``context``). The MCP server copies all three into its error
    responses.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: list[str] | None = None,
        suggestions: list[str] | None = None,
        context: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])
        self.context = dict(context or {})


class ConfigError(FuzzyMatchError):
    """Matcher configuration errors - recoverable by fixing the options.

    Raised when constructor options cannot be normalized:
    - An options value of an unsupported shape (e.g. a number)
    - A threshold that is not an integer (booleans included)
    - Dictionary values that are not strings, or a bare string handed to
      the Matcher constructor instead of a sequence
    """

    pass
