"""Response envelope returned by the MCP tools."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from .exceptions import FuzzyMatchError


class Response(BaseModel):
    """Outcome of a matcher tool call.

    ``data`` holds the matches, the closest match, or the matcher settings,
    depending on the tool. ``metadata`` carries the threshold and counts the
    result was computed with.
    """

    status: Literal["success", "error"] = Field(
        ..., description="Whether the tool call succeeded"
    )
    message: str = Field(..., description="One-line summary, e.g. 'Did you mean ...?'")
    data: Any | None = Field(None, description="Tool result payload")
    errors: list[str] = Field(
        default_factory=list, description="Details of what went wrong"
    )
    suggestions: list[str] = Field(
        default_factory=list,
        description="Next steps, e.g. raising the threshold or adding values",
    )
    metadata: dict[str, Any] | None = Field(
        None, description="Matcher settings and counts behind the result"
    )

    @classmethod
    def from_error(cls, error: Exception) -> "Response":
        """Turn an exception raised during a tool call into an error Response.

        Package errors keep their own errors, suggestions and context; any
        other exception is reported as a matcher failure.
        """
        if isinstance(error, FuzzyMatchError):
            return cls(
                status="error",
                message=error.message,
                errors=error.errors,
                suggestions=error.suggestions,
                metadata={**error.context, "exception_type": type(error).__name__},
            )

        return cls(
            status="error",
            message=f"Matching failed: {error}",
            errors=[str(error)],
            suggestions=[
                "Check that the query and dictionary values are plain strings",
                "Use get_matcher_settings() to inspect the current matcher",
            ],
            metadata={"exception_type": type(error).__name__},
        )
