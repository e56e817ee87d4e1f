"""fuzzymatch MCP server implementation."""

import logging

from mcp.server.fastmcp import FastMCP

from .config import get_config, setup_logging
from .consts import SERVER_NAME
from .matcher import Matcher
from .models import Response

logger = logging.getLogger("fuzzymatch.server")

mcp = FastMCP(
    name=SERVER_NAME,
    instructions="""
    fuzzymatch MCP server.

    This MCP server offers "did you mean" suggestions: it compares a possibly
    mistyped word against a dictionary and returns the closest entries by
    edit distance.
    """,
    log_level=get_config().log_level,
)

# Shared matcher, built lazily from settings
_matcher: Matcher | None = None


def get_matcher() -> Matcher:
    """Get or create the shared Matcher instance."""
    global _matcher

    if _matcher is None:
        config = get_config()
        _matcher = Matcher.from_options(config.matcher_options)
        logger.info(f"Initialized {_matcher!r}")

    return _matcher


def reset_matcher() -> None:
    """Discard the shared Matcher; the next tool call rebuilds it from settings."""
    global _matcher
    _matcher = None


@mcp.tool()
async def list_matches(query: str) -> Response:
    """List dictionary entries similar to a possibly mistyped word.

    Args:
        query: The word to look up

    Returns:
        Matching entries with their edit distance, closest first.
    """
    logger.info(f"Listing matches for {query!r}")

    try:
        matcher = get_matcher()
        matches = matcher.list(query)

        suggestions = []
        if not matches:
            suggestions = [
                "No entry is close enough - check the spelling or raise the threshold",
            ]
            if len(matcher) == 0:
                suggestions.append("The dictionary is empty - use add_values() first")

        return Response(
            status="success",
            message=f"Found {len(matches)} matches for '{query}'",
            data=[match.model_dump() for match in matches],
            suggestions=suggestions,
            metadata={
                "threshold": matcher.threshold,
                "case_sensitive": matcher.case_sensitive,
                "match_count": len(matches),
            },
        )
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def get_closest_match(query: str) -> Response:
    """Answer "did you mean ...?" for a possibly mistyped word.

    Args:
        query: The word to look up

    Returns:
        The single closest dictionary entry, or null in data.match when no
        entry is within the threshold.
    """
    logger.info(f"Getting closest match for {query!r}")

    try:
        match = get_matcher().get(query)

        if match is None:
            return Response(
                status="success",
                message=f"No close match for '{query}'",
                data={"match": None},
                suggestions=["Use list_matches() to inspect the dictionary search"],
            )
        return Response(
            status="success",
            message=f"Did you mean '{match}'?",
            data={"match": match},
        )
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def add_values(values: list[str]) -> Response:
    """Add words to the dictionary used for suggestions.

    Args:
        values: Words to append, kept in the given order

    Returns:
        The new dictionary size.
    """
    logger.info(f"Adding {len(values)} values")

    try:
        matcher = get_matcher().add(*values)

        return Response(
            status="success",
            message=f"Added {len(values)} values",
            metadata={"dictionary_size": len(matcher)},
        )
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def get_matcher_settings() -> Response:
    """Show the current matching settings and dictionary size."""
    logger.debug("get_matcher_settings called")

    try:
        matcher = get_matcher()

        return Response(
            status="success",
            message="Current matcher settings",
            data={
                "threshold": matcher.threshold,
                "case_sensitive": matcher.case_sensitive,
                "dictionary_size": len(matcher),
            },
        )
    except Exception as e:
        return Response.from_error(e)


def main() -> None:
    """Run the MCP server."""
    setup_logging(get_config().log_level)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
