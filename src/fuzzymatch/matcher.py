"""Fuzzy matching of a query against a dictionary of words."""

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .consts import DEFAULT_CASE_SENSITIVE, DEFAULT_THRESHOLD
from .distance import levenshtein_distance
from .exceptions import ConfigError
from .options import normalize_options

logger = logging.getLogger("fuzzymatch.matcher")


class MatchResult(BaseModel):
    """A dictionary entry that is close enough to the query."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Dictionary entry as stored (case unchanged)")
    distance: int = Field(..., ge=0, description="Edit distance to the query")


class Matcher:
    """Suggests dictionary entries within an edit-distance threshold.

    Usage::

        m = Matcher(["init", "install", "update", "upgrade"], threshold=4)
        m.list("udpate")  # [update (2), upgrade (4)]
        m.get("udpate")   # "update"

    Setters return the matcher so they can be chained::

        Matcher().add("update", "upgrade", "delete").match_case().get("deete")

    A Matcher is not safe for concurrent mutation; share one across threads
    only with external locking.
    """

    def __init__(
        self,
        values: Sequence[str] | None = None,
        threshold: int = DEFAULT_THRESHOLD,
        case_sensitive: bool = DEFAULT_CASE_SENSITIVE,
    ):
        if isinstance(values, str):
            raise ConfigError(
                "Matcher values must be a sequence of strings, not a single string",
                suggestions=[
                    "Use Matcher.from_options() to split a comma or space separated string",
                ],
                context={"values": values},
            )
        self.entries = [*values] if values is not None else []
        self.threshold = threshold
        self.case_sensitive = case_sensitive

    @classmethod
    def from_options(cls, options: Any = None) -> "Matcher":
        """Create a Matcher from any shape accepted by normalize_options.

        Raises:
            ConfigError: If the options cannot be normalized.
        """
        normalized = normalize_options(options)
        return cls(
            normalized.values,
            threshold=normalized.threshold,
            case_sensitive=normalized.case_sensitive,
        )

    def add(self, *values: str) -> "Matcher":
        """Append values to the dictionary."""
        self.entries.extend(values)
        return self

    def ignore_case(self) -> "Matcher":
        self.case_sensitive = False
        return self

    def match_case(self) -> "Matcher":
        self.case_sensitive = True
        return self

    def set_threshold(self, threshold: int) -> "Matcher":
        """Set the maximum accepted edit distance.

        A negative threshold matches nothing.
        """
        self.threshold = threshold
        return self

    def distance(self, word1: str, word2: str) -> int:
        """Edit distance used for ranking; override to change the metric."""
        return levenshtein_distance(word1, word2)

    def list(self, query: str) -> list[MatchResult]:
        """List dictionary entries similar to ``query``, closest first.

        The query is stripped of surrounding whitespace and, unless the
        matcher is case sensitive, compared in lower case against lower-cased
        entries. Entries further than ``threshold`` are dropped. Results with
        equal distance keep their dictionary order.

        Args:
            query: Search string.

        Returns:
            Matches sorted by ascending distance; empty if nothing is close.
        """
        query = query.strip()
        if not self.case_sensitive:
            query = query.lower()

        matches = []
        for word in self.entries:
            d = self.distance(query, word if self.case_sensitive else word.lower())
            if d > self.threshold:
                continue
            matches.append(MatchResult(value=word, distance=d))

        # sorted() is stable, ties stay in insertion order
        matches = sorted(matches, key=lambda match: match.distance)
        logger.debug(
            f"{len(matches)} of {len(self.entries)} entries within "
            f"threshold {self.threshold} of {query!r}"
        )
        return matches

    def get(self, query: str) -> str | None:
        """Return the closest entry to ``query``, or None if nothing is close.

        None is never a dictionary value, so it stays distinct from a match on
        an empty-string entry.
        """
        matches = self.list(query)
        return matches[0].value if matches else None

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return (
            f"Matcher(entries={len(self.entries)}, threshold={self.threshold}, "
            f"case_sensitive={self.case_sensitive})"
        )
