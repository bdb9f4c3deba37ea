"""Search boundary types shared by the looking glass and concrete clients.

The looking glass only depends on the `SearchClient` protocol so it can be
driven by the Brave client in production and by in-memory fakes in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

DEFAULT_RESULT_COUNT = 10


class SearchError(RuntimeError):
    """Raised when a search request cannot be completed."""


@dataclass(frozen=True, slots=True)
class SearchResult:
    """A single web search hit.

    Attributes:
        title: Result title as returned by the search provider.
        url: Result URL.
        description: Optional snippet text (may be empty).
    """

    title: str
    url: str
    description: str = ""

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        payload: dict[str, object] = {"title": self.title, "url": self.url}
        if self.description:
            payload["description"] = self.description
        return payload


class SearchClient(Protocol):
    """Minimal interface for a keyword web search provider."""

    def search(self, query: str, *, count: int = DEFAULT_RESULT_COUNT) -> list[SearchResult]:
        """Return up to `count` results for `query`.

        Raises:
            SearchError: When the provider cannot be reached or returns junk.
        """
        ...
