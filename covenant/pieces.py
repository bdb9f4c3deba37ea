"""Piece types and the keyword rules used to classify them.

A piece is a named integration artifact the portal still needs. Category is a
pure function of the piece name; status depends only on whether the search
for it returned anything.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from .search import SearchResult

_WHITESPACE_RE = re.compile(r"\s+")
_ID_DISALLOWED_RE = re.compile(r"[^a-z0-9-]")


class PieceCategory(StrEnum):
    """What kind of artifact a piece is."""

    contract = "contract"
    lore = "lore"
    quest = "quest"
    guardian = "guardian"
    constant = "constant"
    integration = "integration"


class PieceStatus(StrEnum):
    """Resolution status for a piece.

    `partial` is part of the vocabulary but no resolution rule produces it.
    """

    found = "found"
    missing = "missing"
    partial = "partial"


# Checked in order; the first rule with a matching keyword wins.
CATEGORY_RULES: tuple[tuple[PieceCategory, tuple[str, ...]], ...] = (
    (PieceCategory.contract, ("contract", "address")),
    (PieceCategory.quest, ("quest",)),
    (PieceCategory.guardian, ("guardian",)),
    (PieceCategory.constant, ("constant", "419", "369")),
    (PieceCategory.integration, ("integration",)),
)


@dataclass(frozen=True, slots=True)
class Piece:
    """A resolved piece.

    Attributes:
        id: Slug derived from the name (see `piece_id`).
        category: Keyword-derived category.
        name: Original piece name, unaltered.
        description: Human-readable note about the search that produced it.
        status: Found when the search returned at least one result.
        sources: Result URLs in provider order.
        data: Raw search results when found, otherwise None.
    """

    id: str
    category: PieceCategory
    name: str
    description: str
    status: PieceStatus
    sources: tuple[str, ...] = ()
    data: tuple[SearchResult, ...] | None = None

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        payload: dict[str, object] = {
            "id": self.id,
            "category": str(self.category),
            "name": self.name,
            "description": self.description,
            "status": str(self.status),
            "sources": list(self.sources),
        }
        if self.data is not None:
            payload["data"] = [result.as_json() for result in self.data]
        return payload


def categorize_piece(name: str) -> PieceCategory:
    """Return the category for a piece name.

    Args:
        name: Piece name; matching is case-insensitive substring matching.

    Returns:
        The category of the first rule in `CATEGORY_RULES` with a keyword
        present in the name, or `PieceCategory.lore` when none match.
    """

    lower = name.lower()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in lower for keyword in keywords):
            return category
    return PieceCategory.lore


def piece_id(name: str) -> str:
    """Return a stable slug for a piece name.

    Whitespace runs become single hyphens, then anything outside
    `[a-z0-9-]` is removed.
    """

    slug = _WHITESPACE_RE.sub("-", name.lower())
    return _ID_DISALLOWED_RE.sub("", slug)


def resolve_piece(name: str, results: Sequence[SearchResult]) -> Piece:
    """Build a Piece from a name and the search results returned for it."""

    found = len(results) > 0
    return Piece(
        id=piece_id(name),
        category=categorize_piece(name),
        name=name,
        description=f"Searching for: {name}",
        status=PieceStatus.found if found else PieceStatus.missing,
        sources=tuple(result.url for result in results),
        data=tuple(results) if found else None,
    )
