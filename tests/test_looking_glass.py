"""Unit tests for the covenant looking glass resolution pass."""

from __future__ import annotations

import pytest

from covenant.foundation import FOUNDATION, MISSING_PIECES
from covenant.looking_glass import CovenantLookingGlass
from covenant.pieces import PieceStatus
from covenant.search import SearchError
from fakes import FakeSearchClient, results_for

pytestmark = pytest.mark.unit


def test_find_missing_pieces_queries_each_piece_in_order(empty_search) -> None:
    """One prefixed query per piece, sequential, with the fixed result count."""

    glass = CovenantLookingGlass(empty_search)
    pieces = glass.find_missing_pieces()

    assert [piece.name for piece in pieces] == list(MISSING_PIECES)
    assert empty_search.calls == [(f"TreasureDAO Bridgeworld {name}", 10) for name in MISSING_PIECES]


def test_empty_search_yields_incomplete_assembly_with_all_names(empty_search) -> None:
    """All six pieces stay missing, unaltered and in order."""

    glass = CovenantLookingGlass(empty_search)
    result = glass.assemble_pieces(glass.find_missing_pieces())

    assert result.complete is False
    assert result.missing == list(MISSING_PIECES)
    assert result.assembled.found_pieces == []
    assert len(result.assembled.missing_pieces) == 6


def test_found_status_follows_result_presence() -> None:
    """Pieces are found iff their query returned results; partial never appears."""

    def responder(query: str):
        if "Harvester" in query or "Quest" in query:
            return results_for("https://docs.example/hit")
        return []

    glass = CovenantLookingGlass(FakeSearchClient(responder))
    pieces = glass.find_missing_pieces()
    statuses = {piece.name: piece.status for piece in pieces}

    assert statuses["Harvester boost implementation"] is PieceStatus.found
    assert statuses["Quest contract integration code"] is PieceStatus.found
    assert statuses["Cross-chain bridge setup"] is PieceStatus.missing
    assert PieceStatus.partial not in statuses.values()


def test_search_failure_propagates() -> None:
    """A failing query aborts the pass with the client's SearchError."""

    client = FakeSearchClient(error_on="Marketplace")
    glass = CovenantLookingGlass(client)

    with pytest.raises(SearchError):
        glass.find_missing_pieces()
    assert len(client.calls) == 4


def test_component_and_covenant_searches_use_their_prefixes(empty_search) -> None:
    """Passthrough searches prefix the query with their scope term."""

    glass = CovenantLookingGlass(empty_search)
    glass.search_bridgeworld_component("Harvester")
    glass.search_covenant_info("guardians")

    assert empty_search.calls == [
        ("TreasureDAO Bridgeworld Harvester", 10),
        ("Bridgeworld covenant guardians", 10),
    ]


def test_default_foundation_is_shared_reference_data(empty_search) -> None:
    """The looking glass exposes the built-in foundation by default."""

    glass = CovenantLookingGlass(empty_search)
    assert glass.get_foundation() is FOUNDATION
    assert glass.get_covenant_addresses() == FOUNDATION.covenant_addresses
