"""The Covenant Looking Glass.

Resolves the foundation's missing pieces through a web search provider and
assembles whatever was found. Searches run one at a time in table order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from . import addresses
from .assembly import AssemblyResult, assemble_pieces, generate_integration_code
from .foundation import FOUNDATION, Chain, CovenantAddress, CovenantFoundation
from .pieces import Piece, resolve_piece
from .search import DEFAULT_RESULT_COUNT, SearchClient, SearchResult

logger = logging.getLogger(__name__)

BRIDGEWORLD_QUERY_PREFIX = "TreasureDAO Bridgeworld"
COVENANT_QUERY_PREFIX = "Bridgeworld covenant"


class CovenantLookingGlass:
    """Search for, classify and assemble covenant pieces.

    Args:
        search_client: Provider used for every query.
        foundation: Reference bundle; defaults to the built-in foundation.
    """

    def __init__(self, search_client: SearchClient, *, foundation: CovenantFoundation = FOUNDATION) -> None:
        self.search_client = search_client
        self.foundation = foundation

    def find_missing_pieces(self) -> list[Piece]:
        """Search once per missing piece and return the resolved pieces.

        Raises:
            SearchError: Propagated from the search client on the first
                failing query; earlier results are discarded.
        """

        pieces: list[Piece] = []
        for name in self.foundation.missing_pieces:
            results = self.search_client.search(f"{BRIDGEWORLD_QUERY_PREFIX} {name}", count=DEFAULT_RESULT_COUNT)
            piece = resolve_piece(name, results)
            logger.debug("Resolved piece %s category=%s status=%s", piece.id, piece.category, piece.status)
            pieces.append(piece)
        return pieces

    def search_bridgeworld_component(self, component: str) -> list[SearchResult]:
        """Search for a named Bridgeworld component."""

        return self.search_client.search(f"{BRIDGEWORLD_QUERY_PREFIX} {component}", count=DEFAULT_RESULT_COUNT)

    def search_covenant_info(self, term: str) -> list[SearchResult]:
        """Search for covenant-related information."""

        return self.search_client.search(f"{COVENANT_QUERY_PREFIX} {term}", count=DEFAULT_RESULT_COUNT)

    def assemble_pieces(self, pieces: Sequence[Piece]) -> AssemblyResult:
        """Assemble pieces against this looking glass's foundation."""

        return assemble_pieces(pieces, self.foundation)

    def generate_integration_code(self, pieces: Sequence[Piece]) -> str:
        """Render integration code for the found pieces."""

        return generate_integration_code(pieces, self.foundation.constants)

    def get_foundation(self) -> CovenantFoundation:
        return self.foundation

    def get_covenant_addresses(self) -> tuple[CovenantAddress, ...]:
        return self.foundation.covenant_addresses

    def get_covenant_addresses_list(self) -> list[str]:
        """Return bare address strings (legacy list form)."""

        return addresses.address_list(self.foundation.covenant_addresses)

    def get_covenant_address_by_chain(self, chain: Chain | str) -> CovenantAddress | None:
        return addresses.address_by_chain(self.foundation.covenant_addresses, chain)

    def is_covenant_address(self, address: str) -> bool:
        return addresses.is_covenant_address(self.foundation.covenant_addresses, address)

    def get_covenant_address_info(self, address: str) -> CovenantAddress | None:
        return addresses.address_info(self.foundation.covenant_addresses, address)
