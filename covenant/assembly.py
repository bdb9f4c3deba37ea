"""Assemble resolved pieces into an integration bundle.

Both entry points are pure: they read pieces and reference data and never
perform I/O.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .foundation import CovenantConstants, CovenantFoundation
from .pieces import Piece, PieceCategory, PieceStatus

BRIDGEWORLD_ORACLE_ADDRESS = "0xfa05997C66437dCCAe860af334b30d69E0De24DC"
BRIDGEWORLD_NETWORK = "arbitrum"


@dataclass(frozen=True, slots=True)
class AssembledEntry:
    """A found piece placed into one of the integration buckets."""

    name: str
    sources: tuple[str, ...]

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {"name": self.name, "sources": list(self.sources)}


@dataclass(frozen=True, slots=True)
class IntegrationBundle:
    """Found pieces bucketed by category, plus the covenant constants.

    Only contract, quest and guardian pieces have buckets.
    """

    constants: CovenantConstants
    contracts: list[AssembledEntry] = field(default_factory=list)
    quests: list[AssembledEntry] = field(default_factory=list)
    guardians: list[AssembledEntry] = field(default_factory=list)

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "contracts": [entry.as_json() for entry in self.contracts],
            "quests": [entry.as_json() for entry in self.quests],
            "guardians": [entry.as_json() for entry in self.guardians],
            "constants": self.constants.as_json(),
        }


@dataclass(frozen=True, slots=True)
class Assembled:
    """The assembled view of one resolution pass."""

    foundation: CovenantFoundation
    found_pieces: list[Piece]
    missing_pieces: list[Piece]
    integration: IntegrationBundle

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "foundation": self.foundation.as_json(),
            "found_pieces": [piece.as_json() for piece in self.found_pieces],
            "missing_pieces": [piece.as_json() for piece in self.missing_pieces],
            "integration": self.integration.as_json(),
        }


@dataclass(frozen=True, slots=True)
class AssemblyResult:
    """Outcome of `assemble_pieces`.

    Attributes:
        complete: True when no piece is missing.
        assembled: Found/missing split and the integration buckets.
        missing: Names of missing pieces, in input order.
    """

    complete: bool
    assembled: Assembled
    missing: list[str]

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "complete": self.complete,
            "assembled": self.assembled.as_json(),
            "missing": list(self.missing),
        }


def assemble_pieces(pieces: Sequence[Piece], foundation: CovenantFoundation) -> AssemblyResult:
    """Split pieces into found/missing and bucket the found ones.

    Found pieces in the lore, constant and integration categories appear in
    `found_pieces` but get no bucket in the integration bundle. Pieces with
    `partial` status land in neither list.

    Args:
        pieces: Resolved pieces, typically from a single resolution pass.
        foundation: Reference bundle to attach to the result.

    Returns:
        AssemblyResult whose `complete` flag is True iff nothing is missing.
    """

    found_pieces = [piece for piece in pieces if piece.status == PieceStatus.found]
    missing_pieces = [piece for piece in pieces if piece.status == PieceStatus.missing]
    integration = IntegrationBundle(constants=foundation.constants)

    buckets: dict[PieceCategory, list[AssembledEntry]] = {
        PieceCategory.contract: integration.contracts,
        PieceCategory.quest: integration.quests,
        PieceCategory.guardian: integration.guardians,
    }
    for piece in found_pieces:
        if not piece.data:
            continue
        bucket = buckets.get(piece.category)
        if bucket is None:
            continue
        bucket.append(AssembledEntry(name=piece.name, sources=piece.sources))

    missing = [piece.name for piece in missing_pieces]
    return AssemblyResult(
        complete=not missing,
        assembled=Assembled(
            foundation=foundation,
            found_pieces=found_pieces,
            missing_pieces=missing_pieces,
            integration=integration,
        ),
        missing=missing,
    )


def generate_integration_code(pieces: Sequence[Piece], constants: CovenantConstants) -> str:
    """Render the integration code snippet for the found pieces.

    The output is a TypeScript snippet meant to be read and pasted by a
    developer; nothing in the portal parses it.
    """

    found_contracts = [
        piece for piece in pieces if piece.category == PieceCategory.contract and piece.status == PieceStatus.found
    ]
    found_quests = [
        piece for piece in pieces if piece.category == PieceCategory.quest and piece.status == PieceStatus.found
    ]

    lines = [
        "// Generated Integration Code",
        "// Based on Covenant Foundation and Found Pieces",
        "",
        "import { createBridgeworldClient } from '@treasure-dev/tdk-core';",
        "",
        "const client = createBridgeworldClient({",
        f"  network: '{BRIDGEWORLD_NETWORK}',",
        f"  oracleAddress: '{BRIDGEWORLD_ORACLE_ADDRESS}',",
        "});",
        "",
    ]

    if found_contracts:
        lines.append("// Found Contracts:")
        for contract in found_contracts:
            lines.append(f"// - {contract.name}")
            lines.extend(f"//   Source: {source}" for source in contract.sources)
        lines.append("")

    if found_quests:
        lines.append("// Found Quest Systems:")
        lines.extend(f"// - {quest.name}" for quest in found_quests)
        lines.append("")

    lines.extend(
        [
            "// Covenant Constants",
            f"const THEOS = {constants.theos};",
            f"const EL = {constants.el};",
            f"const TORAH_PAGES = {constants.torah_pages};",
            f"const RESONANCE = {constants.resonance};",
            f"const HEBREW_PATHS = {constants.hebrew_paths};",
        ]
    )
    return "\n".join(lines) + "\n"
