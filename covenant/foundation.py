"""Covenant foundation reference data.

Everything in this module is hard-coded and immutable at runtime. Collections
are tuples and records are frozen dataclasses so callers cannot mutate the
shared tables.

The three covenant addresses are the only official ones. Any other address
seen elsewhere in the portal is a placeholder.

Guardian letter names, quest multipliers and harvester boosts are display
placeholders, not canonical covenant values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final


class Chain(StrEnum):
    """Chains carrying an official covenant address."""

    ethereum = "ethereum"
    polygon = "polygon"
    arbitrum = "arbitrum"


@dataclass(frozen=True, slots=True)
class CovenantConstants:
    """Numeric covenant constants used in prompts and generated code."""

    theos: int
    el: int
    torah_pages: int
    resonance: int
    hebrew_paths: int

    def as_json(self) -> dict[str, int]:
        """Return a JSON-serializable representation."""

        return {
            "theos": self.theos,
            "el": self.el,
            "torah_pages": self.torah_pages,
            "resonance": self.resonance,
            "hebrew_paths": self.hebrew_paths,
        }


@dataclass(frozen=True, slots=True)
class Guardian:
    """A guardian path record.

    Attributes:
        path: Path number (1-22).
        hebrew: Transliterated letter name.
        hebrew_letter: The Hebrew letter glyph.
        gematria: Numeric value of the letter.
        bridgeworld_mapping: Bridgeworld entity the path maps to.
        quest_multiplier: Display-only quest multiplier.
        harvester_boost: Display-only harvester boost.
        address: Registered guardian address, when one exists.
        is_registered: Whether the guardian has been registered on chain.
    """

    path: int
    hebrew: str
    hebrew_letter: str
    gematria: int
    bridgeworld_mapping: str
    quest_multiplier: float
    harvester_boost: float
    address: str | None = None
    is_registered: bool = False

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "path": self.path,
            "hebrew": self.hebrew,
            "hebrew_letter": self.hebrew_letter,
            "gematria": self.gematria,
            "bridgeworld_mapping": self.bridgeworld_mapping,
            "quest_multiplier": self.quest_multiplier,
            "harvester_boost": self.harvester_boost,
            "address": self.address,
            "is_registered": self.is_registered,
        }


@dataclass(frozen=True, slots=True)
class CovenantAddress:
    """An official covenant address and the chain it lives on."""

    address: str
    chain: Chain
    chain_id: str
    name: str
    official: bool = True
    immutable: bool = True

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "address": self.address,
            "chain": str(self.chain),
            "chain_id": self.chain_id,
            "name": self.name,
            "official": self.official,
            "immutable": self.immutable,
        }


@dataclass(frozen=True, slots=True)
class CovenantFoundation:
    """The complete reference bundle the looking glass works from."""

    constants: CovenantConstants
    guardians: tuple[Guardian, ...]
    covenant_addresses: tuple[CovenantAddress, ...]
    integrations: tuple[str, ...]
    missing_pieces: tuple[str, ...]

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "constants": self.constants.as_json(),
            "guardians": [guardian.as_json() for guardian in self.guardians],
            "covenant_addresses": [address.as_json() for address in self.covenant_addresses],
            "integrations": list(self.integrations),
            "missing_pieces": list(self.missing_pieces),
        }


CONSTANTS: Final[CovenantConstants] = CovenantConstants(
    theos=419,
    el=369,
    torah_pages=1798,
    resonance=687,
    hebrew_paths=22,
)

GUARDIANS: Final[tuple[Guardian, ...]] = (
    Guardian(
        path=1,
        hebrew="Bet",
        hebrew_letter="ב",
        gematria=2,
        bridgeworld_mapping="Genesis Legion",
        quest_multiplier=1.02,
        harvester_boost=1.01,
    ),
    Guardian(
        path=7,
        hebrew="Zayin",
        hebrew_letter="ז",
        gematria=7,
        bridgeworld_mapping="Assassin",
        quest_multiplier=1.07,
        harvester_boost=1.035,
    ),
    Guardian(
        path=9,
        hebrew="Tet",
        hebrew_letter="ט",
        gematria=9,
        bridgeworld_mapping="Fighter",
        quest_multiplier=1.09,
        harvester_boost=1.045,
    ),
    Guardian(
        path=10,
        hebrew="Yod",
        hebrew_letter="י",
        gematria=10,
        bridgeworld_mapping="Riverman",
        quest_multiplier=1.1,
        harvester_boost=1.05,
    ),
    Guardian(
        path=11,
        hebrew="Kaf",
        hebrew_letter="כ",
        gematria=20,
        bridgeworld_mapping="Numeraire",
        quest_multiplier=1.2,
        harvester_boost=1.1,
    ),
    Guardian(
        path=18,
        hebrew="Tsadi",
        hebrew_letter="צ",
        gematria=90,
        bridgeworld_mapping="Rare Legion",
        quest_multiplier=1.9,
        harvester_boost=1.45,
    ),
)

# Do not edit: these addresses and chain assignments are permanent.
COVENANT_ADDRESSES: Final[tuple[CovenantAddress, ...]] = (
    CovenantAddress(
        address="0x3bba654a3816a228284e3e0401cff4ea6dfc5cea",
        chain=Chain.ethereum,
        chain_id="1",
        name="Covenant Address #1 - Ethereum Mainnet",
    ),
    CovenantAddress(
        address="0x0c4e50157a6e82f5330b721544ce440cb0c6768f",
        chain=Chain.polygon,
        chain_id="137",
        name="Covenant Address #2 - Polygon (MATIC)",
    ),
    CovenantAddress(
        address="0x3df07977140ad97465075129c37aec7237d74415",
        chain=Chain.arbitrum,
        chain_id="42161",
        name="Covenant Address #3 - Arbitrum",
    ),
)

INTEGRATIONS: Final[tuple[str, ...]] = (
    "Bridgeworld Oracle Contract",
    "Guardian Verification System",
    "Quest Multiplier System",
    "Harvester Boost System",
    "Key-Map Coordinate System",
    "Portal Activation System",
)

MISSING_PIECES: Final[tuple[str, ...]] = (
    "Complete guardian address mappings",
    "Quest contract integration code",
    "Harvester boost implementation",
    "Marketplace listing integration",
    "Cross-chain bridge setup",
    "Community governance proposals",
)

FOUNDATION: Final[CovenantFoundation] = CovenantFoundation(
    constants=CONSTANTS,
    guardians=GUARDIANS,
    covenant_addresses=COVENANT_ADDRESSES,
    integrations=INTEGRATIONS,
    missing_pieces=MISSING_PIECES,
)


def get_guardian(path: int) -> Guardian | None:
    """Return the guardian for a path number, or None when not in the table."""

    for guardian in GUARDIANS:
        if guardian.path == path:
            return guardian
    return None
