"""Lookups over the covenant address table.

The table holds a handful of rows, so every lookup is a linear scan.
"""

from __future__ import annotations

from collections.abc import Sequence

from .foundation import Chain, CovenantAddress


def address_list(addresses: Sequence[CovenantAddress]) -> list[str]:
    """Return the bare address strings in table order."""

    return [record.address for record in addresses]


def address_by_chain(addresses: Sequence[CovenantAddress], chain: Chain | str) -> CovenantAddress | None:
    """Return the first address registered on `chain`.

    Args:
        addresses: Address table to scan.
        chain: Chain enum member or its string value. Unknown strings match
            nothing.

    Returns:
        The matching record, or None when the chain has no covenant address.
    """

    for record in addresses:
        if record.chain == chain:
            return record
    return None


def _normalize(address: str) -> str:
    return address.lower()


def address_info(addresses: Sequence[CovenantAddress], address: str) -> CovenantAddress | None:
    """Return the record for `address`, compared case-insensitively."""

    normalized = _normalize(address)
    for record in addresses:
        if record.address.lower() == normalized:
            return record
    return None


def is_covenant_address(addresses: Sequence[CovenantAddress], address: str) -> bool:
    """Return True when `address` is one of the covenant addresses (any case)."""

    return address_info(addresses, address) is not None
