"""Covenant reference data, piece resolution and prompt building.

This package is framework-free: it must not import Django or perform I/O on
its own. Network access goes through an injected `SearchClient`.
"""

from .looking_glass import CovenantLookingGlass

__all__ = ["CovenantLookingGlass"]
