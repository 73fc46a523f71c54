"""
fuzzy.

Does: Facade exposing the fuzzy name suggestion helper.
Used by: Resolver diagnostics.
"""

from __future__ import annotations

from .suggest import (
    SUGGEST_THRESHOLD,
    suggest_name,
)

__all__ = [
    "SUGGEST_THRESHOLD",
    "suggest_name",
]
