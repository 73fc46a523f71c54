# constants.py
# ============

"""
constants.
=========

Does: Define the immutable color-domain constants of the engine: the built-in
      Tailwind palette names, the ordered tint scale and the contrast table.
Used By: Vocabulary assembly, classifier, tint arithmetic.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

# ── 1) Built-in palette ──────────────────────────────────────────────────────
# Tailwind default palette; black/white carry no tints but are valid bare colors.
BUILTIN_COLORS: frozenset[str] = frozenset(
    {
        "slate",
        "gray",
        "zinc",
        "neutral",
        "stone",
        "red",
        "orange",
        "amber",
        "yellow",
        "lime",
        "green",
        "emerald",
        "teal",
        "cyan",
        "sky",
        "blue",
        "indigo",
        "violet",
        "purple",
        "fuchsia",
        "pink",
        "rose",
        "black",
        "white",
    }
)


# ── 2) Tint scale ────────────────────────────────────────────────────────────
# Order matters: one index = one step darker.
TINT_SCALE: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# Readable text tint for a given background tint (not a mirror of the scale)
INVERT_TABLE: dict[int, int] = {
    50: 400,
    100: 500,
    200: 600,
    300: 700,
    400: 700,
    500: 50,
    600: 50,
    700: 100,
    800: 100,
    900: 200,
    950: 200,
}

__all__ = [
    "BUILTIN_COLORS",
    "TINT_SCALE",
    "INVERT_TABLE",
]
