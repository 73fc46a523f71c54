# tail_colors/color/cleaner.py
"""
cleaner
=======

Does: Filter tokens out of a class list by exact match (multiset), by prefix, or by
      color-name membership.
Used By: UI components stripping the intent tokens they consumed before rendering.
Returns: Space-joined survivors, in input order. The caller's list is never mutated.
"""

from __future__ import annotations

from collections import Counter

from tail_colors.color.vocab import TailConfig, resolve_config
from tail_colors.general.token import ClassInput, join, tokenize

__all__ = ["clean", "clean_prefix", "clean_colors"]


def clean(classes: ClassInput, remove: ClassInput) -> str:
    """
    Does: Drop exact matches of `remove`, one occurrence per entry
          ("a b a", "a" -> "b a").
    Returns: Class string.
    """
    budget = Counter(tokenize(remove))
    kept: list[str] = []
    for token in tokenize(classes):
        if budget[token] > 0:
            budget[token] -= 1
            continue
        kept.append(token)
    return join(kept)


def clean_prefix(classes: ClassInput, prefixes: ClassInput) -> str:
    """Does: Drop every token starting with `prefix-` for any of `prefixes`. Returns: Class string."""
    heads = tuple(f"{p}-" for p in tokenize(prefixes))
    if not heads:
        return join(tokenize(classes))
    return join(t for t in tokenize(classes) if not t.startswith(heads))


def clean_colors(classes: ClassInput, *, config: TailConfig | None = None) -> str:
    """
    Does: Drop tokens starting with a known color name ("red", "red-500", but also
          "redish"). Prefixed tokens such as "bg-red-500" survive.
    Returns: Class string.
    """
    names = tuple(resolve_config(config).colors)
    return join(t for t in tokenize(classes) if not t.startswith(names))
