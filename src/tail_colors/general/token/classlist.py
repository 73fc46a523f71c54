# tail_colors/general/token/classlist.py
"""
classlist.

Does: Turn a class string into an ordered token list (and back).
Returns: tokenize() -> list[str]; join() -> str.
Used by: Every engine entry point accepting "string or list" input.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

__all__ = ["ClassInput", "tokenize", "join"]

# Either a raw class string or an already tokenized sequence
ClassInput = str | list[str] | tuple[str, ...] | None

_WS_RE = re.compile(r"\s+")


def tokenize(classes: ClassInput) -> list[str]:
    """
    Does: Split `classes` on runs of whitespace, dropping empty segments.
          Lists/tuples are taken as already tokenized (returned as a list, untouched).
    Returns: Ordered token list; [] for None or blank input.
    Raises: TypeError for anything that is neither a string nor a sequence of tokens.
    """
    if classes is None:
        return []
    if isinstance(classes, list):
        return classes
    if isinstance(classes, tuple):
        return list(classes)
    if not isinstance(classes, str):
        raise TypeError(f"expected class string or token list, got {type(classes).__name__}")
    return [t for t in _WS_RE.split(classes) if t]


def join(tokens: Iterable[str]) -> str:
    """Does: Join tokens with single spaces. Returns: Class string."""
    return " ".join(tokens)
