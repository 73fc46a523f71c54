# src/tail_colors/general/fuzzy/suggest.py
from __future__ import annotations

"""
suggest.py

Does: "Did you mean" helper: closest known color name for an unrecognized one.
Returns: suggest_name() -> best candidate or None under threshold.
Used by: Resolver traces when a prefixed token is rejected (diagnostics only).
"""

import logging
from collections.abc import Iterable

from rapidfuzz import fuzz, process

__all__ = ["SUGGEST_THRESHOLD", "suggest_name"]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGEST_THRESHOLD = 80
LENGTH_DELTA_SKIP = 3  # pre-filter: names too long/short to be a typo


def suggest_name(
    name: str,
    candidates: Iterable[str],
    *,
    threshold: int = SUGGEST_THRESHOLD,
) -> str | None:
    """
    Does: Score `name` against `candidates` with fuzz.ratio and keep the best one.
    Returns: Best candidate (ties broken alphabetically) or None.
    """
    if not name:
        return None
    key = name.lower().strip()
    pool = sorted(c for c in candidates if abs(len(c) - len(key)) <= LENGTH_DELTA_SKIP)
    if not pool:
        return None
    if key in pool:
        return key

    hit = process.extractOne(key, pool, scorer=fuzz.ratio, score_cutoff=threshold)
    if hit is None:
        return None
    best, score, _ = hit
    log.debug("suggest %r -> %r (score=%.1f)", key, best, score)
    return best
