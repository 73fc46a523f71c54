# tail_colors/color/resolve.py
"""
resolve
=======

Does: Find the effective class for a role in a class list: exact / prefixed
      lookups, candidate sets, color-validated prefixes with synthesized
      defaults, and the prefix-less "main color" of a component.
Used By: UI components reading styling intent out of a user supplied class string.
Returns: Matching token, synthesized default, or None. Absence never raises.

All lookups are first-match-wins over the list order.
"""

from __future__ import annotations

from collections.abc import Collection

from tail_colors.color.classify import explode, parse_tint
from tail_colors.color.vocab import TailConfig, resolve_config, suggest_color
from tail_colors.general.token import ClassInput, join, tokenize
from tail_colors.general.utils import debug, enabled

__all__ = ["get", "get_color", "main_color", "get_prefix", "has"]


# ── Helpers ──────────────────────────────────────────────────────────────────
def _remainder(token: str, prefix: str) -> str | None:
    """Does: Strip `prefix-` from `token`. Returns: remainder or None if not prefixed."""
    head = f"{prefix}-"
    return token[len(head):] if token.startswith(head) else None


def _is_malformed_color(remainder: str, cfg: TailConfig) -> bool:
    """
    Does: Flag a known color followed by a bad tail ("blue-404", "blue-wide").
    Returns: True when the remainder is broken color syntax, not an unrelated value.
    """
    if explode(remainder, config=cfg).is_color:
        return False
    head, sep, _ = remainder.rpartition("-")
    if not sep:
        return False
    ex = explode(head, config=cfg)
    return ex.is_color and ex.prefix is None and ex.tint is None


def _trace_rejected(token: str, remainder: str, cfg: TailConfig) -> None:
    if not enabled("resolve"):
        return
    hint = suggest_color(remainder.rsplit("-", 1)[0], config=cfg)
    extra = f" (did you mean {hint!r}?)" if hint else ""
    debug(f"rejected {token!r}: {remainder!r} is not a color[-tint]{extra}", topic="resolve")


def _first_color_match(tokens: list[str], prefix: str, cfg: TailConfig):
    """Does: First `prefix-color[-tint]` token with its explosion, else (None, None)."""
    for token in tokens:
        rest = _remainder(token, prefix)
        if rest is None:
            continue
        ex = explode(rest, config=cfg)
        if ex.is_color and ex.prefix is None:
            return token, ex
        _trace_rejected(token, rest, cfg)
    return None, None


# ── Public API ───────────────────────────────────────────────────────────────
def get(
    classes: ClassInput,
    lookup: str | Collection[str],
    default: str | None = None,
    tint: int | None = None,
    *,
    config: TailConfig | None = None,
) -> str | None:
    """
    Does: Resolve a role from `classes`.
          - lookup as a collection: first token that is a member;
          - lookup as a string: the exact token, else the first `lookup-*` token
            (tokens holding a broken color such as "bg-blue-404" are skipped);
          - with `tint`: color form, see get_color(classes, lookup, default, tint).
    Returns: Matching token or `default`.

    Examples:
        get("thing rounded-xl something", "rounded")          -> "rounded-xl"
        get("thing box else", ["circle", "rounded", "box"])   -> "box"
        get("thing something", "text", "blue", 600)           -> "text-blue-600"
    """
    cfg = resolve_config(config)
    tokens = tokenize(classes)

    if not isinstance(lookup, str):
        wanted = set(lookup)
        return next((t for t in tokens if t in wanted), default)

    if tint is not None:
        return get_color(tokens, lookup, default, tint, config=cfg)

    if lookup in tokens:
        return lookup
    for token in tokens:
        rest = _remainder(token, lookup)
        if rest is None:
            continue
        if _is_malformed_color(rest, cfg):
            _trace_rejected(token, rest, cfg)
            continue
        return token
    return default


def get_color(
    classes: ClassInput,
    prefix: str,
    color: str | None = None,
    tint: int | str | None = None,
    *,
    config: TailConfig | None = None,
) -> str | None:
    """
    Does: First `prefix-color[-tint]` token whose remainder is a known color with an
          optional valid tint ("bg-monster", "bg-blue-404" are rejected).
          - no match: synthesize `prefix-color[-tint]` from the defaults (None without color);
          - match without tint: the default tint is appended;
          - match with tint: returned unchanged.
    Returns: Token or None.
    """
    cfg = resolve_config(config)
    tokens = tokenize(classes)
    default_tint = parse_tint(tint, config=cfg) if tint is not None else None
    if tint is not None and default_tint is None:
        debug(f"ignoring default tint {tint!r} (not on the scale)", topic="resolve")

    token, ex = _first_color_match(tokens, prefix, cfg)
    if token is None:
        if color is None:
            return None
        if default_tint is None:
            return f"{prefix}-{color}"
        return f"{prefix}-{color}-{default_tint}"

    if ex.tint is None and default_tint is not None:
        return f"{token}-{default_tint}"
    return token


def main_color(
    classes: ClassInput,
    color: str | None = None,
    tint: int | None = None,
    *,
    config: TailConfig | None = None,
) -> tuple[str | None, int | None]:
    """
    Does: Find the component's ambient color, not tied to a CSS property:
          first bare color name ("red" -> ("red", tint)), else first `color-tint`
          token ("red-300" -> ("red", 300)), else the defaults.
    Returns: (color, tint) pair.
    """
    cfg = resolve_config(config)
    tokens = tokenize(classes)

    for token in tokens:
        if cfg.is_color(token):
            return token, tint

    for token in tokens:
        ex = explode(token, config=cfg)
        if ex.is_color and ex.prefix is None and ex.tint is not None:
            return ex.color, ex.tint

    return color, tint


def get_prefix(classes: ClassInput, prefix: str) -> str:
    """
    Does: Collect every token starting with `prefix`, with `prefix-` removed.
    Returns: Space-joined remainders ("title-text-red-500", "title" -> "text-red-500").
    """
    head = f"{prefix}-"
    return join(
        t[len(head):] if t.startswith(head) else t
        for t in tokenize(classes)
        if t.startswith(prefix)
    )


def has(classes: ClassInput, value: str) -> bool:
    """Does: True when any token starts with `value`."""
    return any(t.startswith(value) for t in tokenize(classes))
