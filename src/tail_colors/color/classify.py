# tail_colors/color/classify.py
"""
classify
========

Does: Classify a class token as `prefix-color-tint`, `prefix-color`, `color-tint`
      or `color` against the configured vocabulary.
Used By: Resolver, cleaner, tint arithmetic on full tokens.
Returns: Exploded(prefix, color, tint); all None when the token is not a color token.

Decomposition:
    1. the trailing hyphen segment is taken as the tint when it is an integer on the scale;
    2. the remaining segments are split into (prefix, color), trying the longest
       color first, so multi-word names ("silver-hawk") win over a shorter tail.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from tail_colors.color.vocab import TailConfig, resolve_config

__all__ = ["Exploded", "NOT_A_COLOR", "explode", "is_tint", "is_color_token", "parse_tint"]


class Exploded(NamedTuple):
    prefix: str | None
    color: str | None
    tint: int | None

    @property
    def is_color(self) -> bool:
        return self.color is not None


NOT_A_COLOR = Exploded(None, None, None)


def parse_tint(value: Any, *, config: TailConfig | None = None) -> int | None:
    """
    Does: Read `value` (int or digit string) as a tint on the scale.
    Returns: The tint as int, or None when it is not on the scale.
    """
    cfg = resolve_config(config)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value in cfg.tints else None
    if isinstance(value, str) and value.isascii() and value.isdigit():
        n = int(value)
        return n if n in cfg.tints else None
    return None


def is_tint(value: Any, *, config: TailConfig | None = None) -> bool:
    """Does: True when `value` is a tint on the scale (50, "500", ...)."""
    return parse_tint(value, config=config) is not None


def explode(token: str, *, config: TailConfig | None = None) -> Exploded:
    """
    Does: Split `token` into (prefix, color, tint).
    Returns: Exploded or NOT_A_COLOR.

    Unlike the plain `prefix-color-tint` shape, the prefix may span several
    segments: "title-text-red-500" -> ("title-text", "red", 500). Everything
    left of the matched color is the prefix.
    """
    cfg = resolve_config(config)
    if not token:
        return NOT_A_COLOR

    segments = token.split("-")
    tint = parse_tint(segments[-1], config=cfg) if len(segments) > 1 else None
    if tint is not None:
        segments = segments[:-1]

    # i == 0 -> whole remainder is the color (no prefix)
    for i in range(len(segments)):
        color = "-".join(segments[i:])
        if color in cfg.colors:
            prefix = "-".join(segments[:i]) or None
            return Exploded(prefix, color, tint)

    return NOT_A_COLOR


def is_color_token(token: str, *, config: TailConfig | None = None) -> bool:
    """Does: True when explode() recognizes a color in `token`."""
    return explode(token, config=config).is_color
