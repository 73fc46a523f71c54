# tail_colors/color/tint.py
"""
tint
====

Does: Tint arithmetic over the ordered scale: clamped steps (darker/lighter) and
      the readable-contrast inverse, on bare tints or on full class tokens.
Used By: UI components deriving hover/border/text shades from one base token.
Returns: int tints or rewritten tokens; tokens without a valid trailing tint are
         returned unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import overload

from tail_colors.color.classify import parse_tint
from tail_colors.color.vocab import TailConfig, resolve_config

__all__ = ["UnknownTintError", "step", "darker", "lighter", "invert", "replace_tint"]

# Trailing tint digits, either the whole token or after the last hyphen
_TINT_TAIL_RE = re.compile(r"^(?P<head>(?:.*-)?)(?P<tint>\d+)$")


class UnknownTintError(ValueError):
    """Raise when a bare tint argument is not on the tint scale."""


def step(tint: int, n: int, *, config: TailConfig | None = None) -> int:
    """
    Does: Move `tint` by `n` positions along the scale, clamped at both ends.
    Returns: Tint on the scale.
    Raises: UnknownTintError when `tint` is not on the scale.
    """
    cfg = resolve_config(config)
    if not cfg.is_tint(tint):
        raise UnknownTintError(f"{tint!r} is not a tint (expected one of {list(cfg.tints)})")
    idx = cfg.tints.index(tint) + n
    idx = max(0, min(idx, len(cfg.tints) - 1))
    return cfg.tints[idx]


def replace_tint(
    token: str,
    fn: Callable[[int], int],
    *,
    config: TailConfig | None = None,
) -> str:
    """
    Does: Apply `fn` to the trailing tint of `token`, keeping everything before it.
    Returns: Rewritten token, or `token` itself when it has no valid trailing tint.
    """
    m = _TINT_TAIL_RE.match(token)
    if m is None:
        return token
    tint = parse_tint(m.group("tint"), config=config)
    if tint is None:
        return token
    return f"{m.group('head')}{fn(tint)}"


@overload
def darker(value: int, n: int = 1, *, config: TailConfig | None = None) -> int: ...
@overload
def darker(value: str, n: int = 1, *, config: TailConfig | None = None) -> str: ...
@overload
def darker(value: None, n: int = 1, *, config: TailConfig | None = None) -> None: ...


def darker(value, n=1, *, config=None):
    """
    Does: `n` steps darker. Bare tints -> step(); tokens -> trailing tint rewritten
          ("bg-blue-500" -> "bg-blue-600"); None passes through.
    """
    if value is None:
        return None
    cfg = resolve_config(config)
    if isinstance(value, str):
        return replace_tint(value, lambda t: step(t, n, config=cfg), config=cfg)
    return step(value, n, config=cfg)


@overload
def lighter(value: int, n: int = 1, *, config: TailConfig | None = None) -> int: ...
@overload
def lighter(value: str, n: int = 1, *, config: TailConfig | None = None) -> str: ...
@overload
def lighter(value: None, n: int = 1, *, config: TailConfig | None = None) -> None: ...


def lighter(value, n=1, *, config=None):
    """Does: `n` steps lighter (darker with a negative step)."""
    return darker(value, -n, config=config)


@overload
def invert(value: int, *, config: TailConfig | None = None) -> int: ...
@overload
def invert(value: str, *, config: TailConfig | None = None) -> str: ...
@overload
def invert(value: None, *, config: TailConfig | None = None) -> None: ...


def invert(value, *, config=None):
    """
    Does: Readable contrast tint (text on a background of `value`).
          Off-scale tints and None pass through unchanged.
    """
    if value is None:
        return None
    cfg = resolve_config(config)
    if isinstance(value, str):
        return replace_tint(value, lambda t: cfg.invert_table.get(t, t), config=cfg)
    return cfg.invert_table.get(value, value)
