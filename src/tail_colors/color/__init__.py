"""
color.
=====

Does: Aggregate the color engine: vocabulary/config, classifier, resolver,
      tint arithmetic, cleaner and themer.
Used By: tail_colors public API and the TailColors facade.
Returns: Pure functions over class strings/lists; every one accepts `config=`.
"""

# ── Constants & vocabulary ───────────────────────────────────────────────────
from .constants import BUILTIN_COLORS, INVERT_TABLE, TINT_SCALE
from .vocab import (
    TailConfig,
    build_config,
    default_config,
    load_tail_config,
    resolve_config,
    suggest_color,
)

# ── Engine ───────────────────────────────────────────────────────────────────
from .classify import NOT_A_COLOR, Exploded, explode, is_color_token, is_tint, parse_tint
from .resolve import get, get_color, get_prefix, has, main_color
from .tint import UnknownTintError, darker, invert, lighter, replace_tint, step
from .cleaner import clean, clean_colors, clean_prefix
from .themer import theme

__all__ = [
    # constants / vocab
    "BUILTIN_COLORS",
    "TINT_SCALE",
    "INVERT_TABLE",
    "TailConfig",
    "build_config",
    "default_config",
    "resolve_config",
    "load_tail_config",
    "suggest_color",
    # classifier
    "Exploded",
    "NOT_A_COLOR",
    "explode",
    "is_tint",
    "is_color_token",
    "parse_tint",
    # resolver
    "get",
    "get_color",
    "main_color",
    "get_prefix",
    "has",
    # tint
    "UnknownTintError",
    "step",
    "darker",
    "lighter",
    "invert",
    "replace_tint",
    # cleaner / themer
    "clean",
    "clean_prefix",
    "clean_colors",
    "theme",
]
