"""
tail_colors
===========

Does: Read and rewrite Tailwind-style class strings (`prefix-color-tint`):
      classify tokens, resolve a role's effective color, step tints darker/lighter,
      invert for contrast, clean consumed tokens and expand theme aliases.
Returns: Module-level functions (built-in vocabulary unless `config=` is given)
         and the TailColors engine bound to a loaded configuration.
"""

from tail_colors.color import (
    BUILTIN_COLORS,
    INVERT_TABLE,
    NOT_A_COLOR,
    TINT_SCALE,
    Exploded,
    TailConfig,
    UnknownTintError,
    build_config,
    clean,
    clean_colors,
    clean_prefix,
    darker,
    default_config,
    explode,
    get,
    get_color,
    get_prefix,
    has,
    invert,
    is_color_token,
    is_tint,
    lighter,
    load_tail_config,
    main_color,
    step,
    suggest_color,
    theme,
)
from tail_colors.engine import TailColors
from tail_colors.general.token import join, tokenize
from tail_colors.general.utils import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
)

__all__ = [
    "TailColors",
    "TailConfig",
    "BUILTIN_COLORS",
    "TINT_SCALE",
    "INVERT_TABLE",
    "build_config",
    "default_config",
    "load_tail_config",
    "tokenize",
    "join",
    "Exploded",
    "NOT_A_COLOR",
    "explode",
    "is_tint",
    "is_color_token",
    "suggest_color",
    "get",
    "get_color",
    "main_color",
    "get_prefix",
    "has",
    "UnknownTintError",
    "step",
    "darker",
    "lighter",
    "invert",
    "clean",
    "clean_prefix",
    "clean_colors",
    "theme",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]
__version__ = "0.1.1"
__docformat__ = "google"
