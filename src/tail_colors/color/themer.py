# tail_colors/color/themer.py
"""
themer
======

Does: Substitute theme aliases ("primary") with their configured color ("purple")
      before any other processing.
Used By: Engine callers that accept themed class strings.
Returns: Class string.
"""

from __future__ import annotations

import re

from tail_colors.color.vocab import TailConfig, resolve_config
from tail_colors.general.token import ClassInput, join, tokenize

__all__ = ["theme"]

# Alias must sit between hyphens/whitespace/string ends ("bg-primary-500", not "bored")
_EDGE_L = r"(?<![^\s-])"
_EDGE_R = r"(?![^\s-])"


def _ordered_aliases(cfg: TailConfig) -> list[str]:
    # longest first, then alphabetical, so results never depend on dict order
    return sorted(cfg.themed_colors, key=lambda a: (-len(a), a))


def theme(
    classes: ClassInput,
    *,
    config: TailConfig | None = None,
    strict: bool = True,
) -> str:
    """
    Does: Replace every alias of config.themed_colors by its color.
          strict=True: whole hyphen/space delimited runs only, in one regex pass.
          strict=False: raw substring replacement, alias after alias.
    Returns: Themed class string (lists are joined first).
    """
    cfg = resolve_config(config)
    text = classes if isinstance(classes, str) else join(tokenize(classes))
    aliases = _ordered_aliases(cfg)
    if not aliases:
        return text

    if not strict:
        for alias in aliases:
            text = text.replace(alias, cfg.themed_colors[alias])
        return text

    pattern = re.compile(
        _EDGE_L + "(" + "|".join(re.escape(a) for a in aliases) + ")" + _EDGE_R
    )
    return pattern.sub(lambda m: cfg.themed_colors[m.group(1)], text)
