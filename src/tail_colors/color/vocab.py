"""
vocab
=====

Does: Assemble the engine configuration: known color names (built-in palette plus
      configured extensions), the tint scale and the theme alias table.
Used By: Every engine operation (passed explicitly as `config=`), TailColors facade.
Returns: Frozen TailConfig values; builders never mutate shared state.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from tail_colors.color.constants import BUILTIN_COLORS, INVERT_TABLE, TINT_SCALE
from tail_colors.general.fuzzy import SUGGEST_THRESHOLD, suggest_name
from tail_colors.general.utils import ConfigTypeError, load_config

log = logging.getLogger(__name__)

__all__ = [
    "TailConfig",
    "build_config",
    "default_config",
    "resolve_config",
    "load_tail_config",
    "suggest_color",
]

CONFIG_FILE = "tail_colors"


@dataclass(frozen=True)
class TailConfig:
    """Immutable vocabulary + tint scale + theme aliases, built once at startup."""

    colors: frozenset[str] = BUILTIN_COLORS
    tints: tuple[int, ...] = TINT_SCALE
    themed_colors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    invert_table: Mapping[int, int] = field(
        default_factory=lambda: MappingProxyType(dict(INVERT_TABLE))
    )

    # the generated hash would trip over the mapping proxies
    def __hash__(self) -> int:
        return hash(
            (
                self.colors,
                self.tints,
                frozenset(self.themed_colors.items()),
                frozenset(self.invert_table.items()),
            )
        )

    def is_color(self, name: str) -> bool:
        return name in self.colors

    def is_tint(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and value in self.tints


# ── Builders ─────────────────────────────────────────────────────────────────
def _norm_name(raw: Any, what: str) -> str:
    if not isinstance(raw, str):
        raise ConfigTypeError(f"{what} must be a string, got {type(raw).__name__}")
    name = raw.strip().lower()
    if not name or any(ch.isspace() for ch in name):
        raise ConfigTypeError(f"invalid {what}: {raw!r}")
    return name


def build_config(
    colors: Iterable[str] = (),
    themed_colors: Mapping[str, str] | None = None,
) -> TailConfig:
    """
    Does: Union the built-in palette with `colors`, normalize the alias table.
    Returns: TailConfig.
    Raises: ConfigTypeError on non-string or blank names.
    """
    if isinstance(colors, str):
        colors = [colors]
    extra = {_norm_name(c, "color name") for c in colors}
    aliases = {
        _norm_name(k, "theme alias"): _norm_name(v, "themed color")
        for k, v in (themed_colors or {}).items()
    }
    unknown = sorted(v for v in aliases.values() if v not in BUILTIN_COLORS | extra)
    if unknown:
        log.debug("theme aliases point at colors outside the vocabulary: %s", unknown)

    return TailConfig(
        colors=frozenset(BUILTIN_COLORS | extra),
        themed_colors=MappingProxyType(aliases),
    )


@lru_cache(maxsize=1)
def default_config() -> TailConfig:
    """Does: Return the built-in-only configuration (no extra colors, no aliases)."""
    return build_config()


def resolve_config(config: TailConfig | None) -> TailConfig:
    """Does: Map `None` to default_config(). Returns: TailConfig."""
    return default_config() if config is None else config


def _validate_tail_config(data: dict[str, Any]) -> TailConfig:
    colors = data.get("colors", [])
    themed = data.get("themed_colors", {})
    if not isinstance(colors, list):
        raise ConfigTypeError(f"'colors' must be a list, got {type(colors).__name__}")
    if not isinstance(themed, dict):
        raise ConfigTypeError(f"'themed_colors' must be an object, got {type(themed).__name__}")
    return build_config(colors, themed)


def load_tail_config(
    file: str | os.PathLike[str] = CONFIG_FILE,
    *,
    base_dir: Path | None = None,
    allow_comments: bool = False,
) -> TailConfig:
    """
    Does: Read {"colors": [...], "themed_colors": {...}} from the data dir.
    Returns: TailConfig built from the file (both keys optional).
    """
    cfg = load_config(
        file,
        base_dir=base_dir,
        validator=_validate_tail_config,
        allow_comments=allow_comments,
    )
    log.debug(
        "Loaded tail config: %d colors, %d aliases", len(cfg.colors), len(cfg.themed_colors)
    )
    return cfg


def suggest_color(
    name: str,
    *,
    config: TailConfig | None = None,
    threshold: int = SUGGEST_THRESHOLD,
) -> str | None:
    """Does: Closest vocabulary color to `name` ("bleu" -> "blue"), or None."""
    return suggest_name(name, resolve_config(config).colors, threshold=threshold)
