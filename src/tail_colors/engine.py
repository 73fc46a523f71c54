# engine.py
from __future__ import annotations

"""
engine.py
=========

Does: TailColors, an engine bound to one TailConfig, so callers build the
      configuration once at startup and pass a single object around.
Returns: Same results as the module-level functions called with `config=`.
Used by: UI component layers (one engine per application/theme).
"""

import logging
import os
from collections.abc import Collection
from pathlib import Path

from tail_colors.color import (
    Exploded,
    TailConfig,
    clean,
    clean_colors,
    clean_prefix,
    darker,
    explode,
    get,
    get_color,
    get_prefix,
    has,
    invert,
    is_color_token,
    lighter,
    load_tail_config,
    main_color,
    resolve_config,
    suggest_color,
    theme,
)
from tail_colors.general.token import ClassInput, tokenize

logger = logging.getLogger(__name__)

__all__ = ["TailColors"]


class TailColors:
    """Class-string engine bound to an immutable configuration."""

    def __init__(self, config: TailConfig | None = None) -> None:
        self.config = resolve_config(config)

    @classmethod
    def from_file(
        cls,
        file: str | os.PathLike[str] = "tail_colors",
        *,
        base_dir: Path | None = None,
        allow_comments: bool = False,
    ) -> TailColors:
        """Does: Build an engine from <data>/<file>.json (see load_tail_config)."""
        cfg = load_tail_config(file, base_dir=base_dir, allow_comments=allow_comments)
        logger.debug("TailColors engine ready (%d colors)", len(cfg.colors))
        return cls(cfg)

    def __repr__(self) -> str:
        return (
            f"TailColors(colors={len(self.config.colors)}, "
            f"aliases={sorted(self.config.themed_colors)})"
        )

    # ── tokens ───────────────────────────────────────────────────────────────
    @staticmethod
    def tokenize(classes: ClassInput) -> list[str]:
        return tokenize(classes)

    def explode(self, token: str) -> Exploded:
        return explode(token, config=self.config)

    def is_color_token(self, token: str) -> bool:
        return is_color_token(token, config=self.config)

    def suggest_color(self, name: str) -> str | None:
        return suggest_color(name, config=self.config)

    # ── resolver ─────────────────────────────────────────────────────────────
    def get(
        self,
        classes: ClassInput,
        lookup: str | Collection[str],
        default: str | None = None,
        tint: int | None = None,
    ) -> str | None:
        return get(classes, lookup, default, tint, config=self.config)

    def get_color(
        self,
        classes: ClassInput,
        prefix: str,
        color: str | None = None,
        tint: int | str | None = None,
    ) -> str | None:
        return get_color(classes, prefix, color, tint, config=self.config)

    def main_color(
        self,
        classes: ClassInput,
        color: str | None = None,
        tint: int | None = None,
    ) -> tuple[str | None, int | None]:
        return main_color(classes, color, tint, config=self.config)

    @staticmethod
    def get_prefix(classes: ClassInput, prefix: str) -> str:
        return get_prefix(classes, prefix)

    @staticmethod
    def has(classes: ClassInput, value: str) -> bool:
        return has(classes, value)

    # ── tints ────────────────────────────────────────────────────────────────
    def darker(self, value, n: int = 1):
        return darker(value, n, config=self.config)

    def lighter(self, value, n: int = 1):
        return lighter(value, n, config=self.config)

    def invert(self, value):
        return invert(value, config=self.config)

    # ── cleaning / theming ───────────────────────────────────────────────────
    @staticmethod
    def clean(classes: ClassInput, remove: ClassInput) -> str:
        return clean(classes, remove)

    @staticmethod
    def clean_prefix(classes: ClassInput, prefixes: ClassInput) -> str:
        return clean_prefix(classes, prefixes)

    def clean_colors(self, classes: ClassInput) -> str:
        return clean_colors(classes, config=self.config)

    def theme(self, classes: ClassInput, *, strict: bool = True) -> str:
        return theme(classes, config=self.config, strict=strict)
