# tests/test_color_theme.py
from __future__ import annotations

import pytest

from tail_colors.color import themer as TH
from tail_colors.color.vocab import build_config

"""
Tests: color/themer.py (alias substitution, strict vs legacy mode).
"""


@pytest.fixture
def cfg():
    return build_config(
        themed_colors={"primary": "purple", "error": "red", "ok": "green"},
    )


def test_theme_replaces_aliases_inside_tokens(cfg):
    assert TH.theme("bg-primary-500 text-error", config=cfg) == "bg-purple-500 text-red"
    assert TH.theme("primary", config=cfg) == "purple"


def test_theme_accepts_token_lists(cfg):
    assert TH.theme(["ring-primary", "p-4"], config=cfg) == "ring-purple p-4"


def test_theme_without_aliases_is_identity():
    assert TH.theme("bg-primary-500") == "bg-primary-500"


def test_strict_theme_respects_segment_boundaries(cfg):
    assert TH.theme("bg-ok-500 bookmark", config=cfg) == "bg-green-500 bookmark"


def test_legacy_theme_is_raw_substring_replacement(cfg):
    assert TH.theme("bg-ok-500 bookmark", config=cfg, strict=False) == "bg-green-500 bogreenmark"


def test_longer_alias_wins_over_its_prefix():
    cfg = build_config(themed_colors={"primary": "purple", "primary-dark": "indigo"})
    assert TH.theme("bg-primary-dark-500 text-primary", config=cfg) == "bg-indigo-500 text-purple"
    assert (
        TH.theme("bg-primary-dark-500 text-primary", config=cfg, strict=False)
        == "bg-indigo-500 text-purple"
    )


def test_strict_theme_never_chains_aliases():
    cfg = build_config(themed_colors={"accent": "base", "base": "slate"})
    assert TH.theme("bg-accent", config=cfg) == "bg-base"
    # legacy: longest alias first, so 'accent' -> 'base' -> 'slate'
    assert TH.theme("bg-accent", config=cfg, strict=False) == "bg-slate"
