# tests/test_color_resolve.py
from __future__ import annotations

import pytest

from tail_colors.color import resolve as R
from tail_colors.color.vocab import build_config
from tail_colors.general.utils import reload_topics

"""
Tests: color/resolve.py

- get(): exact token, prefixed token, candidate sets, defaults, four-argument form
- get_color(): color-validated prefix lookups and synthesized defaults
- main_color(): prefix-less color discovery
- get_prefix() / has()
"""


@pytest.fixture(autouse=True)
def _quiet_traces(monkeypatch):
    monkeypatch.delenv("TAIL_COLORS_DEBUG_TOPICS", raising=False)
    reload_topics()
    yield
    monkeypatch.delenv("TAIL_COLORS_DEBUG_TOPICS", raising=False)
    reload_topics()


# ──────────────────────────────────────────────────────────────────────────────
# get — exact / prefix / candidates
# ──────────────────────────────────────────────────────────────────────────────
def test_get_exact_token():
    assert R.get("thing rounded something", "rounded") == "rounded"


def test_get_prefixed_token():
    assert R.get("thing rounded-xl something", "rounded") == "rounded-xl"


def test_get_absent_and_default():
    assert R.get("thing else", "rounded") is None
    assert R.get("thing else", "rounded", "rounded-md") == "rounded-md"


def test_get_exact_token_beats_earlier_prefixed_one():
    assert R.get("rounded-xl rounded", "rounded") == "rounded"


def test_get_candidate_set():
    assert R.get("thing box else", ["circle", "rounded", "box"]) == "box"
    assert R.get("thing else", ["circle", "rounded", "box"]) is None
    assert R.get("thing else", ["circle", "rounded", "box"], "rounded") == "rounded"


def test_get_candidate_set_follows_class_order():
    assert R.get("box thing circle", ("circle", "box")) == "box"
    assert R.get("md lg", {"sm", "lg", "md"}) == "md"


def test_get_rejects_malformed_color_tint():
    assert R.get("thing bg-blue-404 else", "bg") is None
    assert R.get("bg-blue-404 bg-red-500", "bg") == "bg-red-500"


def test_get_keeps_non_color_values():
    # not a color at all, so not a *broken* color either
    assert R.get("thing bg-monster", "bg") == "bg-monster"


def test_get_four_argument_form_synthesizes_default():
    assert R.get("thing something", "text", "blue", 600) == "text-blue-600"
    assert R.get("text-red thing", "text", "blue", 600) == "text-red-600"
    assert R.get("text-red-300 thing", "text", "blue", 600) == "text-red-300"


def test_get_accepts_token_list():
    tokens = ["thing", "rounded-lg"]
    assert R.get(tokens, "rounded") == "rounded-lg"
    assert tokens == ["thing", "rounded-lg"]


# ──────────────────────────────────────────────────────────────────────────────
# get_color
# ──────────────────────────────────────────────────────────────────────────────
def test_get_color_match_with_tint_unchanged():
    assert R.get_color("thing bg-blue-500", "bg", "red", 200) == "bg-blue-500"


def test_get_color_match_without_tint_gets_default_tint():
    assert R.get_color("thing bg-blue", "bg", "red", 200) == "bg-blue-200"
    assert R.get_color("thing bg-blue", "bg") == "bg-blue"


def test_get_color_rejects_non_colors():
    assert R.get_color("thing bg-monster", "bg") is None
    assert R.get_color("thing bg-blue-404", "bg") is None
    assert R.get_color("bg-monster bg-blue-404 bg-green-300", "bg") == "bg-green-300"


def test_get_color_rejects_nested_prefix():
    # 'title-red-500' carries its own prefix, not a color[-tint]
    assert R.get_color("text-title-red-500", "text") is None


def test_get_color_synthesized_defaults():
    assert R.get_color("thing", "text", "blue", 600) == "text-blue-600"
    assert R.get_color("thing", "text", "blue") == "text-blue"
    assert R.get_color("thing", "text") is None


def test_get_color_default_tint_as_string_and_off_scale():
    assert R.get_color("thing", "text", "blue", "600") == "text-blue-600"
    assert R.get_color("thing", "text", "blue", 404) == "text-blue"


def test_get_color_with_configured_multi_word_color():
    cfg = build_config(["silver-hawk"])
    assert R.get_color("ring-silver-hawk", "ring", config=cfg) == "ring-silver-hawk"
    assert R.get_color("ring-silver-hawk", "ring", None, 300, config=cfg) == "ring-silver-hawk-300"
    assert R.get_color("ring-silver-hawk", "ring") is None


def test_get_color_traces_rejection_with_suggestion(monkeypatch, capsys):
    monkeypatch.setenv("TAIL_COLORS_DEBUG_TOPICS", "resolve")
    reload_topics()

    assert R.get_color("bg-purpel-500", "bg") is None

    err = capsys.readouterr().err
    assert "rejected 'bg-purpel-500'" in err
    assert "did you mean 'purple'?" in err


def test_get_color_is_silent_without_topics(capsys):
    R.get_color("bg-purpel-500", "bg")
    assert capsys.readouterr().err == ""


# ──────────────────────────────────────────────────────────────────────────────
# main_color
# ──────────────────────────────────────────────────────────────────────────────
def test_main_color_bare_color_takes_default_tint():
    assert R.main_color("thing red bg-blue-500", tint=500) == ("red", 500)


def test_main_color_bare_pass_runs_before_color_tint_pass():
    assert R.main_color("thing blue-300 red", None, 500) == ("red", 500)


def test_main_color_color_tint_token():
    assert R.main_color("thing blue-300 bg-red-500") == ("blue", 300)


def test_main_color_defaults():
    assert R.main_color("thing bg-red-500", "gray", 100) == ("gray", 100)
    assert R.main_color("bg-red") == (None, None)


def test_main_color_ignores_color_without_valid_tint():
    assert R.main_color("blue-404 green-700") == ("green", 700)


# ──────────────────────────────────────────────────────────────────────────────
# get_prefix / has
# ──────────────────────────────────────────────────────────────────────────────
def test_get_prefix_strips_prefix():
    assert R.get_prefix("thing title-text-red-500 something", "title") == "text-red-500"
    assert R.get_prefix("title-a title-b other", "title") == "a b"
    assert R.get_prefix("thing", "title") == ""


def test_has():
    assert R.has("thing text-red-400 something", "something") is True
    assert R.has("thing bg-blue", "something") is False
    assert R.has("thing text-red-400", "text-") is True
