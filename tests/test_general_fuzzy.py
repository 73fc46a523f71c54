# tests/test_general_fuzzy.py
from __future__ import annotations

import pytest

from tail_colors.general.fuzzy import suggest as S

"""
Tests: general/fuzzy/suggest.py ("did you mean" over a candidate pool).
"""

POOL = frozenset({"purple", "pink", "blue", "sky", "silver-hawk"})


def test_suggest_typo():
    assert S.suggest_name("purpel", POOL) == "purple"
    assert S.suggest_name("silver-hwak", POOL) == "silver-hawk"


def test_suggest_exact_and_case():
    assert S.suggest_name("blue", POOL) == "blue"
    assert S.suggest_name(" Blue ", POOL) == "blue"


@pytest.mark.parametrize("name", ["", "monster", "zzzzzzzzzzzzzzzz"])
def test_suggest_nothing_close(name):
    assert S.suggest_name(name, POOL) is None


def test_suggest_threshold_is_tunable():
    # 'blu' vs 'blue' scores ~85.7
    assert S.suggest_name("blu", POOL) == "blue"
    assert S.suggest_name("blu", POOL, threshold=95) is None


def test_suggest_empty_pool():
    assert S.suggest_name("blue", []) is None
