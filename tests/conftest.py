"""
Shared pytest fixtures.

Boards are written in the text notation of nrow.notation: X is the human,
O the computer, "." is empty, rows split by "/".
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from nrow.config import GameConfig


@pytest.fixture
def cfg3():
    return GameConfig(rows=3, cols=3, win_length=3, search_depth=2)


@pytest.fixture
def cfg3_deep():
    return GameConfig(rows=3, cols=3, win_length=3, search_depth=4)
