import dataclasses

import pytest

from labyrinth.config import DEFAULTS, MazeConfig


def test_reference_defaults():
    assert (DEFAULTS.rows, DEFAULTS.cols, DEFAULTS.twisty_size) == (4, 4, 12)
    assert DEFAULTS.generator == "dotnet"


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULTS.rows = 5


@pytest.mark.parametrize("kwargs", [
    {"rows": 0},
    {"rows": 1, "cols": 3},
    {"twisty_size": 3},
    {"generator": "xorshift"},
])
def test_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        MazeConfig(**kwargs)
