import pytest

from tibbl.dsl.labels import compact_label, tile_label
from tibbl.dsl.vocabulary import Token
from tibbl.layout.grid import EDITOR_GRID, Grid, GridSize


def test_labels():
    assert tile_label(Token("loop", 2)) == "Loop 3 Times"
    assert compact_label(Token("loop", 2)) == "Loop 3"
    assert tile_label(Token("if", 4)) == "If X < 5"
    assert compact_label(Token("if", 0)) == "If X < 1"
    assert tile_label(Token("variable", 3)) == "X = 4"
    assert compact_label(Token("variable", 3)) == "X = 4"
    assert tile_label(Token("endloop")) == compact_label(Token("endloop")) == "End Loop"
    assert tile_label(Token("random")) == "X = Random"


def test_grid_size_validation():
    assert EDITOR_GRID.capacity == 35
    with pytest.raises(ValueError):
        GridSize(0, 5)
    with pytest.raises(ValueError):
        GridSize(7, "5")


def test_cell_access_is_bounds_checked():
    grid = Grid()
    grid[6, 4] = Token("else")
    assert grid[6, 4] == Token("else")
    with pytest.raises(IndexError):
        grid[7, 0]
    with pytest.raises(IndexError):
        grid[0, 5] = Token("else")


def test_copy_is_independent():
    grid = Grid()
    grid[0, 0] = Token("play", 1)
    dup = grid.copy()
    dup[0, 0] = None
    assert grid[0, 0] == Token("play", 1)
    assert grid != dup


def test_json_exchange_form():
    grid = Grid(GridSize(2, 3))
    grid[0, 1] = Token("delay", 5)
    grid[1, 2] = Token("thread3")
    data = grid.to_json()
    assert data == {
        "rows": 2,
        "cols": 3,
        "cells": [
            [None, {"type": "delay", "rotation": 5}, None],
            [None, None, {"type": "thread3", "rotation": 0}],
        ],
    }
    assert Grid.from_json(data) == grid


def test_from_json_defaults_rotation():
    grid = Grid.from_json({"cells": [[{"type": "else"}]]})
    assert grid.size == GridSize(1, 1)
    assert grid[0, 0] == Token("else")


@pytest.mark.parametrize("data", [
    {},
    {"cells": [[{"type": "warp"}]]},
    {"cells": [[{"type": "play", "rotation": 8}]]},
    {"cells": [["play"]]},
    {"rows": 1, "cols": 1, "cells": [[None], [None]]},
    {"rows": 0, "cols": 1, "cells": []},
    [],
    "cells",
    {"cells": [5]},
    {"cells": [[None], "row"]},
])
def test_from_json_rejects_bad_data(data):
    with pytest.raises(ValueError):
        Grid.from_json(data)
