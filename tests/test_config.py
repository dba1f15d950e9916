import pytest

from tibbl.config import grid_size_from_options, load_grid_size
from tibbl.layout.grid import COMPACT_GRID, EDITOR_GRID, GridSize


def test_defaults_to_editor_grid(tmp_path):
    assert load_grid_size() == EDITOR_GRID
    empty = tmp_path / "options.yml"
    empty.write_text("")
    assert load_grid_size(empty) == EDITOR_GRID


def test_preset_and_explicit_sizes(tmp_path):
    opts = tmp_path / "options.yml"
    opts.write_text("grid: compact\n")
    assert load_grid_size(opts) == COMPACT_GRID
    opts.write_text("grid: compact\ncols: 4\n")
    assert load_grid_size(opts) == GridSize(6, 4)
    opts.write_text("rows: 3\ncols: 3\n")
    assert load_grid_size(opts, rows=2) == GridSize(2, 3)


def test_overrides_without_file():
    assert load_grid_size(cols=8) == GridSize(7, 8)


@pytest.mark.parametrize("opts", [
    {"grid": "huge"},
    {"rows": -1},
    {"cols": "five"},
    ["rows", 7],
])
def test_bad_options(opts):
    with pytest.raises(ValueError):
        grid_size_from_options(opts)


def test_unhashable_preset_is_rejected():
    with pytest.raises(ValueError, match="Unknown grid preset"):
        grid_size_from_options({"grid": [1]})


def test_invalid_yaml_is_a_value_error(tmp_path):
    opts = tmp_path / "options.yml"
    opts.write_text("rows: [7\n")
    with pytest.raises(ValueError, match="options.yml"):
        load_grid_size(opts)
