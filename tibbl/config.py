"""
Options YAML for grid geometry.

    grid: compact        # or: editor
    rows: 7              # explicit rows/cols win over the preset
    cols: 5
"""
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .layout.grid import EDITOR_GRID, GRID_PRESETS, GridSize


def grid_size_from_options(opts: Dict[str, Any]) -> GridSize:
    if not isinstance(opts, dict):
        raise ValueError("Options must be a mapping")
    preset = opts.get("grid", "editor")
    if not isinstance(preset, str) or preset not in GRID_PRESETS:
        raise ValueError(f"Unknown grid preset: {preset} (expected one of {', '.join(GRID_PRESETS)})")
    base = GRID_PRESETS[preset]
    return GridSize(opts.get("rows", base.rows), opts.get("cols", base.cols))


def load_grid_size(
    path: Optional[Path] = None,
    rows: Optional[int] = None,
    cols: Optional[int] = None,
) -> GridSize:
    """Grid size from an optional options file, with rows/cols overrides."""
    size = EDITOR_GRID
    if path is not None:
        try:
            opts = yaml.safe_load(Path(path).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: {e}") from None
        size = grid_size_from_options(opts)
    return GridSize(rows if rows is not None else size.rows, cols if cols is not None else size.cols)
