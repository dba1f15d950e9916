from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..dsl.vocabulary import Token


@dataclass(frozen=True)
class GridSize:
    rows: int
    cols: int

    def __post_init__(self):
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"Grid {name} must be a positive integer, got {value!r}")

    @property
    def capacity(self) -> int:
        return self.rows * self.cols


# The main editor uses 7 rows; some sibling tools lay tiles out on 6.
EDITOR_GRID = GridSize(7, 5)
COMPACT_GRID = GridSize(6, 5)

GRID_PRESETS: Dict[str, GridSize] = {"editor": EDITOR_GRID, "compact": COMPACT_GRID}


class Grid:
    """A rows x cols board of tiles; empty cells hold None."""

    def __init__(self, size: GridSize = EDITOR_GRID):
        self.size = size
        self.cells: List[List[Optional[Token]]] = [[None] * size.cols for _ in range(size.rows)]

    def _check(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        row, col = pos
        if not (0 <= row < self.size.rows and 0 <= col < self.size.cols):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.size.rows}x{self.size.cols} grid")
        return row, col

    def __getitem__(self, pos: Tuple[int, int]) -> Optional[Token]:
        row, col = self._check(pos)
        return self.cells[row][col]

    def __setitem__(self, pos: Tuple[int, int], token: Optional[Token]):
        row, col = self._check(pos)
        self.cells[row][col] = token

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid({self.size.rows}x{self.size.cols}, {sum(1 for _ in self.occupied())} tiles)"

    def occupied(self) -> Iterator[Tuple[int, int, Token]]:
        """Yield (row, col, token) for every filled cell in row-major order."""
        for r, row in enumerate(self.cells):
            for c, token in enumerate(row):
                if token is not None:
                    yield r, c, token

    def rows_used(self) -> int:
        last = -1
        for r, _, _ in self.occupied():
            last = r
        return last + 1

    def copy(self) -> Grid:
        dup = Grid(self.size)
        dup.cells = [list(row) for row in self.cells]
        return dup

    # ---- exchange form shared with the editor ----

    def to_json(self) -> Dict[str, Any]:
        return {
            "rows": self.size.rows,
            "cols": self.size.cols,
            "cells": [
                [None if t is None else {"type": t.kind, "rotation": t.param} for t in row]
                for row in self.cells
            ],
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> Grid:
        if not isinstance(data, dict):
            raise ValueError("Grid JSON must be an object")
        cells = data.get("cells")
        if not isinstance(cells, list) or not all(isinstance(r, list) for r in cells):
            raise ValueError("Grid JSON needs a 'cells' list of rows")
        rows = data.get("rows", len(cells))
        cols = data.get("cols", max((len(r) for r in cells), default=0))
        grid = cls(GridSize(rows, cols))
        if len(cells) > rows or any(len(r) > cols for r in cells):
            raise ValueError(f"Grid JSON cells do not fit a {rows}x{cols} grid")
        for r, row in enumerate(cells):
            for c, cell in enumerate(row):
                if cell is None:
                    continue
                try:
                    grid[r, c] = Token(cell["type"], cell.get("rotation", 0))
                except (KeyError, TypeError, AttributeError):
                    raise ValueError(f"Bad tile at ({r}, {c}): {cell!r}") from None
        return grid
