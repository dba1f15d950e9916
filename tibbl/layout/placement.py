"""
Script text → tile grid.

Tiles are laid out row-major. When a script has thread markers and there is
room, each marker after the first column starts a fresh row ("thread rows") so
every thread reads as its own band; otherwise tiles are packed densely.
"""
from __future__ import annotations
import logging
from typing import Callable, Optional, Sequence

from ..dsl.grammar import ScriptError, parse_script
from ..dsl.vocabulary import Token
from .grid import EDITOR_GRID, Grid, GridSize

logger = logging.getLogger(__name__)

DEMO_SCRIPT = "thread 1\nloop 3 times\nplay 2\nend loop"


class GridOverflowError(ScriptError):
    def __init__(self, reason: str, grid: Optional[Grid] = None):
        self.reason = reason
        self.grid = grid  # partial grid, diagnostics only
        super().__init__(reason)


def _walk(
    tokens: Sequence[Token],
    size: GridSize,
    thread_rows: bool,
    write: Optional[Callable[[int, int, Token], None]] = None,
) -> int:
    """Advance the placement cursor over tokens; returns rows consumed."""
    overflow = f"Code exceeds grid size ({size.rows} rows maximum)"
    row = col = 0
    for token in tokens:
        if thread_rows and token.is_thread_marker and col > 0:
            row += 1
            col = 0
        if row >= size.rows:
            raise GridOverflowError(overflow)
        if col >= size.cols:
            row += 1
            col = 0
            if row >= size.rows:
                raise GridOverflowError(overflow)
        if write is not None:
            write(row, col, token)
        col += 1
    return row + 1 if tokens else 0


def simulate_rows(tokens: Sequence[Token], size: GridSize = EDITOR_GRID, thread_rows: bool = True) -> Optional[int]:
    """Dry run of placement: rows the layout would use, or None if it overflows."""
    try:
        return _walk(tokens, size, thread_rows)
    except GridOverflowError:
        return None


def choose_thread_rows(tokens: Sequence[Token], size: GridSize = EDITOR_GRID) -> bool:
    if not any(t.is_thread_marker for t in tokens):
        return False
    if len(tokens) > size.capacity:
        return False
    fits = simulate_rows(tokens, size, thread_rows=True) is not None
    if not fits:
        logger.debug("thread rows need more than %d rows, packing densely", size.rows)
    return fits


def place_tokens(tokens: Sequence[Token], size: GridSize = EDITOR_GRID, thread_rows: bool = False) -> Grid:
    grid = Grid(size)

    def write(row: int, col: int, token: Token):
        grid[row, col] = token

    try:
        _walk(tokens, size, thread_rows, write)
    except GridOverflowError as e:
        raise GridOverflowError(e.reason, grid) from None
    return grid


def demo_grid(size: GridSize = EDITOR_GRID) -> Grid:
    """The starter program shown when the script box is left empty."""
    tokens = [p.token for p in parse_script(DEMO_SCRIPT)]
    return place_tokens(tokens, size)


def script_to_grid(text: str, size: GridSize = EDITOR_GRID) -> Grid:
    """
    Convert a whole script to a fresh grid.

    Raises GrammarError for the first bad line or GridOverflowError when the
    tiles do not fit. An empty script yields the demo grid.
    """
    if not text.strip():
        return demo_grid(size)
    tokens = [p.token for p in parse_script(text) if p.token is not None]
    thread_rows = choose_thread_rows(tokens, size)
    logger.debug(
        "placing %d tiles on %dx%d grid (%s)",
        len(tokens), size.rows, size.cols, "thread rows" if thread_rows else "dense",
    )
    return place_tokens(tokens, size, thread_rows)
