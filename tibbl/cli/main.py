import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

# Engine imports
from ..config import load_grid_size                              # options YAML → grid size
from ..dsl.grammar import ScriptError
from ..dsl.labels import compact_label, tile_label
from ..dsl.vocabulary import PALETTE, Token
from ..layout.grid import Grid
from ..layout.placement import DEMO_SCRIPT, demo_grid, script_to_grid
from ..layout.synthesize import flatten_threads, grid_to_threads, has_code, threads_to_text
# SVG preview is imported inside the command to keep CLI import light

app = typer.Typer(help="TIBBL tile grid CLI")


# ---------------------------
# Helpers
# ---------------------------

@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log layout decisions")):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _fail(message: str):
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _read_grid(path: Path) -> Grid:
    try:
        return Grid.from_json(json.loads(Path(path).read_text()))
    except (json.JSONDecodeError, ValueError) as e:
        _fail(f"{path}: {e}")


def _write_grid(grid: Grid, out: Path):
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(grid.to_json(), indent=2))


def _ascii_grid(grid: Grid, width: int = 12) -> List[str]:
    lines = []
    for row in grid.cells:
        cells = [(compact_label(t) if t else ".")[:width].ljust(width) for t in row]
        lines.append("| " + " | ".join(cells) + " |")
    return lines


# ---------------------------
# Commands
# ---------------------------

@app.command()
def place(
    script: Path = typer.Argument(..., exists=True, dir_okay=False, help="Script text file"),
    out: Path = typer.Option(..., help="Output grid JSON"),
    options: Optional[Path] = typer.Option(None, exists=True, help="Options YAML (grid, rows, cols)"),
    rows: Optional[int] = typer.Option(None, help="Override grid rows"),
    cols: Optional[int] = typer.Option(None, help="Override grid columns"),
):
    """
    Lay a script out as a tile grid.

    An empty script produces the demo program. Nothing is written when the
    script has a bad line or does not fit.
    """
    try:
        size = load_grid_size(options, rows, cols)
    except ValueError as e:
        _fail(str(e))
    try:
        grid = script_to_grid(Path(script).read_text(), size)
    except ScriptError as e:
        _fail(str(e))
    _write_grid(grid, out)
    for line in _ascii_grid(grid):
        typer.echo(line)
    typer.echo(f"Wrote {size.rows}x{size.cols} grid to {out}")


@app.command()
def generate(
    grid_json: Path = typer.Argument(..., exists=True, dir_okay=False, help="Grid JSON from `place`"),
    flat: bool = typer.Option(False, help="Print one flattened script instead of per-thread blocks"),
):
    """Rebuild script text from a grid, split by thread."""
    threads = grid_to_threads(_read_grid(grid_json))
    if not has_code(threads):
        typer.echo("Grid is empty")
        return
    if flat:
        typer.echo(flatten_threads(threads))
        return
    for i, text in enumerate(threads_to_text(threads), start=1):
        if text:
            typer.echo(f"Thread {i}:")
            typer.echo(text)
            typer.echo("")


@app.command()
def preview(
    grid_json: Path = typer.Argument(..., exists=True, dir_okay=False, help="Grid JSON"),
    out: Path = typer.Option(..., help="Output directory for SVG preview"),
):
    """Render a grid to grid.svg for quick visual checks."""
    from ..render.to_svg import grid_to_svg  # import here to keep CLI import light

    grid = _read_grid(grid_json)
    out.mkdir(parents=True, exist_ok=True)
    svg_path = out / "grid.svg"
    grid_to_svg(grid, str(svg_path))
    typer.echo(f"Wrote {svg_path}")


@app.command()
def palette():
    """List the tile palette, row by row."""
    for row in PALETTE:
        labels = []
        for kind in row:
            token = Token(kind)
            suffix = " (1-8)" if token.entry.rotatable else ""
            labels.append(f"{kind}: {tile_label(token)}{suffix}")
        typer.echo("  ".join(labels))


@app.command()
def demo(
    out: Path = typer.Option(..., help="Output grid JSON"),
    options: Optional[Path] = typer.Option(None, exists=True, help="Options YAML (grid, rows, cols)"),
    rows: Optional[int] = typer.Option(None, help="Override grid rows"),
    cols: Optional[int] = typer.Option(None, help="Override grid columns"),
):
    """Write the demo program grid."""
    try:
        grid = demo_grid(load_grid_size(options, rows, cols))
    except ValueError as e:  # bad size or too small for the demo
        _fail(str(e))
    _write_grid(grid, out)
    typer.echo(DEMO_SCRIPT)
    typer.echo(f"Wrote demo grid to {out}")


if __name__ == "__main__":
    app()
