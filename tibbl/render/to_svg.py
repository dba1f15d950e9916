import svgwrite

from ..dsl.labels import compact_label
from ..layout.grid import Grid


def grid_to_svg(grid: Grid, filename: str, cell=80, margin=20, gap=8):
    rows, cols = grid.size.rows, grid.size.cols
    width = margin * 2 + cols * cell + (cols - 1) * gap
    height = margin * 2 + rows * cell + (rows - 1) * gap
    dwg = svgwrite.Drawing(filename, size=(width, height))
    dwg.add(dwg.rect(insert=(0, 0), size=(width, height), fill="#1f2937"))
    for r in range(rows):
        for c in range(cols):
            x = margin + c * (cell + gap)
            y = margin + r * (cell + gap)
            token = grid[r, c]
            g = dwg.g(transform=f"translate({x},{y})")
            g.add(dwg.rect(
                insert=(0, 0), size=(cell, cell), rx=4, ry=4,
                fill="#374151" if token else "#2d3748",
                stroke="#22c55e" if token else "#4b5563",
                stroke_width=2, stroke_dasharray="6,4",
            ))
            if token:
                # labels
                g.add(dwg.text(
                    compact_label(token), insert=(cell / 2, cell / 2 + 4),
                    font_size="12px", fill="#d1d5db", text_anchor="middle",
                ))
            dwg.add(g)
    dwg.save()
    return filename
