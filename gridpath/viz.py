# gridpath/viz.py
from __future__ import annotations
import os
from typing import List, Optional, Sequence

from PIL import Image, ImageDraw

from .node import PathNode
from .pathfinding import Pathfinder
from .types import Coord

def draw_grid_png(pf: Pathfinder,
                  path: Optional[Sequence[PathNode]],
                  out_png: str,
                  start: Optional[Coord] = None,
                  goal: Optional[Coord] = None,
                  cell: int = 10) -> None:
    grid = pf.grid
    W, H = grid.width * cell, grid.height * cell
    img = Image.new("RGB", (W, H), (255, 255, 255))
    drw = ImageDraw.Draw(img)

    def box(x: int, y: int):
        # image rows grow downward, grid y grows upward
        top = (grid.height - 1 - y) * cell
        return (x * cell, top, x * cell + cell - 1, top + cell - 1)

    # base grid + examined nodes
    for node in grid:
        if not node.walkable:
            fill = (0, 0, 0)
        elif node.is_valid:
            fill = (255, 200, 200)
        else:
            fill = (240, 240, 240)
        drw.rectangle(box(node.x, node.y), fill=fill)

    # path
    if path:
        for node in path:
            drw.rectangle(box(node.x, node.y), fill=(160, 190, 255))

    # start/goal
    if start is not None:
        drw.rectangle(box(*start), fill=(100, 220, 120))
    if goal is not None:
        drw.rectangle(box(*goal), fill=(255, 170, 80))

    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)

def format_costs(pf: Pathfinder, width: int = 14) -> str:
    """One line per grid row, highest y first, each cell showing str(node)."""
    grid = pf.grid
    lines: List[str] = []
    for y in reversed(range(grid.height)):
        cells = (str(grid.get_element(x, y)).center(width) for x in range(grid.width))
        lines.append("|".join(cells).rstrip())
    return "\n".join(lines)
