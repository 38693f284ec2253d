# gridpath/maps.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import os
import random

from .pathfinding import Pathfinder
from .types import Coord

@dataclass
class MapSpec:
    width: int
    height: int
    blocked: List[List[bool]]  # blocked[y][x], True=not walkable
    start: Coord
    goal: Coord

    @staticmethod
    def random(width: int = 32, height: int = 32, p_blocked: float = 0.30,
               seed: Optional[int] = None) -> "MapSpec":
        if width <= 0 or height <= 0:
            raise ValueError(f"map dimensions must be positive, got {width}x{height}")
        rng = random.Random(seed)
        blocked = [[rng.random() < p_blocked for _ in range(width)] for _ in range(height)]
        start, goal = (0, 0), (width - 1, height - 1)
        blocked[start[1]][start[0]] = False
        blocked[goal[1]][goal[0]] = False
        return MapSpec(width, height, blocked, start, goal)

    @staticmethod
    def load(path: str) -> "MapSpec":
        with open(path, "r") as f:
            lines = [(i, line.strip()) for i, line in enumerate(f, start=1) if line.strip()]
        if not lines:
            raise ValueError(f"{path}: empty map file")

        header = lines[0][1].split()
        if header[0] == "GRID":
            if len(header) != 7:
                raise ValueError(f"{path}:{lines[0][0]}: expected 'GRID w h sx sy gx gy'")
            w, h, sx, sy, gx, gy = map(int, header[1:])
            rows = lines[1:]
            if len(rows) != h:
                raise ValueError(f"{path}: expected {h} rows, found {len(rows)}")
            start, goal = (sx, sy), (gx, gy)
        else:
            # legacy: bare 0/1 rows, start at (0,0), goal in the far corner
            rows = lines
            h, w = len(rows), len(rows[0][1])
            start, goal = (0, 0), (w - 1, h - 1)

        blocked = [_parse_row(path, lineno, row, w) for lineno, row in rows]
        spec = MapSpec(w, h, blocked, start, goal)
        for name, (x, y) in (("start", start), ("goal", goal)):
            if not (0 <= x < w and 0 <= y < h):
                raise ValueError(f"{path}: {name} ({x}, {y}) lies outside the {w}x{h} map")
        return spec

    def save(self, path: str) -> None:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w") as f:
            f.write(f"GRID {self.width} {self.height} "
                    f"{self.start[0]} {self.start[1]} {self.goal[0]} {self.goal[1]}\n")
            for y in range(self.height):
                f.write("".join("1" if self.blocked[y][x] else "0" for x in range(self.width)) + "\n")

    def to_pathfinder(self, cell_size: float = 1.0) -> Pathfinder:
        pf = Pathfinder(self.width, self.height, cell_size=cell_size)
        for y in range(self.height):
            for x in range(self.width):
                if self.blocked[y][x]:
                    pf.set_walkable(x, y, False)
        return pf

    @staticmethod
    def from_pathfinder(pf: Pathfinder, start: Coord, goal: Coord) -> "MapSpec":
        grid = pf.grid
        blocked = [[not grid.get_element(x, y).walkable for x in range(grid.width)]
                   for y in range(grid.height)]
        return MapSpec(grid.width, grid.height, blocked, start, goal)


def _parse_row(path: str, lineno: int, row: str, width: int) -> List[bool]:
    if len(row) != width or any(c not in "01" for c in row):
        raise ValueError(f"{path}:{lineno}: expected {width} characters of 0/1, got {row!r}")
    return [c == "1" for c in row]
