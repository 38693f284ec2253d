# gridpath/viewer.py (interactive walkability editor)
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Set
import logging

import pygame

from .errors import OutOfGridError
from .maps import MapSpec
from .node import PathNode
from .pathfinding import Pathfinder
from .types import Coord

logger = logging.getLogger(__name__)

@dataclass
class Colors:
    BG = (18, 18, 22)
    WALL = (35, 35, 44)
    FLOOR = (230, 230, 240)
    START = (90, 200, 120)
    GOAL = (90, 160, 220)
    PATH = (220, 90, 90)
    EXAMINED = (200, 225, 200)
    GRID = (60, 60, 70)

class Viewer:
    """
    Click-to-edit view of a Pathfinder grid.

    Redraws are driven by the grid's change notifications: every node mutation
    marks its cell dirty and only dirty cells are repainted each frame.
    """

    def __init__(self, spec: MapSpec, cell_size: int = 24, fps: int = 60,
                 map_path: Optional[str] = None):
        self.spec = spec
        self.cell = cell_size
        self.fps = fps
        self.map_path = map_path
        self.show_grid = True
        self.path: List[PathNode] = []
        self.dirty: Set[Coord] = set()
        self.pf: Pathfinder
        self._load(spec)

        self.screen = pygame.display.set_mode((self.pf.grid.width * cell_size,
                                               self.pf.grid.height * cell_size))
        pygame.display.set_caption("gridpath")
        self.clock = pygame.time.Clock()
        self._mark_all_dirty()

    # ----------------- model -----------------
    def _load(self, spec: MapSpec) -> None:
        self.spec = spec
        self.start: Coord = spec.start
        self.goal: Coord = spec.goal
        self.pf = spec.to_pathfinder()
        self.pf.grid.add_listener(self._on_cell_changed)
        self.path = []

    def _on_cell_changed(self, x: int, y: int) -> None:
        self.dirty.add((x, y))

    def _mark_all_dirty(self) -> None:
        self.dirty.update(self.pf.grid.coords())

    def _cell_at(self, pos) -> Coord:
        px, py = pos
        x = px // self.cell
        y = self.pf.grid.height - 1 - py // self.cell
        return self.pf.grid.validate_grid_position((x, y))

    def _set_path(self, path: List[PathNode]) -> None:
        self.dirty.update(n.coord for n in self.path)
        self.path = path
        self.dirty.update(n.coord for n in self.path)

    def plan(self) -> None:
        try:
            path = self.pf.find_path(*self.start, *self.goal)
        except OutOfGridError as e:
            logger.warning("%s", e)
            return
        self._set_path(path or [])
        stats = self.pf.last_stats
        if path is None:
            print(f"no path {self.start} -> {self.goal} ({len(stats.expanded)} expanded)")
        else:
            print(f"path {self.start} -> {self.goal}: {len(path)} nodes, "
                  f"cost {stats.cost}, {len(stats.expanded)} expanded")

    def toggle_wall(self, x: int, y: int) -> None:
        node = self.pf.get_node(x, y)
        node.walkable = not node.walkable

    def clear_walls(self) -> None:
        for node in self.pf.grid:
            if not node.walkable:
                node.walkable = True

    def save(self) -> None:
        if not self.map_path:
            print("no map file loaded; nothing to save")
            return
        MapSpec.from_pathfinder(self.pf, self.start, self.goal).save(self.map_path)
        print("wrote", self.map_path)

    # ----------------- draw -----------------
    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        top = (self.pf.grid.height - 1 - y) * self.cell
        return pygame.Rect(x * self.cell, top, self.cell, self.cell)

    def draw(self) -> None:
        if not self.dirty:
            return
        on_path = {n.coord for n in self.path}
        cell = self.cell
        for (x, y) in self.dirty:
            node = self.pf.get_node(x, y)
            rect = self._cell_rect(x, y)
            if not node.walkable:
                color = Colors.WALL
            elif node.is_valid:
                color = Colors.EXAMINED
            else:
                color = Colors.FLOOR
            self.screen.fill(color, rect)
            if (x, y) in on_path:
                inner = rect.inflate(-cell // 2, -cell // 2)
                pygame.draw.rect(self.screen, Colors.PATH, inner, border_radius=4)
            if (x, y) == self.start:
                pygame.draw.rect(self.screen, Colors.START, rect.inflate(-6, -6), border_radius=6)
            elif (x, y) == self.goal:
                pygame.draw.rect(self.screen, Colors.GOAL, rect.inflate(-6, -6), border_radius=6)
            if self.show_grid:
                pygame.draw.rect(self.screen, Colors.GRID, rect, 1)
        self.dirty.clear()
        pygame.display.flip()

    # ----------------- loop -----------------
    def run(self) -> None:
        running = True
        while running:
            self.clock.tick(self.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    x, y = self._cell_at(event.pos)
                    if event.button == 1:
                        self.toggle_wall(x, y)
                    elif event.button == 3:
                        if pygame.key.get_mods() & pygame.KMOD_SHIFT:
                            old, self.start = self.start, (x, y)
                        else:
                            old, self.goal = self.goal, (x, y)
                        self.dirty.update({old, (x, y)})
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        self.plan()
                    elif event.key == pygame.K_c:
                        self.clear_walls()
                    elif event.key == pygame.K_g:
                        grid = self.pf.grid
                        self._load(MapSpec.random(grid.width, grid.height))
                        self._mark_all_dirty()
                    elif event.key == pygame.K_s:
                        self.save()
                    elif event.key == pygame.K_h:
                        self.show_grid = not self.show_grid
                        self._mark_all_dirty()
            self.draw()

def run_viewer(spec: MapSpec, cell_size: int = 24, fps: int = 60,
               map_path: Optional[str] = None) -> None:
    pygame.init()
    try:
        Viewer(spec, cell_size=cell_size, fps=fps, map_path=map_path).run()
    finally:
        pygame.quit()
