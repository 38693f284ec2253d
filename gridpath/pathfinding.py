# gridpath/pathfinding.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set
import logging
import time

from .errors import OutOfGridError
from .grid import GridMap
from .heuristics import octile_cost
from .node import PathNode
from .types import AxisMode, Coord, Vec3

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    found: bool
    cost: Optional[int]
    expanded: Set[Coord] = field(default_factory=set)   # closed by expansion
    excluded: Set[Coord] = field(default_factory=set)   # closed as non-walkable
    elapsed_sec: float = 0.0


class Pathfinder:
    """
    A* over a grid of PathNodes, 8-connected, octile move costs.

    Not reentrant: a search writes its costs into the shared nodes, so one
    instance must not run two searches at once or be edited mid-search.
    """

    def __init__(self,
                 width: int,
                 height: int,
                 cell_size: float = 1.0,
                 origin: Vec3 = (0.0, 0.0, 0.0),
                 axis_mode: AxisMode = AxisMode.XZ):
        self._grid: GridMap[PathNode] = GridMap(width, height, cell_size, origin,
                                                PathNode.create, axis_mode)
        self.last_stats: Optional[SearchStats] = None
        self._reset_nodes()

    @property
    def grid(self) -> GridMap[PathNode]:
        return self._grid

    def get_node(self, x: int, y: int) -> Optional[PathNode]:
        return self._grid.get_element(x, y)

    def set_walkable(self, x: int, y: int, walkable: bool) -> None:
        node = self.get_node(x, y)
        if node is None:
            raise OutOfGridError(x, y, self._grid.width, self._grid.height)
        node.walkable = walkable

    def calculate_distance_cost(self, a: PathNode, b: PathNode) -> int:
        return octile_cost(a.coord, b.coord)

    def path_cost(self, path: Sequence[PathNode]) -> int:
        return sum(self.calculate_distance_cost(a, b) for a, b in zip(path, path[1:]))

    def get_neighbours(self, node: PathNode) -> List[PathNode]:
        x, y = node.x, node.y
        w, h = self._grid.width, self._grid.height
        out: List[PathNode] = []
        if x - 1 >= 0:
            out.append(self._grid.get_element(x - 1, y))
            if y - 1 >= 0:
                out.append(self._grid.get_element(x - 1, y - 1))
            if y + 1 < h:
                out.append(self._grid.get_element(x - 1, y + 1))
        if x + 1 < w:
            out.append(self._grid.get_element(x + 1, y))
            if y - 1 >= 0:
                out.append(self._grid.get_element(x + 1, y - 1))
            if y + 1 < h:
                out.append(self._grid.get_element(x + 1, y + 1))
        if y - 1 >= 0:
            out.append(self._grid.get_element(x, y - 1))
        if y + 1 < h:
            out.append(self._grid.get_element(x, y + 1))
        return out

    def find_path(self, start_x: int, start_y: int, end_x: int, end_y: int) -> Optional[List[PathNode]]:
        """
        Cheapest path from start to end, inclusive, or None when no route exists.

        Raises OutOfGridError if either endpoint is outside the grid. The start
        cell's own walkability is not checked; only neighbours are filtered.
        """
        start = self.get_node(start_x, start_y)
        if start is None:
            raise OutOfGridError(start_x, start_y, self._grid.width, self._grid.height)
        end = self.get_node(end_x, end_y)
        if end is None:
            raise OutOfGridError(end_x, end_y, self._grid.width, self._grid.height)

        t0 = time.perf_counter()
        self._reset_nodes()

        start.g_cost = 0
        start.h_cost = self.calculate_distance_cost(start, end)
        start.calculate_f_cost()

        # dict as an insertion-ordered set: ties on f go to the earliest entry
        open_nodes: Dict[PathNode, None] = {start: None}
        closed: Set[PathNode] = set()
        stats = SearchStats(found=False, cost=None)
        logger.debug("searching %s -> %s", start.coord, end.coord)

        while open_nodes:
            current = self._lowest_f_cost(open_nodes)
            if current is end:
                path = self._calculate_path(end)
                stats.found = True
                stats.cost = end.g_cost
                stats.elapsed_sec = time.perf_counter() - t0
                self.last_stats = stats
                logger.debug("path found: %d nodes, cost %d, %d expanded",
                             len(path), end.g_cost, len(stats.expanded))
                return path

            del open_nodes[current]
            closed.add(current)
            stats.expanded.add(current.coord)

            for nb in self.get_neighbours(current):
                if nb in closed:
                    continue
                if not nb.walkable:
                    closed.add(nb)
                    stats.excluded.add(nb.coord)
                    continue

                tentative = current.g_cost + self.calculate_distance_cost(current, nb)
                if tentative < nb.g_cost:
                    nb.previous = current
                    nb.g_cost = tentative
                    nb.h_cost = self.calculate_distance_cost(nb, end)
                    nb.calculate_f_cost()
                    if nb not in open_nodes:
                        open_nodes[nb] = None

        stats.elapsed_sec = time.perf_counter() - t0
        self.last_stats = stats
        logger.debug("no path %s -> %s after %d expansions",
                     start.coord, end.coord, len(stats.expanded))
        return None

    # ----------------- helpers -----------------
    def _reset_nodes(self) -> None:
        for node in self._grid:
            node.reset()

    @staticmethod
    def _lowest_f_cost(nodes: Dict[PathNode, None]) -> PathNode:
        it = iter(nodes)
        best = next(it)
        for node in it:
            if node.f_cost < best.f_cost:
                best = node
        return best

    @staticmethod
    def _calculate_path(end: PathNode) -> List[PathNode]:
        path = [end]
        cur = end
        while cur.previous is not None:
            cur = cur.previous
            path.append(cur)
        path.reverse()
        return path
