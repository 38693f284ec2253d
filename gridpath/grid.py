# gridpath/grid.py
from __future__ import annotations
import logging
import math
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from .types import AxisMode, Coord, Vec3

logger = logging.getLogger(__name__)

T = TypeVar("T")

ChangeListener = Callable[[int, int], None]


class GridMap(Generic[T]):
    """
    Fixed-size 2D container of elements of a single type.

    Each cell is filled once, at construction, by ``element_factory(grid, x, y)``
    so elements can hook into the grid's change notifications. The grid never
    detects mutations made inside an element; mutators must call
    ``trigger_changed`` themselves.
    """

    def __init__(self,
                 width: int,
                 height: int,
                 cell_size: float,
                 origin: Vec3,
                 element_factory: Callable[["GridMap[T]", int, int], T],
                 axis_mode: AxisMode = AxisMode.XZ):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")

        self._width = width
        self._height = height
        self._cell_size = float(cell_size)
        self._origin: Vec3 = (float(origin[0]), float(origin[1]), float(origin[2]))
        self._axis_mode = axis_mode
        self._listeners: List[ChangeListener] = []

        # cells[x][y]
        self._cells: List[List[T]] = []
        for x in range(width):
            column: List[T] = []
            self._cells.append(column)
            for y in range(height):
                column.append(element_factory(self, x, y))

    # ----------------- properties -----------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cell_size(self) -> float:
        return self._cell_size

    @property
    def origin(self) -> Vec3:
        return self._origin

    @property
    def axis_mode(self) -> AxisMode:
        return self._axis_mode

    # ----------------- cell access -----------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_element(self, x: int, y: int) -> Optional[T]:
        if self.in_bounds(x, y):
            return self._cells[x][y]
        return None

    def get_element_at(self, world_position: Vec3) -> Optional[T]:
        x, y = self.get_xy(world_position)
        return self.get_element(x, y)

    def set_element(self, x: int, y: int, value: T) -> bool:
        """Store ``value`` at (x, y). Returns False, and stores nothing, when out of range."""
        if not self.in_bounds(x, y):
            logger.warning("ignoring write to (%d, %d) outside %dx%d grid",
                           x, y, self._width, self._height)
            return False
        self._cells[x][y] = value
        self.trigger_changed(x, y)
        return True

    def set_element_at(self, world_position: Vec3, value: T) -> bool:
        x, y = self.get_xy(world_position)
        return self.set_element(x, y, value)

    def coords(self) -> Iterator[Coord]:
        for x in range(self._width):
            for y in range(self._height):
                yield (x, y)

    def __iter__(self) -> Iterator[T]:
        for column in self._cells:
            yield from column

    # ----------------- world mapping -----------------
    def get_world_position(self, x: int, y: int) -> Vec3:
        ox, oy, oz = self._origin
        if self._axis_mode is AxisMode.XY:
            return (ox + x * self._cell_size, oy + y * self._cell_size, oz)
        return (ox + x * self._cell_size, oy, oz + y * self._cell_size)

    def get_xy(self, world_position: Vec3) -> Coord:
        wx, wy, wz = world_position
        ox, oy, oz = self._origin
        second = (wy - oy) if self._axis_mode is AxisMode.XY else (wz - oz)
        return (math.floor((wx - ox) / self._cell_size),
                math.floor(second / self._cell_size))

    def validate_grid_position(self, pos: Coord) -> Coord:
        x, y = pos
        return (min(max(x, 0), self._width - 1),
                min(max(y, 0), self._height - 1))

    # ----------------- change notification -----------------
    def add_listener(self, callback: ChangeListener) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: ChangeListener) -> None:
        self._listeners.remove(callback)

    def trigger_changed(self, x: int, y: int) -> None:
        for callback in list(self._listeners):
            callback(x, y)
