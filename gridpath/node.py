# gridpath/node.py
from __future__ import annotations
import weakref
from typing import Callable, Optional

from .types import Coord

COST_INFINITY = 2**31 - 1  # sentinel for "no known cost"

Notify = Callable[[int, int], None]


def _weak_notify(notify: Optional[Notify]) -> Optional[Callable[[], Optional[Notify]]]:
    if notify is None:
        return None
    if hasattr(notify, "__func__"):
        return weakref.WeakMethod(notify)
    return lambda: notify


class PathNode:
    """
    Search state for one grid cell.

    Nodes live for the lifetime of their grid and are reused by every search;
    ``reset`` puts them back to the unvisited state. Each mutation is reported
    through ``notify`` (normally the owning grid's ``trigger_changed``), held
    weakly so a node never keeps its grid alive.
    """

    __slots__ = ("_x", "_y", "_walkable", "_g_cost", "_h_cost", "_f_cost",
                 "_previous", "_notify", "__weakref__")

    def __init__(self, x: int, y: int, notify: Optional[Notify] = None):
        self._x = x
        self._y = y
        self._walkable = True
        self._g_cost = COST_INFINITY
        self._h_cost = COST_INFINITY
        self._f_cost = COST_INFINITY
        self._previous: Optional[PathNode] = None
        self._notify = _weak_notify(notify)

    @classmethod
    def create(cls, grid, x: int, y: int) -> "PathNode":
        """Element factory for ``GridMap``."""
        return cls(x, y, grid.trigger_changed)

    def _changed(self) -> None:
        if self._notify is None:
            return
        notify = self._notify()
        if notify is not None:
            notify(self._x, self._y)

    # ----------------- coordinates -----------------
    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def coord(self) -> Coord:
        return (self._x, self._y)

    # ----------------- search state -----------------
    @property
    def walkable(self) -> bool:
        return self._walkable

    @walkable.setter
    def walkable(self, value: bool) -> None:
        self._walkable = bool(value)
        self._changed()

    @property
    def g_cost(self) -> int:
        """Cheapest known cost from the search start to this node."""
        return self._g_cost

    @g_cost.setter
    def g_cost(self, value: int) -> None:
        self._g_cost = value
        self._changed()

    @property
    def h_cost(self) -> int:
        """Heuristic estimate from this node to the goal."""
        return self._h_cost

    @h_cost.setter
    def h_cost(self, value: int) -> None:
        self._h_cost = value
        self._changed()

    @property
    def f_cost(self) -> int:
        return self._f_cost

    def calculate_f_cost(self) -> None:
        self._f_cost = self._g_cost + self._h_cost
        self._changed()

    @property
    def previous(self) -> Optional["PathNode"]:
        return self._previous

    @previous.setter
    def previous(self, node: Optional["PathNode"]) -> None:
        self._previous = node
        self._changed()

    @property
    def is_valid(self) -> bool:
        return self._h_cost < COST_INFINITY

    def reset(self) -> None:
        self._g_cost = COST_INFINITY
        self._h_cost = COST_INFINITY
        self._f_cost = COST_INFINITY
        self._previous = None
        self._changed()

    def __str__(self) -> str:
        if not self._walkable:
            return "*"
        if not self.is_valid:
            return ""
        return f"{self._g_cost} + {self._h_cost} = {self._f_cost}"

    def __repr__(self) -> str:
        return f"PathNode(x={self._x}, y={self._y}, walkable={self._walkable})"
