# gridpath/__init__.py
from .types import AxisMode, Coord, Vec3
from .errors import OutOfGridError
from .grid import GridMap
from .heuristics import STRAIGHT_COST, DIAGONAL_COST, octile_cost
from .node import COST_INFINITY, PathNode
from .pathfinding import Pathfinder, SearchStats
from .maps import MapSpec
from .viz import draw_grid_png, format_costs

__all__ = [
    "AxisMode", "Coord", "Vec3", "OutOfGridError", "GridMap",
    "STRAIGHT_COST", "DIAGONAL_COST", "octile_cost",
    "COST_INFINITY", "PathNode", "Pathfinder", "SearchStats",
    "MapSpec", "draw_grid_png", "format_costs",
]
