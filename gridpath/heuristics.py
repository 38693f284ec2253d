# gridpath/heuristics.py
from .types import Coord

STRAIGHT_COST = 10
DIAGONAL_COST = 14  # ~ sqrt(2) * STRAIGHT_COST


def octile_cost(a: Coord, b: Coord) -> int:
    """8-connected move cost; used both as edge cost and as the A* heuristic."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return DIAGONAL_COST * min(dx, dy) + STRAIGHT_COST * abs(dx - dy)
