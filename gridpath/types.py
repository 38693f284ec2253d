# gridpath/types.py
from __future__ import annotations
from enum import Enum
from typing import Tuple

Coord = Tuple[int, int]           # (x, y) cell index
Vec3 = Tuple[float, float, float]  # world-space point


class AxisMode(Enum):
    """Which pair of world axes the grid is laid out on."""
    XZ = "xz"  # horizontal ground plane, grid y -> world z
    XY = "xy"  # vertical plane, grid y -> world y
