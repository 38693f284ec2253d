# gridpath/errors.py
from __future__ import annotations


class OutOfGridError(ValueError):
    """Raised when a coordinate that must address a cell lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"cell ({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y
        self.width = width
        self.height = height
