import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True)
class Point2D:
    """
    A pixel-space position stored as (row, col).

    Frozen so points can be used as dict keys and set members; ordering is
    lexicographic on (row, col), which Edge relies on to canonicalize its
    endpoints.
    """

    row: float
    col: float

    def to_xy(self) -> Tuple[float, float]:
        """Canvas convention: x is the column, y is the row."""
        return self.col, self.row

    def is_finite(self) -> bool:
        return math.isfinite(self.row) and math.isfinite(self.col)

    def __repr__(self):
        return f"Point2D({self.row:g}, {self.col:g})"
