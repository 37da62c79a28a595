"""
Circumscribed circles of triangles.

This module provides:
    • orientation(p1, p2, p3)
    • is_collinear(p1, p2, p3)
    • in_circle(p1, p2, p3, point)
    • circumcircle(p1, p2, p3)
    • CircumCircle.contains(point)

CircumCircle.contains compares squared distances; in_circle is the exact
determinant used when that comparison is too close to call.
"""

import math
from dataclasses import dataclass
from fractions import Fraction

from delaunay_image import config
from delaunay_image.errors import DegenerateGeometryError
from delaunay_image.models.point import Point2D


# ----------------------------------------------------------------------
#  ORIENTATION / COLLINEARITY
# ----------------------------------------------------------------------

def orientation(p1: Point2D, p2: Point2D, p3: Point2D) -> float:
    """
    Twice the signed area of the triangle (p1, p2, p3).

    Zero for collinear points. The sign depends on the winding order.
    """
    return (
        (p2.row - p1.row) * (p3.col - p1.col)
        - (p2.col - p1.col) * (p3.row - p1.row)
    )


def is_collinear(p1: Point2D, p2: Point2D, p3: Point2D) -> bool:
    return abs(orientation(p1, p2, p3)) <= config.COLLINEAR_TOLERANCE


def in_circle(p1: Point2D, p2: Point2D, p3: Point2D, point: Point2D) -> bool:
    """
    Exact inside-or-on test of `point` against the circle through p1, p2, p3.

    Evaluates the lifted 3x3 in-circle determinant with rational arithmetic,
    so the result does not depend on rounding. The sign is normalized by the
    orientation of (p1, p2, p3). Collinear triples return False.
    """
    px, py = Fraction(point.row), Fraction(point.col)
    adx, ady = Fraction(p1.row) - px, Fraction(p1.col) - py
    bdx, bdy = Fraction(p2.row) - px, Fraction(p2.col) - py
    cdx, cdy = Fraction(p3.row) - px, Fraction(p3.col) - py

    det = (
        (adx * adx + ady * ady) * (bdx * cdy - cdx * bdy)
        + (bdx * bdx + bdy * bdy) * (cdx * ady - adx * cdy)
        + (cdx * cdx + cdy * cdy) * (adx * bdy - bdx * ady)
    )
    orient = (bdx - adx) * (cdy - ady) - (bdy - ady) * (cdx - adx)

    if orient == 0:
        return False
    return det * orient >= 0


# ----------------------------------------------------------------------
#  CIRCUMCIRCLE
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class CircumCircle:
    center: Point2D
    radius_squared: float

    @property
    def radius(self) -> float:
        return math.sqrt(self.radius_squared)

    def contains(self, point: Point2D) -> bool:
        """
        True when `point` lies inside the circle or on its boundary.
        """
        d_row = point.row - self.center.row
        d_col = point.col - self.center.col
        return d_row * d_row + d_col * d_col <= self.radius_squared


def circumcircle(p1: Point2D, p2: Point2D, p3: Point2D) -> CircumCircle:
    """
    Returns the unique circle through three non-collinear points.

    Uses the closed-form circumcenter (intersection of the perpendicular
    bisectors):

        d  = 2 (ax (by - cy) + bx (cy - ay) + cx (ay - by))
        ux = (|a|² (by - cy) + |b|² (cy - ay) + |c|² (ay - by)) / d
        uy = (|a|² (cx - bx) + |b|² (ax - cx) + |c|² (bx - ax)) / d

    with x = row and y = col.

    Raises
    ------
    DegenerateGeometryError
        If the points are collinear (d is zero within tolerance).
    """
    ax, ay = p1.row, p1.col
    bx, by = p2.row, p2.col
    cx, cy = p3.row, p3.col

    d = 2.0 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if abs(d) <= 2.0 * config.COLLINEAR_TOLERANCE:
        raise DegenerateGeometryError(
            f"collinear points have no circumcircle: {p1}, {p2}, {p3}"
        )

    a_sq = ax * ax + ay * ay
    b_sq = bx * bx + by * by
    c_sq = cx * cx + cy * cy

    ux = (a_sq * (by - cy) + b_sq * (cy - ay) + c_sq * (ay - by)) / d
    uy = (a_sq * (cx - bx) + b_sq * (ax - cx) + c_sq * (bx - ax)) / d

    center = Point2D(ux, uy)
    radius_squared = (ax - ux) ** 2 + (ay - uy) ** 2

    return CircumCircle(center, radius_squared)
