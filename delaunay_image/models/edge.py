from dataclasses import dataclass

from delaunay_image.errors import DegenerateGeometryError
from delaunay_image.models.point import Point2D


@dataclass(frozen=True)
class Edge:
    """
    Unordered pair of distinct points.

    The endpoints are sorted on construction, so Edge(A, B) and Edge(B, A)
    are the same value and hash identically with the generated __eq__ and
    __hash__.
    """

    a: Point2D
    b: Point2D

    def __post_init__(self):
        if self.a == self.b:
            raise DegenerateGeometryError(f"zero-length edge at {self.a}")
        if self.b < self.a:
            a, b = self.b, self.a
            object.__setattr__(self, "a", a)
            object.__setattr__(self, "b", b)

    def __repr__(self):
        return f"Edge({self.a}, {self.b})"
