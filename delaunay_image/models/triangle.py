from functools import cached_property
from typing import Optional, Tuple

from delaunay_image import config
from delaunay_image.errors import DegenerateGeometryError
from delaunay_image.models.circumcircle import CircumCircle, circumcircle, in_circle, is_collinear
from delaunay_image.models.edge import Edge
from delaunay_image.models.point import Point2D


class Triangle:
    """
    It supports:
      - vertex / edge membership tests by value
      - lazily computed circumcircle (None for a collinear vertex triple)
      - the point-in-circumcircle predicate used by Bowyer-Watson

    Notes:
      • Vertices keep their construction order; edges() is built from it.
      • Equality and hashing ignore vertex order, so the same triangle built
        from a different winding is still a duplicate.
    """

    def __init__(self, a: Point2D, b: Point2D, c: Point2D):
        self.vertices: Tuple[Point2D, Point2D, Point2D] = (a, b, c)

    # ------------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------------

    @cached_property
    def is_degenerate(self) -> bool:
        return is_collinear(*self.vertices)

    @cached_property
    def circumcircle(self) -> Optional[CircumCircle]:
        if self.is_degenerate:
            return None
        try:
            return circumcircle(*self.vertices)
        except DegenerateGeometryError:
            return None

    def circumcircle_contains(self, point: Point2D) -> bool:
        """
        Inside-or-on test against the circumcircle.

        The squared-distance test decides unless the point is within
        INCIRCLE_TOLERANCE of the boundary; those cases go to the exact
        determinant. A degenerate triangle has no circumcircle and never
        contains a point.
        """
        circle = self.circumcircle
        if circle is None:
            return False

        d_row = point.row - circle.center.row
        d_col = point.col - circle.center.col
        margin = d_row * d_row + d_col * d_col - circle.radius_squared
        if abs(margin) > config.INCIRCLE_TOLERANCE * max(circle.radius_squared, 1.0):
            return circle.contains(point)

        return in_circle(*self.vertices, point)

    def edges(self) -> Tuple[Edge, Edge, Edge]:
        a, b, c = self.vertices
        return Edge(a, b), Edge(b, c), Edge(c, a)

    def centroid(self) -> Point2D:
        a, b, c = self.vertices
        return Point2D((a.row + b.row + c.row) / 3.0, (a.col + b.col + c.col) / 3.0)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def contains_vertex(self, point: Point2D) -> bool:
        return point in self.vertices

    def contains_edge(self, edge: Edge) -> bool:
        return edge.a in self.vertices and edge.b in self.vertices

    # ------------------------------------------------------------------
    # Equality & hashing (by vertex set)
    # ------------------------------------------------------------------

    def __eq__(self, other):
        return isinstance(other, Triangle) and frozenset(self.vertices) == frozenset(other.vertices)

    def __hash__(self):
        return hash(frozenset(self.vertices))

    def __repr__(self):
        a, b, c = self.vertices
        return f"Triangle({a}, {b}, {c})"
