"""
Incremental Bowyer-Watson Delaunay triangulation.

This module provides:
    • super_structure_corners(height, width)
    • create_super_structure(height, width)
    • cavity_boundary(bad_triangles)
    • insert_point(triangles, point)
    • remove_border_triangles(triangles, corners)
    • triangulate(points, image_size, delete_border)

The seed geometry is the image rectangle split along its (0,0)-(h-1,w-1)
diagonal. Each insertion rescans every triangle (O(n) per point, O(n²) per
run); there is no spatial index.
"""

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from delaunay_image.errors import TriangulationError
from delaunay_image.models.circumcircle import is_collinear
from delaunay_image.models.edge import Edge
from delaunay_image.models.mesh import Mesh
from delaunay_image.models.point import Point2D
from delaunay_image.models.triangle import Triangle

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# 1. SUPER STRUCTURE
# ----------------------------------------------------------------------

def super_structure_corners(height: int, width: int) -> Tuple[Point2D, Point2D, Point2D, Point2D]:
    """
    Corners of the image rectangle in (row, col):

        a = (0, 0)        d = (0, w-1)
        b = (h-1, 0)      c = (h-1, w-1)
    """
    a = Point2D(0.0, 0.0)
    b = Point2D(float(height - 1), 0.0)
    c = Point2D(float(height - 1), float(width - 1))
    d = Point2D(0.0, float(width - 1))
    return a, b, c, d


def create_super_structure(height: int, width: int) -> List[Triangle]:
    """
    Two triangles (a, b, c) and (a, c, d) covering the image, sharing a-c.
    """
    a, b, c, d = super_structure_corners(height, width)
    return [Triangle(a, b, c), Triangle(a, c, d)]


# ----------------------------------------------------------------------
# 2. SINGLE INSERTION STEP
# ----------------------------------------------------------------------

def cavity_boundary(bad_triangles: Sequence[Triangle]) -> List[Edge]:
    """
    Edges that belong to exactly one bad triangle.

    An edge shared by two bad triangles lies inside the cavity and is
    dropped. The result keeps first-seen order so runs are reproducible.
    """
    counts: Dict[Edge, int] = {}
    for triangle in bad_triangles:
        for edge in triangle.edges():
            counts[edge] = counts.get(edge, 0) + 1

    return [edge for edge, n in counts.items() if n == 1]


def insert_point(triangles: Sequence[Triangle], point: Point2D) -> List[Triangle]:
    """
    Returns the triangle list after inserting `point`; `triangles` itself
    is not modified.

      a. split into bad (circumcircle contains point) and good
      b. take the boundary of the cavity left by the bad triangles
      c. connect each boundary edge to the point
      d. good + new

    A point that is already a vertex leaves the list unchanged. Boundary
    edges collinear with the point (the point sits on the edge) would give a
    zero-area triangle and are not connected.
    """
    if any(t.contains_vertex(point) for t in triangles):
        logger.debug("Skipping %s: already a vertex", point)
        return list(triangles)

    bad: List[Triangle] = []
    good: List[Triangle] = []
    for triangle in triangles:
        if triangle.circumcircle_contains(point):
            bad.append(triangle)
        else:
            good.append(triangle)

    if not bad:
        logger.debug("Point %s lies in no circumcircle", point)
        return good

    for edge in cavity_boundary(bad):
        if is_collinear(edge.a, edge.b, point):
            logger.debug("Skipping zero-area triangle on %s for %s", edge, point)
            continue
        good.append(Triangle(edge.a, edge.b, point))

    return good


# ----------------------------------------------------------------------
# 3. BORDER REMOVAL
# ----------------------------------------------------------------------

def remove_border_triangles(triangles: Iterable[Triangle],
                            corners: Iterable[Point2D]) -> List[Triangle]:
    """
    Drops every triangle that has a super-structure corner as a vertex.
    """
    corners = set(corners)
    return [t for t in triangles if corners.isdisjoint(t.vertices)]


# ----------------------------------------------------------------------
# 4. FULL TRIANGULATION
# ----------------------------------------------------------------------

def triangulate(points: Sequence[Point2D], image_size: Tuple[int, int],
                delete_border: bool = False) -> Mesh:
    """
    Builds the Delaunay mesh of `points` inside an image of `image_size`.

    Parameters
    ----------
    points : sequence[Point2D]
        Insertion order matters; the algorithm is incremental.
    image_size : (int, int)
        (height, width) of the image; defines the super structure.
    delete_border : bool
        Remove triangles touching the four image corners at the end.

    Returns
    -------
    Mesh

    Raises
    ------
    TriangulationError
        If a point has non-finite coordinates. The index of the failing
        point is reported.
    """
    height, width = image_size
    triangles = create_super_structure(height, width)

    for index, point in enumerate(points):
        if not point.is_finite():
            raise TriangulationError(f"cannot insert non-finite point {point}", index)
        triangles = insert_point(triangles, point)

    if delete_border:
        before = len(triangles)
        triangles = remove_border_triangles(triangles, super_structure_corners(height, width))
        logger.debug("Removed %d border triangles", before - len(triangles))

    logger.debug("Triangulated %d points into %d triangles", len(points), len(triangles))
    return Mesh(tuple(triangles), (height, width))
