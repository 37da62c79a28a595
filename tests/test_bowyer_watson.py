import math

import numpy as np
import pytest

from delaunay_image.detectors.bowyer_watson import (
    cavity_boundary,
    create_super_structure,
    insert_point,
    remove_border_triangles,
    super_structure_corners,
    triangulate,
)
from delaunay_image.errors import TriangulationError
from delaunay_image.models import Edge, Point2D, Triangle, orientation


def random_points(n, height, width, seed=0):
    rng = np.random.RandomState(seed)
    rows = rng.uniform(1.0, height - 2.0, size=n)
    cols = rng.uniform(1.0, width - 2.0, size=n)
    return [Point2D(float(r), float(c)) for r, c in zip(rows, cols)]


def pixel_grid(height, width):
    return [Point2D(float(r), float(c)) for r in range(height) for c in range(width)]


def random_pixels(n, height, width, seed=0):
    # row-major integer pixels, as the edge sampler emits them
    rng = np.random.RandomState(seed)
    flat = np.sort(rng.choice(height * width, size=n, replace=False))
    return [Point2D(float(i // width), float(i % width)) for i in flat]


def total_area(triangles):
    return sum(abs(orientation(*t.vertices)) / 2.0 for t in triangles)


# ----------------------------------------------------------------------
# Super structure
# ----------------------------------------------------------------------

def test_super_structure_covers_image():
    a, b, c, d = super_structure_corners(10, 20)
    assert (a, b, c, d) == (Point2D(0, 0), Point2D(9, 0), Point2D(9, 19), Point2D(0, 19))

    t1, t2 = create_super_structure(10, 20)
    assert t1 == Triangle(a, b, c)
    assert t2 == Triangle(a, c, d)
    assert t1.contains_edge(Edge(a, c)) and t2.contains_edge(Edge(a, c))
    assert total_area([t1, t2]) == pytest.approx(9 * 19)


def test_cavity_boundary_drops_shared_edges():
    a, b, c, d = super_structure_corners(10, 10)
    boundary = cavity_boundary(create_super_structure(10, 10))

    assert Edge(a, c) not in boundary
    assert set(boundary) == {Edge(a, b), Edge(b, c), Edge(c, d), Edge(d, a)}


# ----------------------------------------------------------------------
# Concrete scenarios
# ----------------------------------------------------------------------

def test_corner_points_reproduce_super_structure():
    corners = [Point2D(0, 0), Point2D(9, 0), Point2D(9, 9), Point2D(0, 9)]
    mesh = triangulate(corners, (10, 10), delete_border=False)

    assert len(mesh) == 2
    assert set(mesh) == set(create_super_structure(10, 10))


def test_empty_points_keep_super_structure():
    mesh = triangulate([], (12, 7), delete_border=False)
    assert list(mesh) == create_super_structure(12, 7)
    assert mesh.image_size == (12, 7)


def test_empty_points_with_border_removal_is_empty():
    mesh = triangulate([], (12, 7), delete_border=True)
    assert mesh.is_empty


# ----------------------------------------------------------------------
# Single insertion
# ----------------------------------------------------------------------

def test_single_interior_point_makes_a_fan():
    p = Point2D(4, 5)
    triangles = insert_point(create_super_structure(10, 10), p)

    assert len(triangles) == 4
    assert all(t.contains_vertex(p) for t in triangles)
    assert total_area(triangles) == pytest.approx(81.0)


def test_insert_point_does_not_modify_input():
    start = create_super_structure(10, 10)
    snapshot = list(start)
    insert_point(start, Point2D(3, 3))
    assert start == snapshot


def test_duplicate_point_is_skipped():
    once = triangulate([Point2D(3, 3)], (10, 10))
    twice = triangulate([Point2D(3, 3), Point2D(3, 3)], (10, 10))
    assert list(once) == list(twice)


def test_point_outside_every_circumcircle_is_ignored():
    mesh = triangulate([Point2D(50, 50)], (10, 10))
    assert set(mesh) == set(create_super_structure(10, 10))


def test_point_on_border_creates_no_zero_area_triangle():
    points = [Point2D(0, 5), Point2D(4, 4), Point2D(9, 3)]
    mesh = triangulate(points, (10, 10))

    assert all(not t.is_degenerate for t in mesh)
    assert total_area(mesh) == pytest.approx(81.0)
    assert all(count in (1, 2) for count in mesh.edge_counts().values())
    assert Point2D(0, 5) in mesh.vertices()


def test_non_finite_point_aborts_with_index():
    with pytest.raises(TriangulationError) as info:
        triangulate([Point2D(2, 2), Point2D(math.nan, 1)], (10, 10))
    assert info.value.point_index == 1
    assert info.value.stage == "triangulation"


# ----------------------------------------------------------------------
# Mesh invariants on a random point set
# ----------------------------------------------------------------------

def test_every_edge_shared_by_one_or_two_triangles():
    mesh = triangulate(random_points(60, 100, 80), (100, 80))

    counts = mesh.edge_counts()
    assert counts
    assert all(n in (1, 2) for n in counts.values())


def test_mesh_tiles_the_image_without_overlap():
    mesh = triangulate(random_points(60, 100, 80, seed=1), (100, 80))

    assert total_area(mesh) == pytest.approx(99 * 79)
    assert len(set(mesh)) == len(mesh)


def test_every_point_becomes_a_vertex():
    points = random_points(40, 64, 64, seed=2)
    mesh = triangulate(points, (64, 64))

    assert set(points) <= mesh.vertices()


def test_delaunay_property():
    points = random_points(40, 50, 50, seed=4)
    mesh = triangulate(points, (50, 50))
    vertices = mesh.vertices()

    for t in mesh:
        circle = t.circumcircle
        for v in vertices:
            if t.contains_vertex(v):
                continue
            d_row = v.row - circle.center.row
            d_col = v.col - circle.center.col
            assert d_row * d_row + d_col * d_col >= circle.radius_squared - 1e-6


# ----------------------------------------------------------------------
# Mesh invariants on integer pixel positions
# ----------------------------------------------------------------------

def test_full_pixel_grid():
    points = pixel_grid(12, 12)
    mesh = triangulate(points, (12, 12))

    assert all(n in (1, 2) for n in mesh.edge_counts().values())
    assert set(points) <= mesh.vertices()
    assert all(not t.is_degenerate for t in mesh)
    assert total_area(mesh) == pytest.approx(11 * 11)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_random_pixel_subset(seed):
    points = random_pixels(90, 30, 25, seed=seed)
    mesh = triangulate(points, (30, 25))

    assert all(n in (1, 2) for n in mesh.edge_counts().values())
    assert set(points) <= mesh.vertices()
    assert total_area(mesh) == pytest.approx(29 * 24)

    vertices = mesh.vertices()
    for t in mesh:
        circle = t.circumcircle
        for v in vertices:
            if t.contains_vertex(v):
                continue
            d_row = v.row - circle.center.row
            d_col = v.col - circle.center.col
            assert d_row * d_row + d_col * d_col >= circle.radius_squared - 1e-6


def test_border_removal_drops_corner_triangles():
    h, w = 60, 40
    corners = set(super_structure_corners(h, w))
    points = random_points(50, h, w, seed=5)

    full = triangulate(points, (h, w), delete_border=False)
    trimmed = triangulate(points, (h, w), delete_border=True)

    assert all(corners.isdisjoint(t.vertices) for t in trimmed)
    assert set(trimmed) <= set(full)
    assert list(trimmed) == remove_border_triangles(full, corners)
    assert len(trimmed) < len(full)


def test_triangulation_is_deterministic():
    points = random_points(30, 40, 40, seed=6)
    assert list(triangulate(points, (40, 40))) == list(triangulate(points, (40, 40)))
