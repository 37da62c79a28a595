"""
Rasterization of a triangle mesh.

This module provides:
    • create_canvas(source)
    • sample_color(source, triangle)
    • sample_intensity(source, triangle, channels)
    • fill_triangle(image, vertices, color)
    • draw_wire_triangle(image, vertices, color, thickness)
    • select_painter(color_mode, style, thickness)
    • render_mesh(mesh, source, color_mode, style, thickness)

Vertices handed to OpenCV are (x, y) = (col, row) integer pixel positions.
"""

from typing import Callable, Dict, List, Tuple, Union

import cv2
import numpy as np

from delaunay_image.config import BACKGROUND_COLOR
from delaunay_image.errors import InvalidConfigurationError
from delaunay_image.models.mesh import Mesh
from delaunay_image.models.style import ColorMode, RenderStyle
from delaunay_image.models.triangle import Triangle

Vertices = List[Tuple[int, int]]
Painter = Callable[[np.ndarray, Triangle, np.ndarray], None]


# ---------------------------------------------------------------------
#  CANVAS & COLOR SAMPLING
# ---------------------------------------------------------------------

def prepare_source(source: np.ndarray, color_mode: ColorMode) -> np.ndarray:
    """
    Grayscale rendering samples a single channel: BGR sources are converted.
    """
    if color_mode == ColorMode.GRAYSCALE and source.ndim == 3:
        return cv2.cvtColor(source, cv2.COLOR_BGR2GRAY)
    return source


def create_canvas(source: np.ndarray) -> np.ndarray:
    """
    Blank image with the size, dtype and channel count of `source`,
    filled with BACKGROUND_COLOR.
    """
    return np.full_like(source, BACKGROUND_COLOR)


def channel_count(image: np.ndarray) -> int:
    return 1 if image.ndim == 2 else image.shape[2]


def triangle_vertices(triangle: Triangle) -> Vertices:
    """(row, col) -> (x, y), truncated to integer pixels."""
    return [tuple(int(v) for v in p.to_xy()) for p in triangle.vertices]


def sample_color(source: np.ndarray, triangle: Triangle) -> Tuple[int, ...]:
    """
    Color of `source` at the truncated centroid of `triangle`.

    A single sample, not an area average.
    """
    center = triangle.centroid()
    pixel = source[int(center.row), int(center.col)]
    if np.ndim(pixel) == 0:
        return (int(pixel),)
    return tuple(int(c) for c in pixel)


def sample_intensity(source: np.ndarray, triangle: Triangle, channels: int) -> Tuple[int, ...]:
    """
    Single-channel sample of `source`, repeated over `channels` so it paints
    as a neutral gray on a multi-channel canvas.
    """
    return sample_color(source, triangle)[:1] * channels


# ---------------------------------------------------------------------
#  PRIMITIVES
# ---------------------------------------------------------------------

def fill_triangle(image: np.ndarray, vertices: Vertices, color: Tuple[int, ...]):
    pts = np.array(vertices, dtype=np.int32)
    cv2.fillConvexPoly(image, pts, color, lineType=cv2.LINE_8, shift=0)


def draw_wire_triangle(image: np.ndarray, vertices: Vertices,
                       color: Tuple[int, ...], thickness: int = 1):
    """
    Strokes the three sides of a triangle (modified in-place).
    """
    a, b, c = vertices
    cv2.line(image, a, b, color, thickness)
    cv2.line(image, b, c, color, thickness)
    cv2.line(image, c, a, color, thickness)


# ---------------------------------------------------------------------
#  STYLE DISPATCH
# ---------------------------------------------------------------------

def _color_fill_painter(thickness: int) -> Painter:
    def paint(image, triangle, source):
        fill_triangle(image, triangle_vertices(triangle), sample_color(source, triangle))
    return paint


def _color_wire_painter(thickness: int) -> Painter:
    def paint(image, triangle, source):
        draw_wire_triangle(image, triangle_vertices(triangle),
                           sample_color(source, triangle), thickness)
    return paint


def _gray_fill_painter(thickness: int) -> Painter:
    def paint(image, triangle, source):
        color = sample_intensity(source, triangle, channel_count(image))
        fill_triangle(image, triangle_vertices(triangle), color)
    return paint


def _gray_wire_painter(thickness: int) -> Painter:
    def paint(image, triangle, source):
        color = sample_intensity(source, triangle, channel_count(image))
        draw_wire_triangle(image, triangle_vertices(triangle), color, thickness)
    return paint


PAINTERS: Dict[Tuple[ColorMode, RenderStyle], Callable[[int], Painter]] = {
    (ColorMode.COLOR, RenderStyle.FILL): _color_fill_painter,
    (ColorMode.COLOR, RenderStyle.WIREFRAME): _color_wire_painter,
    (ColorMode.GRAYSCALE, RenderStyle.FILL): _gray_fill_painter,
    (ColorMode.GRAYSCALE, RenderStyle.WIREFRAME): _gray_wire_painter,
}


def select_painter(color_mode: Union[ColorMode, str], style: Union[RenderStyle, str],
                   thickness: int = 1) -> Painter:
    """
    Resolves a (color mode, style) pair into one painting function.
    """
    try:
        key = (ColorMode(color_mode), RenderStyle(style))
    except ValueError as exc:
        raise InvalidConfigurationError(str(exc), stage="rendering") from exc

    if thickness < 1:
        raise InvalidConfigurationError(
            f"thickness must be >= 1, got {thickness}", stage="rendering"
        )

    return PAINTERS[key](thickness)


# ---------------------------------------------------------------------
#  FULL RENDER
# ---------------------------------------------------------------------

def render_mesh(mesh: Mesh, source: np.ndarray,
                color_mode: Union[ColorMode, str] = ColorMode.COLOR,
                style: Union[RenderStyle, str] = RenderStyle.FILL,
                thickness: int = 1) -> np.ndarray:
    """
    Paints every triangle of `mesh` onto a fresh canvas.

    Args:
        mesh: triangles in (row, col) pixel coordinates
        source: BGR or single-channel image the colors are sampled from
        color_mode: "color" samples every source channel, "grayscale"
            samples the gray intensity and paints it on all channels
        style: "fill" or "wireframe"
        thickness: line width for wireframe rendering

    Returns:
        An image with the size, dtype and channels of `source`. Triangles
        are drawn in mesh order, later ones over earlier ones.
    """
    paint = select_painter(color_mode, style, thickness)

    canvas = create_canvas(source)
    sampled = prepare_source(source, ColorMode(color_mode))

    for triangle in mesh:
        paint(canvas, triangle, sampled)

    return canvas
