"""
Visualization Tools

Provides drawing utilities for:
- Triangle meshes (filled / wireframe, color / grayscale)
- Sampled edge point masks
"""

from .draw_mesh import (
    create_canvas,
    sample_color,
    sample_intensity,
    fill_triangle,
    draw_wire_triangle,
    select_painter,
    render_mesh,
)
from .draw_points import build_edge_point_mask
from .save_outputs import save_rendering, save_edge_points

__all__ = [
    "create_canvas",
    "sample_color",
    "sample_intensity",
    "fill_triangle",
    "draw_wire_triangle",
    "select_painter",
    "render_mesh",
    "build_edge_point_mask",
    "save_rendering",
    "save_edge_points",
]
