"""
Detectors Package

Contains the processing stages of the low-poly pipeline:
- Edge-magnitude filters
- Edge point sampling
- Bowyer-Watson triangulation
"""

from .gradient import (
    blur_image,
    to_grayscale,
    sobel_magnitude,
    laplacian_magnitude,
    detect_edges,
)
from .edge_points import threshold_mask, downsample_points, sample_edge_points
from .bowyer_watson import (
    super_structure_corners,
    create_super_structure,
    cavity_boundary,
    insert_point,
    remove_border_triangles,
    triangulate,
)

__all__ = [
    "blur_image",
    "to_grayscale",
    "sobel_magnitude",
    "laplacian_magnitude",
    "detect_edges",
    "threshold_mask",
    "downsample_points",
    "sample_edge_points",
    "super_structure_corners",
    "create_super_structure",
    "cavity_boundary",
    "insert_point",
    "remove_border_triangles",
    "triangulate",
]
