"""
Centralized output-saving utilities for the low-poly pipeline.

This module provides:
    • save_rendering(path, image)
    • save_edge_points(path, points, shape)

Uses the draw modules to build images and utils.image_io for filesystem
handling.
"""

from typing import List, Tuple

import numpy as np

from delaunay_image.models.point import Point2D
from delaunay_image.utils.image_io import save_image
from delaunay_image.visualization.draw_points import build_edge_point_mask


def save_rendering(path: str, image: np.ndarray):
    """
    Saves the final low-poly image.
    """
    save_image(path, image)


def save_edge_points(path: str, points: List[Point2D], shape: Tuple[int, ...]):
    """
    Projects the sampled points onto a black/white mask and saves it.
    """
    save_image(path, build_edge_point_mask(points, shape))
