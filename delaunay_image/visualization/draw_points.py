"""
Debug overlay for the sampled edge points.
"""

from typing import Iterable, Tuple

import numpy as np

from delaunay_image.models.point import Point2D


def build_edge_point_mask(points: Iterable[Point2D], shape: Tuple[int, ...]) -> np.ndarray:
    """
    Binary uint8 image: 255 at every sampled point, 0 elsewhere.

    Only the first two entries of `shape` (height, width) are used. Points
    falling outside the image are ignored.
    """
    h, w = shape[:2]
    mask = np.zeros((h, w), dtype=np.uint8)

    for p in points:
        r, c = int(p.row), int(p.col)
        if 0 <= r < h and 0 <= c < w:
            mask[r, c] = 255

    return mask
