"""
Edge point sampling.

This module provides:
    • threshold_mask(intensity, threshold)
    • downsample_points(points, max_points)
    • sample_edge_points(intensity, threshold, max_points)

Turns a gradient-magnitude image into the ordered point list fed to the
triangulator.
"""

import logging
import math
from typing import List, Sequence

import numpy as np

from delaunay_image.config import SAMPLE_OFFSET
from delaunay_image.errors import InvalidConfigurationError
from delaunay_image.models.point import Point2D

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
#  THRESHOLDING
# ----------------------------------------------------------------------

def threshold_mask(intensity: np.ndarray, threshold: int) -> np.ndarray:
    """
    Boolean mask of the pixels kept as edge points.

    Each uint8 sample is reinterpreted as a signed byte (128..255 wrap to
    -128..-1) and shifted by SAMPLE_OFFSET before the comparison:

        int8(sample) + 127 >= threshold

    So weak gradients (< 128) pass for threshold <= 127 + sample, while very
    strong ones wrap around and only pass for low thresholds.

    Parameters
    ----------
    intensity : np.ndarray
        2D uint8 gradient image, origin top-left.
    threshold : int
        Value in [0, 255].
    """
    if intensity.ndim != 2:
        raise InvalidConfigurationError(
            f"intensity map must be 2-dimensional, got shape {intensity.shape}",
            stage="edge sampling",
        )
    if intensity.dtype != np.uint8:
        raise InvalidConfigurationError(
            f"intensity map must be uint8, got {intensity.dtype}",
            stage="edge sampling",
        )
    if not 0 <= threshold <= 255:
        raise InvalidConfigurationError(
            f"threshold must be in [0, 255], got {threshold}",
            stage="edge sampling",
        )

    signed = intensity.view(np.int8).astype(np.int16)
    return signed + SAMPLE_OFFSET >= threshold


# ----------------------------------------------------------------------
#  DOWNSAMPLING
# ----------------------------------------------------------------------

def downsample_points(points: Sequence[Point2D], max_points: int) -> List[Point2D]:
    """
    Picks roughly `max_points` elements at a fixed real-valued stride.

        stride = len(points) / max_points
        keep points[floor(i)] for i = 0, stride, 2*stride, ... while i < len

    The stride is accumulated step by step, so the result length is
    ceil(len / stride) give or take floating-point rounding, not exactly
    max_points. Scan order is preserved.
    """
    if max_points < 1:
        raise InvalidConfigurationError(
            f"max points must be positive, got {max_points}",
            stage="edge sampling",
        )

    size = len(points)
    if size <= max_points:
        return list(points)

    stride = size / max_points
    sampled = []
    i = 0.0
    while i < size:
        sampled.append(points[math.floor(i)])
        i += stride

    return sampled


# ----------------------------------------------------------------------
#  FULL SAMPLER
# ----------------------------------------------------------------------

def sample_edge_points(intensity: np.ndarray, threshold: int, max_points: int) -> List[Point2D]:
    """
    Row-major scan of `intensity` for edge pixels, capped to about
    `max_points` points.

    Returns
    -------
    list[Point2D]
        (row, col) coordinates in scan order. Empty when nothing passes
        the threshold.
    """
    mask = threshold_mask(intensity, threshold)

    # np.argwhere walks the array in C (row-major) order
    all_points = [Point2D(float(r), float(c)) for r, c in np.argwhere(mask)]

    points = downsample_points(all_points, max_points)

    logger.debug(
        "Edge points: %d matched threshold %d, %d kept (cap %d)",
        len(all_points), threshold, len(points), max_points,
    )
    return points
