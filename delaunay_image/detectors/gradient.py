"""
Edge-magnitude filters.

This module provides:
    • blur_image(image, kernel_size)
    • to_grayscale(image)
    • sobel_magnitude(gray, kernel_size)
    • laplacian_magnitude(gray, kernel_size)
    • detect_edges(image, algorithm, blur_kernel_size, sobel_kernel_size)

All functions return new uint8 arrays and leave their input untouched.
"""

import logging

import cv2
import numpy as np

from delaunay_image.config import EDGE_DETECTORS
from delaunay_image.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
#  PREPROCESSING
# ----------------------------------------------------------------------

def blur_image(image: np.ndarray, kernel_size: int) -> np.ndarray:
    """Gaussian blur with a square kernel, sigma derived from the size."""
    return cv2.GaussianBlur(image, (kernel_size, kernel_size), 0)


def to_grayscale(image: np.ndarray) -> np.ndarray:
    if image.ndim == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    return image.copy()


# ----------------------------------------------------------------------
#  GRADIENT MAGNITUDE
# ----------------------------------------------------------------------

def sobel_magnitude(gray: np.ndarray, kernel_size: int = 3) -> np.ndarray:
    """
    |dI/dx| and |dI/dy| (16-bit Sobel, then saturated to uint8) blended
    with equal weights.
    """
    grad_x = cv2.Sobel(gray, cv2.CV_16S, 1, 0, ksize=kernel_size, scale=1, delta=0,
                       borderType=cv2.BORDER_DEFAULT)
    grad_y = cv2.Sobel(gray, cv2.CV_16S, 0, 1, ksize=kernel_size, scale=1, delta=0,
                       borderType=cv2.BORDER_DEFAULT)

    abs_x = cv2.convertScaleAbs(grad_x)
    abs_y = cv2.convertScaleAbs(grad_y)

    return cv2.addWeighted(abs_x, 0.5, abs_y, 0.5, 0)


def laplacian_magnitude(gray: np.ndarray, kernel_size: int = 3) -> np.ndarray:
    """
    16-bit Laplacian saturated to uint8: negative responses clip to 0.
    """
    lap = cv2.Laplacian(gray, cv2.CV_16S, ksize=kernel_size, scale=1, delta=0,
                        borderType=cv2.BORDER_DEFAULT)
    return np.clip(lap, 0, 255).astype(np.uint8)


# ----------------------------------------------------------------------
#  DISPATCH
# ----------------------------------------------------------------------

def detect_edges(image: np.ndarray, algorithm: str = "sobel",
                 blur_kernel_size: int = 35, sobel_kernel_size: int = 3) -> np.ndarray:
    """
    Blur -> grayscale -> gradient magnitude.

    Parameters
    ----------
    image : np.ndarray
        BGR or single-channel image.
    algorithm : str
        One of config.EDGE_DETECTORS.

    Returns
    -------
    np.ndarray
        2D uint8 intensity map with the same height and width as `image`.
    """
    if algorithm not in EDGE_DETECTORS:
        raise InvalidConfigurationError(
            f"invalid edge detection algorithm {algorithm!r}",
            stage="edge detection",
        )

    blurred = blur_image(image, blur_kernel_size)
    logger.debug("Applied blur to original image (kernel %d)", blur_kernel_size)

    gray = to_grayscale(blurred)
    logger.debug("Grayscale image created from blurred image")

    if algorithm == "sobel":
        edges = sobel_magnitude(gray, sobel_kernel_size)
    else:
        edges = laplacian_magnitude(gray, sobel_kernel_size)
    logger.debug("%s filter applied to grayscale image", algorithm.capitalize())

    return edges
