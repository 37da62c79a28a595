"""
Image I/O utilities for the low-poly pipeline.

This module provides:
    • load_image(path)
    • ensure_output_dir(path)
    • save_image(path, image)

Handles all filesystem interaction in one place so the core stages stay free
of file and codec dependencies.
"""

import os

import cv2
import numpy as np

from delaunay_image.errors import ImageIOError


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def load_image(path: str) -> np.ndarray:
    """
    Loads a BGR color image.

    Raises:
        ImageIOError: if the file is missing or cannot be decoded.
    """
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None or img.size == 0:
        raise ImageIOError(f"Input image could not be loaded from location: {path}",
                           stage="loading")
    return img


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists. An empty path means the
    current directory.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    try:
        ensure_output_dir(os.path.dirname(path))
        ok = cv2.imwrite(path, image)
    except (OSError, cv2.error) as exc:
        raise ImageIOError(f"Image could not be saved on location: {path} ({exc})",
                           stage="saving") from exc

    if not ok:
        raise ImageIOError(f"Image could not be saved on location: {path}", stage="saving")
