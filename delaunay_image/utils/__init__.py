"""
Utility Functions

Provides image I/O helpers used by the pipeline.
"""

from .image_io import load_image, ensure_output_dir, save_image

__all__ = [
    "load_image",
    "ensure_output_dir",
    "save_image",
]
