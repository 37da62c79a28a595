"""
Delaunay Image Package

Turns a raster image into a low-poly rendering:

- Edge detection (Gaussian blur, grayscale, Sobel / Laplacian)
- Edge point sampling
- Bowyer-Watson Delaunay triangulation
- Mesh rendering (color / grayscale, filled / wireframe)
"""

__version__ = "1.0.0"

__all__ = [
    "config",
    "errors",
    "main",
    "pipeline",
    "detectors",
    "models",
    "utils",
    "visualization",
]
