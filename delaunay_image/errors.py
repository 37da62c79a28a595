"""
Exception hierarchy for the low-poly pipeline.

Every error carries the name of the pipeline stage it came from, so the
command line can report a single message naming the failing stage.
"""

from typing import Optional


class DelaunayError(Exception):
    """Base class for all pipeline errors."""

    default_stage = "pipeline"

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.stage = stage or self.default_stage


class InvalidConfigurationError(DelaunayError):
    default_stage = "configuration"


class DegenerateGeometryError(DelaunayError):
    """Raised for collinear triples and zero-length edges."""

    default_stage = "geometry"


class TriangulationError(DelaunayError):
    default_stage = "triangulation"

    def __init__(self, message: str, point_index: int):
        super().__init__(f"{message} (point index {point_index})")
        self.point_index = point_index


class ImageIOError(DelaunayError):
    default_stage = "image io"
