"""
Data Models

Defines the geometry value types shared by every stage:
- Point2D
- Edge
- CircumCircle
- Triangle
- Mesh
- ColorMode / RenderStyle
"""

from .point import Point2D
from .edge import Edge
from .circumcircle import CircumCircle, circumcircle, in_circle, is_collinear, orientation
from .triangle import Triangle
from .mesh import Mesh
from .style import ColorMode, RenderStyle

__all__ = [
    "Point2D",
    "Edge",
    "CircumCircle",
    "circumcircle",
    "in_circle",
    "is_collinear",
    "orientation",
    "Triangle",
    "Mesh",
    "ColorMode",
    "RenderStyle",
]
