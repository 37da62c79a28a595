from enum import Enum


class ColorMode(str, Enum):
    COLOR = "color"
    GRAYSCALE = "grayscale"


class RenderStyle(str, Enum):
    FILL = "fill"
    WIREFRAME = "wireframe"
