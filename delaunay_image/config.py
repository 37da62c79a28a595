"""
Configuration for the low-poly image generator.

Holds the default value of every tunable parameter. Modules should read values
using the get_active_params() function, which merges caller overrides
(usually the parsed command line) into the defaults and validates the result
before any image work starts.
"""

from delaunay_image.errors import InvalidConfigurationError


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT = ""
OUTPUT = ""
OUTPUT_EDGE_POINTS = ""


# ---------------------------------------------------------------
# EDGE DETECTION
# ---------------------------------------------------------------

BLUR_KERNEL_SIZE = 35
EDGE_DETECTION = "sobel"           # "sobel" | "laplacian"
SOBEL_KERNEL_SIZE = 3

EDGE_DETECTORS = ("sobel", "laplacian")
SOBEL_KERNEL_SIZES = (1, 3, 5, 7)


# ---------------------------------------------------------------
# EDGE POINT SAMPLING
# ---------------------------------------------------------------

THRESHOLD = 150
MAX_POINTS = 1000

# Gradient bytes are read as signed and shifted by this offset before the
# threshold comparison.
SAMPLE_OFFSET = 127


# ---------------------------------------------------------------
# TRIANGULATION
# ---------------------------------------------------------------

DELETE_BORDER = False

# |2 * signed area| at or below this counts as collinear
COLLINEAR_TOLERANCE = 1e-9

# Circle tests closer than this (relative to r²) are decided exactly
INCIRCLE_TOLERANCE = 1e-9


# ---------------------------------------------------------------
# RENDERING
# ---------------------------------------------------------------

GRAYSCALE = False
WIREFRAME = False
THICKNESS = 1

BACKGROUND_COLOR = 255             # white, broadcast to every channel


# ---------------------------------------------------------------
# DIAGNOSTICS
# ---------------------------------------------------------------

SHOW_EDGE_POINTS = False


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def _defaults():
    return {
        "INPUT": INPUT,
        "OUTPUT": OUTPUT,
        "OUTPUT_EDGE_POINTS": OUTPUT_EDGE_POINTS,
        "BLUR_KERNEL_SIZE": BLUR_KERNEL_SIZE,
        "EDGE_DETECTION": EDGE_DETECTION,
        "SOBEL_KERNEL_SIZE": SOBEL_KERNEL_SIZE,
        "THRESHOLD": THRESHOLD,
        "MAX_POINTS": MAX_POINTS,
        "DELETE_BORDER": DELETE_BORDER,
        "GRAYSCALE": GRAYSCALE,
        "WIREFRAME": WIREFRAME,
        "THICKNESS": THICKNESS,
        "SHOW_EDGE_POINTS": SHOW_EDGE_POINTS,
    }


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def validate_params(params):
    """
    Raises InvalidConfigurationError for the first out-of-range value.
    """
    threshold = params["THRESHOLD"]
    if not _is_int(threshold) or not 0 <= threshold <= 255:
        raise InvalidConfigurationError(
            f"threshold must be an integer in [0, 255], got {threshold!r}"
        )

    max_points = params["MAX_POINTS"]
    if not _is_int(max_points) or max_points < 1:
        raise InvalidConfigurationError(
            f"max points must be a positive integer, got {max_points!r}"
        )

    thickness = params["THICKNESS"]
    if not _is_int(thickness) or thickness < 1:
        raise InvalidConfigurationError(
            f"thickness must be an integer >= 1, got {thickness!r}"
        )

    blur = params["BLUR_KERNEL_SIZE"]
    if not _is_int(blur) or blur < 1 or blur % 2 == 0:
        raise InvalidConfigurationError(
            f"blur kernel size must be a positive odd integer, got {blur!r}"
        )

    if params["EDGE_DETECTION"] not in EDGE_DETECTORS:
        raise InvalidConfigurationError(
            f"invalid edge detection algorithm {params['EDGE_DETECTION']!r}, "
            f"expected one of {', '.join(EDGE_DETECTORS)}"
        )

    if params["SOBEL_KERNEL_SIZE"] not in SOBEL_KERNEL_SIZES:
        raise InvalidConfigurationError(
            f"sobel kernel size must be one of {SOBEL_KERNEL_SIZES}, "
            f"got {params['SOBEL_KERNEL_SIZE']!r}"
        )

    if params["SHOW_EDGE_POINTS"] and not params["OUTPUT_EDGE_POINTS"]:
        raise InvalidConfigurationError(
            "an output path is required when showing edge points"
        )


def get_active_params(overrides=None):
    """
    Returns the active set of parameters:
    - the defaults above, updated with `overrides`
    - plus the derived COLOR_MODE / RENDER_STYLE used by the renderer

    Unknown override keys are rejected.
    """
    base = _defaults()

    if overrides:
        unknown = sorted(set(overrides) - set(base))
        if unknown:
            raise InvalidConfigurationError(
                f"unknown configuration keys: {', '.join(unknown)}"
            )
        base.update(overrides)

    validate_params(base)

    base["COLOR_MODE"] = "grayscale" if base["GRAYSCALE"] else "color"
    base["RENDER_STYLE"] = "wireframe" if base["WIREFRAME"] else "fill"

    return base
