"""
End-to-end low-poly pipeline.

build_low_poly() is the pure part (array in, array out); generate() wraps it
with loading and saving.
"""

import logging
from dataclasses import dataclass
from typing import List

import numpy as np

from delaunay_image.config import get_active_params
from delaunay_image.detectors.bowyer_watson import triangulate
from delaunay_image.detectors.edge_points import sample_edge_points
from delaunay_image.detectors.gradient import detect_edges
from delaunay_image.models.mesh import Mesh
from delaunay_image.models.point import Point2D
from delaunay_image.utils.image_io import load_image
from delaunay_image.visualization.draw_mesh import render_mesh
from delaunay_image.visualization.save_outputs import save_edge_points, save_rendering

logger = logging.getLogger(__name__)


@dataclass
class LowPolyResult:
    edges: np.ndarray
    points: List[Point2D]
    mesh: Mesh
    image: np.ndarray


def build_low_poly(image: np.ndarray, params=None) -> LowPolyResult:
    """
    Runs the in-memory stages for one image:
      1. Edge detection (blur, grayscale, Sobel/Laplacian)
      2. Edge point sampling
      3. Bowyer-Watson triangulation
      4. Rendering

    `params` is the dict returned by get_active_params(); defaults are used
    when omitted.
    """
    if params is None:
        params = get_active_params()

    h, w = image.shape[:2]

    # ------------------------------
    # STEP 1: EDGE DETECTION
    # ------------------------------
    edges = detect_edges(
        image,
        algorithm=params["EDGE_DETECTION"],
        blur_kernel_size=params["BLUR_KERNEL_SIZE"],
        sobel_kernel_size=params["SOBEL_KERNEL_SIZE"],
    )
    logger.info("Edges detected with %s filter", params["EDGE_DETECTION"])

    # ------------------------------
    # STEP 2: EDGE POINTS
    # ------------------------------
    points = sample_edge_points(edges, params["THRESHOLD"], params["MAX_POINTS"])
    if not points:
        logger.warning("No edge points above threshold %d; mesh will only "
                       "contain the image border", params["THRESHOLD"])
    logger.info("Edge points calculated: %d", len(points))

    # ------------------------------
    # STEP 3: TRIANGULATION
    # ------------------------------
    mesh = triangulate(points, (h, w), delete_border=params["DELETE_BORDER"])
    logger.info("Triangulation finished! Mesh created with %d triangles", len(mesh))

    # ------------------------------
    # STEP 4: RENDER
    # ------------------------------
    rendered = render_mesh(
        mesh,
        image,
        color_mode=params["COLOR_MODE"],
        style=params["RENDER_STYLE"],
        thickness=params["THICKNESS"],
    )

    return LowPolyResult(edges=edges, points=points, mesh=mesh, image=rendered)


def generate(params) -> LowPolyResult:
    """
    Loads params["INPUT"], builds the low-poly image and writes it to
    params["OUTPUT"]. The edge point mask is written to
    params["OUTPUT_EDGE_POINTS"] when SHOW_EDGE_POINTS is set.

    Nothing is written unless every in-memory stage succeeded, and the
    mask is only written once the main output has been saved.
    """
    image = load_image(params["INPUT"])
    logger.info("Image loaded from location: %s", params["INPUT"])

    result = build_low_poly(image, params)

    save_rendering(params["OUTPUT"], result.image)
    logger.info("Output saved: %s", params["OUTPUT"])

    if params["SHOW_EDGE_POINTS"]:
        save_edge_points(params["OUTPUT_EDGE_POINTS"], result.points, image.shape)
        logger.info("Edge points saved: %s", params["OUTPUT_EDGE_POINTS"])

    return result
