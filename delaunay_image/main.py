import argparse
import logging
import sys

from delaunay_image import config
from delaunay_image.config import get_active_params
from delaunay_image.errors import DelaunayError
from delaunay_image.logging_config import setup_logging
from delaunay_image.pipeline import generate

logger = logging.getLogger(__name__)


def build_parser():
    p = argparse.ArgumentParser(
        prog="delaunay-image",
        description="Low-poly rendering of an image by Delaunay triangulation of its edge points",
    )
    p.add_argument("-i", "--input", required=True, help="Input image path")
    p.add_argument("-o", "--output", required=True, help="Output image path")
    p.add_argument("-b", "--blur-kernel-size", type=int, default=config.BLUR_KERNEL_SIZE,
                   help="Gaussian blur kernel size (positive, odd)")
    p.add_argument("-t", "--threshold", type=int, default=config.THRESHOLD,
                   help="Edge threshold in [0, 255]")
    p.add_argument("-e", "--edge-detection", choices=config.EDGE_DETECTORS,
                   default=config.EDGE_DETECTION, help="Edge detection filter")
    p.add_argument("-k", "--sobel-kernel-size", type=int, default=config.SOBEL_KERNEL_SIZE,
                   help="Sobel / Laplacian kernel size (1, 3, 5 or 7)")
    p.add_argument("-m", "--max-points", type=int, default=config.MAX_POINTS,
                   help="Maximum number of edge points to triangulate")
    p.add_argument("-g", "--grayscale", action="store_true", help="Render in grayscale")
    p.add_argument("-d", "--delete-border", action="store_true",
                   help="Remove triangles touching the image corners")
    p.add_argument("-s", "--show-edge-points", metavar="PATH", default=None,
                   help="Also save the sampled edge points as a black/white mask")
    p.add_argument("-w", "--wireframe", action="store_true",
                   help="Draw triangle outlines instead of filling them")
    p.add_argument("--thickness", type=int, default=config.THICKNESS,
                   help="Line thickness for wireframe rendering")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    p.add_argument("--log-file", default=None, help="Also write the log to this file")
    return p


def params_from_args(args):
    return get_active_params({
        "INPUT": args.input,
        "OUTPUT": args.output,
        "BLUR_KERNEL_SIZE": args.blur_kernel_size,
        "THRESHOLD": args.threshold,
        "EDGE_DETECTION": args.edge_detection,
        "SOBEL_KERNEL_SIZE": args.sobel_kernel_size,
        "MAX_POINTS": args.max_points,
        "GRAYSCALE": args.grayscale,
        "DELETE_BORDER": args.delete_border,
        "SHOW_EDGE_POINTS": args.show_edge_points is not None,
        "OUTPUT_EDGE_POINTS": args.show_edge_points or "",
        "WIREFRAME": args.wireframe,
        "THICKNESS": args.thickness,
    })


def main(argv=None):
    """
    Main entry point:
      - Parses and validates arguments
      - Runs the pipeline on one image
      - Reports a failing stage with a single error line (exit code 1)
    """
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        params = params_from_args(args)
        logger.debug("Process started in verbose mode")
        generate(params)
    except DelaunayError as exc:
        logger.error("%s failed: %s", exc.stage, exc.message)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
