"""Command-line interface."""
import sys

from delaunay_image.main import main

if __name__ == "__main__":
    sys.exit(main())
