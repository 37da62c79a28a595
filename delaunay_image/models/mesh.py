from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, Set, Tuple

from delaunay_image.models.edge import Edge
from delaunay_image.models.point import Point2D
from delaunay_image.models.triangle import Triangle


@dataclass(frozen=True)
class Mesh:
    """
    Final output of the triangulator, consumed read-only by the renderer.

    Triangles keep the order in which the triangulator produced them; the
    renderer paints them in that order.
    """

    triangles: Tuple[Triangle, ...] = field(default_factory=tuple)
    image_size: Tuple[int, int] = (0, 0)    # (height, width)

    def __len__(self):
        return len(self.triangles)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self.triangles)

    @property
    def is_empty(self) -> bool:
        return not self.triangles

    def vertices(self) -> Set[Point2D]:
        return {v for t in self.triangles for v in t.vertices}

    def edge_counts(self) -> Counter:
        """
        Number of triangles referencing each edge. In a valid mesh every
        count is 1 (boundary) or 2 (interior).
        """
        counts: Counter = Counter()
        for t in self.triangles:
            counts.update(t.edges())
        return counts
