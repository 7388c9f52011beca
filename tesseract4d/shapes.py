import logging
import math
from dataclasses import dataclass, field
from typing import List, NamedTuple

import numpy as np

from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

VERTEX_COUNT = 16
EDGE_COUNT = 32


class Edge(NamedTuple):
    """Pair of indices into Tesseract.vertices, start < end."""
    start: int
    end: int

    @property
    def label(self) -> str:
        return f"Edge_{self.start}_{self.end}"


def generate_vertices(edge_length: float) -> np.ndarray:
    """
    Build the 16 corners of the hypercube as a (16, 4) float array.
    Bit k of the row index selects whether axis k (x, y, z, w) sits at
    edge_length or at 0, so x is the least significant bit.
    """
    vertices = np.array([
        [x, y, z, w] for w in [0, 1]
                     for z in [0, 1]
                     for y in [0, 1]
                     for x in [0, 1]
    ], dtype=float)
    return vertices * edge_length


def generate_edges(vertices: np.ndarray) -> List[Edge]:
    """Pair up every two vertices that differ in exactly one coordinate."""
    edges = []
    n = len(vertices)
    for i in range(n):
        for j in range(i + 1, n):
            diff = vertices[i] - vertices[j]
            # both corners come from {0, edge_length}, exact comparison is fine
            if np.count_nonzero(diff != 0) == 1:
                edges.append(Edge(i, j))
    return edges


@dataclass
class Tesseract:
    edge_length: float
    vertices: np.ndarray
    edges: List[Edge] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def reset(self):
        """Put the vertices back at their unrotated positions. Edges are untouched."""
        self.vertices[:] = generate_vertices(self.edge_length)

    def norms(self) -> np.ndarray:
        """Distance of each vertex from the origin."""
        return np.linalg.norm(self.vertices, axis=1)


def build_tesseract(edge_length: float) -> Tesseract:
    if not math.isfinite(edge_length):
        raise InvalidConfiguration(f"edge_length must be finite, got {edge_length!r}")

    edge_length = float(edge_length)
    vertices = generate_vertices(edge_length)
    # A zero edge_length collapses every corner onto the origin, so no pair
    # differs anywhere and the edge list comes out empty.
    edges = generate_edges(vertices)
    logger.debug("generated %d vertices and %d edges (edge_length=%s)",
                 len(vertices), len(edges), edge_length)
    return Tesseract(edge_length, vertices, edges)
