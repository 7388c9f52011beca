"""Stereographic-style 4D -> 3D projection of tesseract vertices and edges.

Each vertex (x, y, z, w) maps to (x, y, z) * edge_length / (1 + w). The map
blows up as w approaches -1; values close to the pole legitimately produce
huge or non-finite coordinates, and only w == -1 exactly is reported as
SingularProjection.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional

import numpy as np

from .errors import SingularProjection
from .shapes import Edge, Tesseract

SingularHandler = Callable[[Edge, SingularProjection], Optional["ProjectedSegment"]]


@dataclass(frozen=True)
class ProjectedSegment:
    """3D endpoints of one tesseract edge for the current frame."""
    start: np.ndarray
    end: np.ndarray
    edge: Edge
    edge_index: int


def projection_factor(w: float) -> float:
    if w == -1:
        raise ZeroDivisionError("w == -1")
    with np.errstate(divide="ignore", over="ignore"):
        return np.float64(1.0) / (np.float64(1.0) + np.float64(w))


def project_point(vertex: np.ndarray, edge_length: float, vertex_index: Optional[int] = None) -> np.ndarray:
    """Project a single 4D vertex to 3D."""
    try:
        factor = projection_factor(vertex[3])
    except ZeroDivisionError:
        raise SingularProjection(vertex_index) from None
    with np.errstate(over="ignore", invalid="ignore"):
        return np.asarray(vertex[:3], dtype=float) * factor * edge_length


def project_edge(tesseract: Tesseract, edge_index: int) -> ProjectedSegment:
    edge = tesseract.edges[edge_index]
    points = []
    for index in edge:
        try:
            points.append(project_point(tesseract.vertices[index], tesseract.edge_length, index))
        except SingularProjection:
            raise SingularProjection(index, edge) from None
    return ProjectedSegment(points[0], points[1], edge, edge_index)


class SegmentSequence:
    """
    Lazily projected edges of a tesseract, in edge-list order.

    Nothing is cached: every iteration reads the tesseract's current
    vertices, so the same sequence can be walked again after the next
    rotation step.
    """

    def __init__(self, tesseract: Tesseract, on_singular: Optional[SingularHandler] = None):
        self.tesseract = tesseract
        self.on_singular = on_singular

    def __len__(self) -> int:
        return len(self.tesseract.edges)

    def __iter__(self) -> Iterator[ProjectedSegment]:
        for i in range(len(self.tesseract.edges)):
            try:
                segment = project_edge(self.tesseract, i)
            except SingularProjection as e:
                if self.on_singular is None:
                    raise
                segment = self.on_singular(e.edge, e)
                if segment is None:
                    continue
            yield segment

    def __getitem__(self, edge_index: int) -> ProjectedSegment:
        return project_edge(self.tesseract, edge_index)
