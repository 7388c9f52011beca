"""Setup-once, update-per-frame driver for a rotating tesseract.

initialize() builds the geometry, advance() rotates it in place and
project() produces the 32 3D segments the renderer draws. TesseractEngine
wraps the three calls in a two-state lifecycle and feeds a Renderer from a
Clock once per frame.
"""

import logging
from enum import Enum
from typing import Optional, Protocol, Sequence

from .errors import EngineNotReady, SingularProjection
from .manipulate import frame_angle, rotate_vertices
from .projection import ProjectedSegment, SegmentSequence, SingularHandler
from .shapes import Edge, Tesseract, build_tesseract

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def draw(self, segments: Sequence[ProjectedSegment]) -> None:
        ...


class Clock(Protocol):
    def tick(self) -> float:
        """Return the time elapsed since the previous frame, in seconds."""
        ...


def initialize(edge_length: float) -> Tesseract:
    return build_tesseract(edge_length)


def advance(tesseract: Tesseract, rotation_speed: float, elapsed_time: float):
    """Rotate every vertex by rotation_speed * elapsed_time degrees, in place."""
    rotate_vertices(tesseract.vertices, frame_angle(rotation_speed, elapsed_time))


def project(tesseract: Tesseract, on_singular: Optional[SingularHandler] = None) -> SegmentSequence:
    return SegmentSequence(tesseract, on_singular)


class EngineState(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class TesseractEngine:
    def __init__(self, rotation_speed: float = 20.0):
        self.rotation_speed = rotation_speed
        self.state = EngineState.UNINITIALIZED
        self._tesseract: Optional[Tesseract] = None

    @property
    def tesseract(self) -> Tesseract:
        self._require_ready("tesseract")
        return self._tesseract

    def initialize(self, edge_length: float) -> Tesseract:
        self._tesseract = initialize(edge_length)
        if self.state is not EngineState.READY:
            logger.info("engine %s -> %s", self.state.value, EngineState.READY.value)
        self.state = EngineState.READY
        return self._tesseract

    def advance(self, elapsed_time: float):
        self._require_ready("advance")
        advance(self._tesseract, self.rotation_speed, elapsed_time)

    def project(self, on_singular: Optional[SingularHandler] = None) -> SegmentSequence:
        self._require_ready("project")
        return project(self._tesseract, on_singular)

    def step(self, elapsed_time: float) -> SegmentSequence:
        """Rotate for one frame and return the segments to draw, skipping singular edges."""
        self.advance(elapsed_time)
        return self.project(on_singular=self._skip_singular)

    def run_frame(self, clock: Clock, renderer: Renderer):
        segments = self.step(clock.tick())
        renderer.draw(list(segments))

    def _skip_singular(self, edge: Edge, error: SingularProjection):
        logger.warning("skipping %s this frame: %s", edge.label, error)
        return None

    def _require_ready(self, operation: str):
        if self.state is not EngineState.READY:
            raise EngineNotReady(f"{operation}() called before initialize()")
