"""Rotating 4D hypercube: topology, rotation and projection to 3D line segments."""

from .config import EngineConfig
from .engine import (
    Clock,
    EngineState,
    Renderer,
    TesseractEngine,
    advance,
    initialize,
    project,
)
from .errors import EngineNotReady, InvalidConfiguration, SingularProjection, TesseractError
from .projection import ProjectedSegment, SegmentSequence
from .shapes import Edge, Tesseract

__all__ = [
    "EngineConfig",
    "Clock",
    "EngineState",
    "Renderer",
    "TesseractEngine",
    "advance",
    "initialize",
    "project",
    "EngineNotReady",
    "InvalidConfiguration",
    "SingularProjection",
    "TesseractError",
    "ProjectedSegment",
    "SegmentSequence",
    "Edge",
    "Tesseract",
]
