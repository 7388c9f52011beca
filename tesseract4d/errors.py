"""Exceptions raised by the tesseract engine."""


class TesseractError(Exception):
    """Base class for engine errors."""


class InvalidConfiguration(TesseractError, ValueError):
    """Raised when a parameter cannot produce well-formed geometry."""


class SingularProjection(TesseractError):
    """Raised when a vertex sits exactly on the projection pole (w == -1)."""

    def __init__(self, vertex_index, edge=None):
        self.vertex_index = vertex_index
        self.edge = edge
        message = f"vertex {vertex_index} has w == -1, projection factor is undefined"
        if edge is not None:
            message += f" (edge {edge.label})"
        super().__init__(message)


class EngineNotReady(RuntimeError):
    """Raised when a frame operation is requested before initialize()."""
