"""Exception types raised by the pipe geometry core.

``GeometryError`` is the only domain failure: the waypoints or radius
describe a pipe that cannot be bent. Hosts catch it and show the message to
an operator. ``InvalidInputError`` marks a caller mistake (wrong point count,
non-finite coordinates, non-positive radius) and is meant to propagate.
"""

from __future__ import annotations

from datetime import datetime, timezone


class GeometryError(Exception):
    """Raised when waypoints cannot be turned into a bendable pipe.

    Attributes:
        message: Human-readable description of the failure
        timestamp: When the error was created (UTC)
        index: Vertex or segment index at fault, if known
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.index = index
        self.timestamp = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, index={self.index})"


class DegenerateGeometryError(GeometryError):
    """Raised for collinear or coincident waypoints and runs trimmed away."""

    pass


class InvalidInputError(ValueError):
    """Raised when a caller violates an input precondition."""

    pass
