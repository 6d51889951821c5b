"""Bend schedule data models."""

from __future__ import annotations

from dataclasses import dataclass

from .types import SegmentType


@dataclass(slots=True)
class BendData:
    """Represents a bend in the pipe path."""

    number: int
    angle: float  # Degrees
    rotation: float | None  # Degrees, None for first bend
    arc_length: float = 0.0

    def __repr__(self) -> str:
        rot = f", rot={self.rotation:.1f}" if self.rotation is not None else ""
        return f"BendData(#{self.number}, angle={self.angle:.1f}{rot})"


@dataclass(slots=True)
class PathSegment:
    """Represents a segment in the cumulative path table."""
    segment_type: SegmentType
    name: str
    length: float
    starts_at: float
    ends_at: float
    bend_angle: float | None
    rotation: float | None
