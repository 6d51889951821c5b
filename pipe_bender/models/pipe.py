"""Pipe geometry data models."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from ..errors import DegenerateGeometryError, InvalidInputError
from .types import Point3D

# Minimum segment length. This value is also defined in core/tolerances.py
# as SEGMENT_EPS. We duplicate it here to avoid circular imports
# (models -> core -> models).
_SEGMENT_EPS: float = 1e-10


def validate_radius(radius: float) -> float:
    """Validate a bend radius.

    Raises:
        InvalidInputError: If radius is not a finite positive number
    """
    if isinstance(radius, bool) or not isinstance(radius, (int, float)):
        raise InvalidInputError(f"radius must be a number, got {radius!r}")
    if not math.isfinite(radius) or radius <= 0:
        raise InvalidInputError(f"radius must be positive, got {radius}")
    return float(radius)


def validate_point(point: Sequence[float], index: int) -> Point3D:
    """Validate a waypoint and return it as a float 3-tuple.

    Args:
        point: Any sequence of three real coordinates
        index: Position of the point in its list (for the error message)

    Raises:
        InvalidInputError: If the point does not have three finite coordinates
    """
    try:
        coords = tuple(float(c) for c in point)
    except (TypeError, ValueError) as err:
        raise InvalidInputError(
            f"Point {index} must contain numeric coordinates, got {point!r}"
        ) from err

    if len(coords) != 3:
        raise InvalidInputError(
            f"Point {index} must have 3 coordinates, got {len(coords)}"
        )
    if not all(math.isfinite(c) for c in coords):
        raise InvalidInputError(f"Point {index} has non-finite coordinates: {coords}")

    return (coords[0], coords[1], coords[2])


def validate_pipe_inputs(
    points: Sequence[Sequence[float]],
    radius: float,
) -> tuple[tuple[Point3D, ...], float]:
    """
    Validate pipe calculation inputs.

    Args:
        points: Ordered waypoints (at least 3)
        radius: Bend radius applied at every interior waypoint

    Returns:
        Tuple of (points as float 3-tuples, radius as float)

    Raises:
        InvalidInputError: If any precondition is violated
    """
    if len(points) < 3:
        raise InvalidInputError(
            f"At least 3 points are required to define a bend, got {len(points)}"
        )
    radius = validate_radius(radius)
    checked = tuple(validate_point(p, i) for i, p in enumerate(points))
    return checked, radius


@dataclass(frozen=True, slots=True)
class Arc:
    """
    One circular bend of the pipe.

    Attributes:
        center: Center of the bend circle
        start: Tangent point where the incoming straight run ends
        end: Tangent point where the outgoing straight run begins
        central_angle: Swept angle in radians, in (0, pi)
        radius: Bend radius
    """

    center: Point3D
    start: Point3D
    end: Point3D
    central_angle: float
    radius: float

    def __repr__(self) -> str:
        return (
            f"Arc(angle={self.central_angle_degrees:.2f}, "
            f"radius={self.radius}, length={self.length:.1f})"
        )

    @property
    def length(self) -> float:
        """Arc length along the pipe centerline."""
        return self.central_angle * self.radius

    @property
    def central_angle_degrees(self) -> float:
        return math.degrees(self.central_angle)


@dataclass(frozen=True, slots=True)
class Segment:
    """A straight run of pipe between two points."""

    start: Point3D
    end: Point3D

    def __post_init__(self) -> None:
        """Reject zero-length runs."""
        if not math.dist(self.start, self.end) > _SEGMENT_EPS:
            raise DegenerateGeometryError(
                f"Points too close: {self.start}, {self.end}"
            )

    @property
    def length(self) -> float:
        return math.dist(self.start, self.end)


@dataclass(frozen=True, slots=True)
class BendedPipe:
    """
    A complete pipe: straight runs alternating with bends.

    The sequence is segments[0], arcs[0], segments[1], ..., arcs[n-1],
    segments[n]. Each segment ends at the start of the following arc and
    begins at the end of the preceding one.
    """

    segments: tuple[Segment, ...]
    arcs: tuple[Arc, ...]

    def __post_init__(self) -> None:
        if len(self.segments) != len(self.arcs) + 1:
            raise InvalidInputError(
                f"A pipe with {len(self.arcs)} arcs needs {len(self.arcs) + 1} "
                f"segments, got {len(self.segments)}"
            )

    def __repr__(self) -> str:
        return (
            f"BendedPipe(segments={len(self.segments)}, arcs={len(self.arcs)}, "
            f"total_length={self.total_length:.1f})"
        )

    @property
    def total_length(self) -> float:
        """Unrolled length: the stock pipe needed before bending."""
        return (
            sum(s.length for s in self.segments)
            + sum(a.length for a in self.arcs)
        )

    def elements(self) -> Iterator[Segment | Arc]:
        """Iterate segments and arcs in path order."""
        for i, segment in enumerate(self.segments):
            yield segment
            if i < len(self.arcs):
                yield self.arcs[i]
