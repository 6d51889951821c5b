"""Pipe assembly and bend calculation logic."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from ..errors import DegenerateGeometryError
from ..lib import log
from ..models import (
    Arc,
    BendData,
    BendedPipe,
    PathSegment,
    Point3D,
    Segment,
    Vector3D,
    validate_pipe_inputs,
)
from .bend_fit import fit_bend
from .geometry import (
    angle_between_vectors,
    cross_product,
    dot_product,
    magnitude,
    normalize,
    scale_vector,
    subtract_vectors,
)
from .tolerances import SEGMENT_EPS


def _trimmed_segment(
    index: int,
    raw_start: Point3D,
    raw_end: Point3D,
    arcs: Sequence[Arc],
    radius: float,
) -> Segment:
    """
    Build the straight run between two waypoints, shortened to its bends.

    The run starts at the end of the previous arc (if any) and stops at the
    start of the next arc (if any).

    Raises:
        DegenerateGeometryError: If the bends consume the whole run or cross
    """
    start = arcs[index - 1].end if index > 0 else raw_start
    end = arcs[index].start if index < len(arcs) else raw_end

    raw = subtract_vectors(raw_end, raw_start)
    raw_length = magnitude(raw)
    # Waypoints are distinct here, otherwise fit_bend would have failed
    remaining = dot_product(subtract_vectors(end, start), raw) / raw_length

    if not remaining > SEGMENT_EPS:
        raise DegenerateGeometryError(
            f"Segment {index} ({raw_start} -> {raw_end}, length {raw_length:.4f}) "
            f"is consumed by its bends at radius {radius}: "
            f"trimmed length {remaining:.4f}",
            index=index,
        )

    return Segment(start, end)


def calc_pipe(points: Sequence[Sequence[float]], radius: float) -> BendedPipe:
    """
    Convert waypoints into straight runs joined by bends of one radius.

    Every interior waypoint is replaced by a bend. Each straight run is
    shortened so it ends exactly at the tangent points of its neighboring
    bends; the first run keeps its start and the last run keeps its end.

    Args:
        points: Ordered waypoints (at least 3)
        radius: Bend radius applied at every interior waypoint

    Returns:
        BendedPipe with len(points) - 1 segments and len(points) - 2 arcs

    Raises:
        DegenerateGeometryError: If any bend or trimmed run is degenerate.
            No partial pipe is returned.
        InvalidInputError: If the inputs violate a precondition
    """
    checked, radius = validate_pipe_inputs(points, radius)

    arcs: list[Arc] = [
        fit_bend(checked[i - 1], checked[i], checked[i + 1], radius, vertex_index=i)
        for i in range(1, len(checked) - 1)
    ]

    segments: list[Segment] = [
        _trimmed_segment(i, checked[i], checked[i + 1], arcs, radius)
        for i in range(len(checked) - 1)
    ]

    pipe = BendedPipe(segments=tuple(segments), arcs=tuple(arcs))
    log(f"Assembled {pipe!r} from {len(checked)} points", logging.DEBUG)
    return pipe


def bend_plane_normal(arc: Arc) -> Vector3D:
    """
    Unit normal of the plane containing an arc's center and tangent points.

    The orientation follows the right-hand rule from start to end.
    """
    # Unit radials keep the cross product at sin(central_angle), independent of radius
    radial_in = scale_vector(subtract_vectors(arc.start, arc.center), 1.0 / arc.radius)
    radial_out = scale_vector(subtract_vectors(arc.end, arc.center), 1.0 / arc.radius)
    return normalize(cross_product(radial_in, radial_out))


def bend_plane_twist(arc0: Arc, arc1: Arc) -> float:
    """
    Calculate the rotation between the bend planes of two adjacent arcs.

    This is the angle you rotate the pipe between bends on the bender.
    Opposite-facing normals describe the same plane, so the raw angle is
    folded into the smaller of itself and its supplement.

    Args:
        arc0: A bend
        arc1: The bend that follows it in the same pipe

    Returns:
        Twist angle in radians (0 to pi/2)
    """
    angle = angle_between_vectors(bend_plane_normal(arc0), bend_plane_normal(arc1))
    return min(math.pi - angle, angle)


def calculate_twists(pipe: BendedPipe) -> list[float]:
    """Twist angles (radians) between each pair of consecutive bends."""
    return [
        bend_plane_twist(pipe.arcs[i - 1], pipe.arcs[i])
        for i in range(1, len(pipe.arcs))
    ]


def calculate_bends(pipe: BendedPipe) -> list[BendData]:
    """
    Build the per-bend table for a pipe.

    Args:
        pipe: Assembled pipe

    Returns:
        One BendData per arc with angle and rotation in degrees.
        Rotation is None for the first bend.
    """
    twists = calculate_twists(pipe)

    bends: list[BendData] = []
    for i, arc in enumerate(pipe.arcs):
        rotation: float | None = None
        if i > 0:
            rotation = math.degrees(twists[i - 1])

        bends.append(BendData(
            number=i + 1,
            angle=arc.central_angle_degrees,
            rotation=rotation,
            arc_length=arc.length
        ))

    return bends


def build_path_segments(
    pipe: BendedPipe,
    start_offset: float = 0.0,
) -> list[PathSegment]:
    """
    Build cumulative path segments along the unrolled pipe.

    Args:
        pipe: Assembled pipe
        start_offset: Position of the pipe's first point on the stock

    Returns:
        Alternating straight/bend rows with cumulative positions.
        A straight carries the rotation to apply before the bend that
        follows it.
    """
    bends = calculate_bends(pipe)

    segments: list[PathSegment] = []
    cumulative = start_offset

    for i, straight in enumerate(pipe.segments):
        length = straight.length
        segments.append(PathSegment(
            segment_type='straight',
            name=f'Straight {i + 1}',
            length=length,
            starts_at=cumulative,
            ends_at=cumulative + length,
            bend_angle=None,
            rotation=bends[i].rotation if i < len(bends) else None
        ))
        cumulative += length

        # Add bend segment (if not last straight)
        if i < len(bends):
            bend = bends[i]
            segments.append(PathSegment(
                segment_type='bend',
                name=f'BEND {bend.number}',
                length=bend.arc_length,
                starts_at=cumulative,
                ends_at=cumulative + bend.arc_length,
                bend_angle=bend.angle,
                rotation=None
            ))
            cumulative += bend.arc_length

    return segments
