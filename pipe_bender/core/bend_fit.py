"""Fit a circular bend at a waypoint.

Given three consecutive waypoints, the bend at the middle one is the arc of
the requested radius tangent to both the incoming and the outgoing run::

    p0 <--v10--- p1
                / |
              /  v12
             h    |
            /     V
                  p2

The bend center lies on the bisector ``h`` of the interior angle at ``p1``.
With ``theta`` the half interior angle, the center is ``radius / sin(theta)``
away from ``p1`` and each tangent point is ``radius / tan(theta)`` away from
``p1`` along its run.
"""

from __future__ import annotations

import logging
import math

from ..errors import DegenerateGeometryError
from ..lib import log
from ..models import Arc, Point3D, validate_point, validate_radius
from .geometry import (
    ZeroVectorError,
    add_vectors,
    dot_product,
    normalize,
    scale_vector,
    subtract_vectors,
)
from .tolerances import ZERO_MAGNITUDE


def _vertex_label(vertex_index: int | None) -> str:
    return "bend vertex" if vertex_index is None else f"bend vertex {vertex_index}"


def fit_bend(
    p0: Point3D,
    p1: Point3D,
    p2: Point3D,
    radius: float,
    vertex_index: int | None = None,
) -> Arc:
    """
    Compute the bend of the given radius that rounds the corner at p1.

    Args:
        p0: Previous waypoint
        p1: Waypoint being rounded
        p2: Next waypoint
        radius: Bend radius (must be positive)
        vertex_index: Index of p1 in its waypoint list, used in error messages

    Returns:
        Arc whose start/end are the tangent points on p1->p0 and p1->p2.
        The central angle is the turn angle (pi minus the interior angle).

    Raises:
        DegenerateGeometryError: If p1 coincides with a neighbor, or the
            three points are collinear (straight pass-through or reversal)
        InvalidInputError: If radius is not a finite positive number, or a
            point does not have three finite coordinates
    """
    radius = validate_radius(radius)
    p0, p1, p2 = (validate_point(p, i) for i, p in enumerate((p0, p1, p2)))
    label = _vertex_label(vertex_index)

    try:
        v10 = normalize(subtract_vectors(p0, p1))
        v12 = normalize(subtract_vectors(p2, p1))
    except ZeroVectorError as err:
        raise DegenerateGeometryError(
            f"Coincident points at {label}: {p1} repeats a neighboring point",
            index=vertex_index,
        ) from err

    try:
        h = normalize(add_vectors(v10, v12))
    except ZeroVectorError as err:
        raise DegenerateGeometryError(
            f"Collinear points at {label}: {p0}, {p1}, {p2} form a straight line",
            index=vertex_index,
        ) from err

    cos_theta = dot_product(h, v10)
    # Nearly straight runs leave no measurable turn
    if not cos_theta > ZERO_MAGNITUDE:
        raise DegenerateGeometryError(
            f"Collinear points at {label}: {p0}, {p1}, {p2} form a straight line",
            index=vertex_index,
        )

    sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

    # Exact reversal leaves h parallel to both runs
    if not (math.isfinite(sin_theta) and sin_theta > ZERO_MAGNITUDE):
        raise DegenerateGeometryError(
            f"Collinear points at {label}: {p0}, {p1}, {p2} reverse direction",
            index=vertex_index,
        )

    t = radius / sin_theta
    tangent_distance = cos_theta * t

    center = add_vectors(p1, scale_vector(h, t))
    central_angle = math.pi - 2.0 * math.acos(max(-1.0, min(1.0, cos_theta)))
    start = add_vectors(p1, scale_vector(v10, tangent_distance))
    end = add_vectors(p1, scale_vector(v12, tangent_distance))

    log(
        f"Fitted {label}: angle={math.degrees(central_angle):.2f} deg, "
        f"tangent distance={tangent_distance:.4f}",
        logging.DEBUG,
    )

    return Arc(
        center=center,
        start=start,
        end=end,
        central_angle=central_angle,
        radius=radius,
    )
