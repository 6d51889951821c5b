"""3D vector math and geometry utilities.

Vectors and points are plain ``(x, y, z)`` tuples; every function returns a
new tuple and never mutates its arguments.
"""

from __future__ import annotations

import math

from ..models.types import Vector3D, Point3D
from .tolerances import ZERO_MAGNITUDE


class ZeroVectorError(ValueError):
    """Raised when a zero-length vector is used in calculations requiring non-zero vectors."""

    pass


def add_vectors(v1: Vector3D, v2: Vector3D) -> Vector3D:
    """Component-wise sum v1 + v2."""
    return (v1[0] + v2[0], v1[1] + v2[1], v1[2] + v2[2])


def subtract_vectors(v1: Vector3D, v2: Vector3D) -> Vector3D:
    """Component-wise difference v1 - v2."""
    return (v1[0] - v2[0], v1[1] - v2[1], v1[2] - v2[2])


def scale_vector(v: Vector3D, factor: float) -> Vector3D:
    """Multiply every component of v by factor."""
    return (v[0] * factor, v[1] * factor, v[2] * factor)


def cross_product(v1: Vector3D, v2: Vector3D) -> Vector3D:
    """
    Calculate the cross product of two 3D vectors.

    Args:
        v1: First vector (x, y, z)
        v2: Second vector (x, y, z)

    Returns:
        Cross product vector (x, y, z)
    """
    return (
        v1[1] * v2[2] - v1[2] * v2[1],
        v1[2] * v2[0] - v1[0] * v2[2],
        v1[0] * v2[1] - v1[1] * v2[0]
    )


def dot_product(v1: Vector3D, v2: Vector3D) -> float:
    """
    Calculate the dot product of two 3D vectors.

    Args:
        v1: First vector (x, y, z)
        v2: Second vector (x, y, z)

    Returns:
        Scalar dot product
    """
    return v1[0] * v2[0] + v1[1] * v2[1] + v1[2] * v2[2]


def magnitude(v: Vector3D) -> float:
    """
    Calculate the magnitude (length) of a 3D vector.

    Args:
        v: Vector (x, y, z)

    Returns:
        Scalar magnitude
    """
    return math.sqrt(v[0]**2 + v[1]**2 + v[2]**2)


def normalize(v: Vector3D) -> Vector3D:
    """
    Scale a vector to unit length.

    Args:
        v: Vector (x, y, z)

    Returns:
        Unit vector with the direction of v

    Raises:
        ZeroVectorError: If v has zero or near-zero length
    """
    mag = magnitude(v)
    if not mag >= ZERO_MAGNITUDE:
        raise ZeroVectorError(f"Cannot normalize zero-length vector (magnitude={mag}): {v}")
    return (v[0] / mag, v[1] / mag, v[2] / mag)


def _safe_magnitude_product(v1: Vector3D, v2: Vector3D) -> float:
    """
    Calculate the product of magnitudes, raising if either vector has zero length.

    Args:
        v1: First vector
        v2: Second vector

    Returns:
        Product of magnitudes (mag1 * mag2)

    Raises:
        ZeroVectorError: If either vector has zero or near-zero length
    """
    mag1 = magnitude(v1)
    mag2 = magnitude(v2)

    if mag1 < ZERO_MAGNITUDE:
        raise ZeroVectorError(
            f"First vector has zero length (magnitude={mag1}): {v1}"
        )
    if mag2 < ZERO_MAGNITUDE:
        raise ZeroVectorError(
            f"Second vector has zero length (magnitude={mag2}): {v2}"
        )

    return mag1 * mag2


def angle_between_vectors(v1: Vector3D, v2: Vector3D) -> float:
    """
    Calculate the angle between two vectors in radians.

    Args:
        v1: First vector
        v2: Second vector

    Returns:
        Angle in radians (0 to pi)

    Raises:
        ZeroVectorError: If either vector has zero length
    """
    mag_product = _safe_magnitude_product(v1, v2)
    cos_angle: float = dot_product(v1, v2) / mag_product
    cos_angle = max(-1.0, min(1.0, cos_angle))  # Clamp for floating point errors
    return math.acos(cos_angle)


def distance_squared(p1: Point3D, p2: Point3D) -> float:
    """Squared Euclidean distance between two 3D points."""
    return (
        (p2[0] - p1[0])**2 +
        (p2[1] - p1[1])**2 +
        (p2[2] - p1[2])**2
    )


def distance_between_points(p1: Point3D, p2: Point3D) -> float:
    """
    Calculate the Euclidean distance between two 3D points.

    Args:
        p1: First point (x, y, z)
        p2: Second point (x, y, z)

    Returns:
        Distance between points
    """
    return math.sqrt(distance_squared(p1, p2))
