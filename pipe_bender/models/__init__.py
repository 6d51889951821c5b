"""Data models for pipe geometry and bend schedules."""

from .types import Vector3D, Point3D, SegmentType
from .pipe import (
    Arc,
    Segment,
    BendedPipe,
    validate_radius,
    validate_point,
    validate_pipe_inputs,
)
from .bend_data import BendData, PathSegment

__all__ = [
    # Types
    'Vector3D',
    'Point3D',
    'SegmentType',
    # Pipe geometry
    'Arc',
    'Segment',
    'BendedPipe',
    'validate_radius',
    'validate_point',
    'validate_pipe_inputs',
    # Bend schedule
    'BendData',
    'PathSegment',
]
