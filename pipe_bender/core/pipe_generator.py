"""Orchestrates pipe calculation for a host application.

Runs the calculation pipeline and separates geometry problems, which an
operator can fix by editing waypoints or the radius, from programming
errors, which propagate.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from ..errors import GeometryError
from ..lib import handle_error, log
from ..models import BendData, BendedPipe, PathSegment
from .calculations import build_path_segments, calc_pipe, calculate_bends


@dataclass(slots=True)
class PipeGenerationResult:
    """Result of pipe generation."""

    success: bool
    pipe: BendedPipe | None = None
    bends: list[BendData] = field(default_factory=list)
    segments: list[PathSegment] = field(default_factory=list)
    total_length: float = 0.0
    error: str = ""
    error_timestamp: datetime | None = None


def generate_pipe(
    points: Sequence[Sequence[float]],
    radius: float,
) -> PipeGenerationResult:
    """
    Generate the pipe and its bend schedule.

    Args:
        points: Ordered waypoints (at least 3)
        radius: Bend radius

    Returns:
        PipeGenerationResult with the pipe and tables on success, or the
        geometry error message on failure

    Raises:
        InvalidInputError: If the inputs violate a precondition
    """
    try:
        pipe = calc_pipe(points, radius)
        bends = calculate_bends(pipe)
        segments = build_path_segments(pipe)
    except GeometryError as err:
        log(f"Pipe generation failed: {err.message}", logging.WARNING)
        return PipeGenerationResult(
            success=False,
            error=err.message,
            error_timestamp=err.timestamp,
        )
    except Exception:
        handle_error('generate_pipe')
        raise

    return PipeGenerationResult(
        success=True,
        pipe=pipe,
        bends=bends,
        segments=segments,
        total_length=pipe.total_length,
    )
