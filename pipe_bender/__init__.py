"""PipeBender - turn 3D waypoints into straight runs and bends.

Given an ordered list of waypoints and one bend radius, computes the
fabricable pipe: trimmed straight runs, circular bends, their lengths and
angles, the total unrolled length, and the twist between consecutive bend
planes.
"""

from . import core
from . import models
from .core import (
    fit_bend,
    calc_pipe,
    bend_plane_twist,
    calculate_twists,
    calculate_bends,
    build_path_segments,
    generate_pipe,
    PipeGenerationResult,
)
from .errors import GeometryError, DegenerateGeometryError, InvalidInputError
from .lib import setup_logging
from .models import Arc, Segment, BendedPipe, BendData, PathSegment

__version__ = '0.1.0'

__all__ = [
    'core',
    'models',
    'fit_bend',
    'calc_pipe',
    'bend_plane_twist',
    'calculate_twists',
    'calculate_bends',
    'build_path_segments',
    'generate_pipe',
    'PipeGenerationResult',
    'GeometryError',
    'DegenerateGeometryError',
    'InvalidInputError',
    'setup_logging',
    'Arc',
    'Segment',
    'BendedPipe',
    'BendData',
    'PathSegment',
]
