"""Core calculation and geometry utilities."""

from .geometry import (
    ZeroVectorError,
    add_vectors,
    subtract_vectors,
    scale_vector,
    cross_product,
    dot_product,
    magnitude,
    normalize,
    angle_between_vectors,
    distance_squared,
    distance_between_points,
)
from .bend_fit import fit_bend
from .calculations import (
    calc_pipe,
    bend_plane_normal,
    bend_plane_twist,
    calculate_twists,
    calculate_bends,
    build_path_segments,
)
from .pipe_generator import PipeGenerationResult, generate_pipe
from .tolerances import (
    ZERO_MAGNITUDE,
    SEGMENT_EPS,
)

__all__ = [
    # Geometry
    'ZeroVectorError',
    'add_vectors',
    'subtract_vectors',
    'scale_vector',
    'cross_product',
    'dot_product',
    'magnitude',
    'normalize',
    'angle_between_vectors',
    'distance_squared',
    'distance_between_points',
    # Bend fitting
    'fit_bend',
    # Calculations
    'calc_pipe',
    'bend_plane_normal',
    'bend_plane_twist',
    'calculate_twists',
    'calculate_bends',
    'build_path_segments',
    # Generation
    'PipeGenerationResult',
    'generate_pipe',
    # Tolerances
    'ZERO_MAGNITUDE',
    'SEGMENT_EPS',
]
