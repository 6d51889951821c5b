"""Tolerance constants for geometric calculations.

Centralizes all tolerance values used throughout the codebase for
consistency and easy tuning.
"""

# Zero vector detection threshold
# Vectors with magnitude below this are considered zero-length
ZERO_MAGNITUDE: float = 1e-10

# Minimum straight run length
# A segment whose endpoints are closer than this is degenerate, including
# runs that vanish after trimming to their neighboring bends
SEGMENT_EPS: float = 1e-10
