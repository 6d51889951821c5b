"""
Pytest configuration and shared fixtures for PipeBender tests.

Run with: pytest tests/ -v
"""
from __future__ import annotations

import logging

import pytest

from pipe_bender import config
from pipe_bender.models import Point3D


@pytest.fixture
def reference_points() -> list[Point3D]:
    """Four-point route with two bends in different planes."""
    return [
        (0.0, 0.0, 0.0),
        (0.0, 0.0, -900.0),
        (300.0, 1000.0, -300.0),
        (300.0, 2000.0, -300.0),
    ]


@pytest.fixture
def reference_radius() -> float:
    return 200.0


@pytest.fixture
def right_angle_points() -> list[Point3D]:
    """Single 90 degree bend in the XY plane."""
    return [(0.0, 0.0, 0.0), (100.0, 0.0, 0.0), (100.0, 100.0, 0.0)]


@pytest.fixture
def package_logger():
    """Package logger, restored to its initial state after the test."""
    logger = logging.getLogger(config.LOGGER_NAME)
    saved_level = logger.level
    saved_handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
