"""
Tests for pipe_generator module - host-facing result wrapper.

Run with: pytest tests/ -v
"""
import logging

import pytest

from pipe_bender import generate_pipe
from pipe_bender.errors import InvalidInputError


class TestGeneratePipeSuccess:
    """Successful generation returns the pipe and its tables."""

    def test_reference_route(self, reference_points, reference_radius) -> None:
        result = generate_pipe(reference_points, reference_radius)

        assert result.success is True
        assert result.error == ""
        assert result.error_timestamp is None
        assert result.pipe is not None
        assert result.total_length == pytest.approx(2827.8, abs=0.05)
        assert len(result.bends) == 2
        assert len(result.segments) == 5
        assert result.segments[-1].ends_at == pytest.approx(result.total_length)

    def test_small_radius_shallow_bend(self) -> None:
        points = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (2.0, 1e-5, 0.0), (3.0, 1e-5, 1.0)]
        result = generate_pipe(points, 1e-3)

        assert result.success is True
        assert result.bends[1].rotation == pytest.approx(90.0, abs=0.1)


class TestGeneratePipeGeometryFailure:
    """Degenerate geometry is reported, not raised."""

    def test_collinear_points(self) -> None:
        points = [(0.0, 0.0, 0.0), (0.0, 0.0, -100.0), (0.0, 0.0, -200.0)]
        result = generate_pipe(points, 50.0)

        assert result.success is False
        assert result.pipe is None
        assert result.bends == []
        assert result.segments == []
        assert "Collinear" in result.error
        assert result.error_timestamp is not None

    def test_radius_too_large(self, right_angle_points) -> None:
        result = generate_pipe(right_angle_points, 500.0)
        assert result.success is False
        assert "consumed" in result.error

    def test_failure_logged_as_warning(self, caplog, right_angle_points) -> None:
        with caplog.at_level(logging.WARNING, logger='pipe_bender'):
            generate_pipe(right_angle_points, 500.0)

        assert any(
            r.levelno == logging.WARNING and "Pipe generation failed" in r.getMessage()
            for r in caplog.records
        )


class TestGeneratePipeInvalidInput:
    """Caller errors propagate unchanged."""

    def test_too_few_points_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="At least 3 points"):
            generate_pipe([(0.0, 0.0, 0.0), (1.0, 0.0, 0.0)], 1.0)

    def test_bad_radius_raises(self, right_angle_points) -> None:
        with pytest.raises(InvalidInputError):
            generate_pipe(right_angle_points, -1.0)

    def test_invalid_input_logged_with_traceback(self, caplog) -> None:
        with caplog.at_level(logging.ERROR, logger='pipe_bender'):
            with pytest.raises(InvalidInputError):
                generate_pipe([(0.0, 0.0, 0.0)], 1.0)

        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
        assert any("generate_pipe" in m and "InvalidInputError" in m for m in messages)
