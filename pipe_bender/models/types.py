"""Shared type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Vector3D: TypeAlias = tuple[float, float, float]
Point3D: TypeAlias = tuple[float, float, float]

SegmentType: TypeAlias = Literal['straight', 'bend']
