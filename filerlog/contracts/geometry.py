"""
Geometry Value Types

Immutable points, vectors and scale factors captured from producers.

Values are plain floats so that instances stay hashable and compare
structurally. Conversion to numpy arrays is provided for consumers
doing numeric work on captured geometry.
"""

from __future__ import annotations
from dataclasses import dataclass, astuple
from typing import Sequence

import numpy as np


def _coords(values: Sequence[float], size: int, name: str) -> tuple:
    array = np.asarray(values, dtype=np.float64)
    if array.shape != (size,):
        raise ValueError(f"{name} requires {size} coordinates, got shape {array.shape}")
    return tuple(float(v) for v in array)


@dataclass(frozen=True)
class Point2d:
    x: float
    y: float

    @staticmethod
    def from_array(values: Sequence[float]) -> Point2d:
        return Point2d(*_coords(values, 2, "Point2d"))

    def to_array(self) -> np.ndarray:
        return np.array(astuple(self), dtype=np.float64)

    def to_point3d(self) -> Point3d:
        """Lift onto the z=0 plane."""
        return Point3d(self.x, self.y, 0.0)


@dataclass(frozen=True)
class Point3d:
    x: float
    y: float
    z: float

    @staticmethod
    def from_array(values: Sequence[float]) -> Point3d:
        return Point3d(*_coords(values, 3, "Point3d"))

    def to_array(self) -> np.ndarray:
        return np.array(astuple(self), dtype=np.float64)


@dataclass(frozen=True)
class Vector2d:
    x: float
    y: float

    @staticmethod
    def from_array(values: Sequence[float]) -> Vector2d:
        return Vector2d(*_coords(values, 2, "Vector2d"))

    def to_array(self) -> np.ndarray:
        return np.array(astuple(self), dtype=np.float64)

    @property
    def length(self) -> float:
        return float(np.linalg.norm(self.to_array()))


@dataclass(frozen=True)
class Vector3d:
    x: float
    y: float
    z: float

    @staticmethod
    def from_array(values: Sequence[float]) -> Vector3d:
        return Vector3d(*_coords(values, 3, "Vector3d"))

    def to_array(self) -> np.ndarray:
        return np.array(astuple(self), dtype=np.float64)

    @property
    def length(self) -> float:
        return float(np.linalg.norm(self.to_array()))


@dataclass(frozen=True)
class Scale3d:
    """Non-uniform scale factors along the three axes."""
    x: float
    y: float
    z: float

    @staticmethod
    def uniform(factor: float) -> Scale3d:
        return Scale3d(factor, factor, factor)

    @staticmethod
    def from_array(values: Sequence[float]) -> Scale3d:
        return Scale3d(*_coords(values, 3, "Scale3d"))

    def to_array(self) -> np.ndarray:
        return np.array(astuple(self), dtype=np.float64)

    @property
    def is_uniform(self) -> bool:
        return self.x == self.y == self.z
