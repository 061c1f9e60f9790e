"""
Vector arithmetic for points of any dimension.

Inputs may be lists, tuples or arrays; results are float NumPy arrays, which
the shape API accepts anywhere a point is expected.
"""

import math
from typing import Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]


def _as_vector(vector: ArrayLike) -> np.ndarray:
    return np.asarray(vector, dtype=np.float64)


def add(point: ArrayLike, other_point: ArrayLike) -> np.ndarray:
    """Add two vectors component-wise."""
    return _as_vector(point) + _as_vector(other_point)


def subtract(point: ArrayLike, other_point: ArrayLike) -> np.ndarray:
    """Subtract the second vector from the first component-wise."""
    return _as_vector(point) - _as_vector(other_point)


def dot_product(vector: ArrayLike, other_vector: ArrayLike) -> float:
    return float(np.dot(_as_vector(vector), _as_vector(other_vector)))


def scale(vector: ArrayLike, factor: float) -> np.ndarray:
    return _as_vector(vector) * factor


def magnitude(vector: ArrayLike) -> float:
    """Euclidean length of a vector."""
    return float(np.linalg.norm(_as_vector(vector)))


def normalize(vector: ArrayLike) -> np.ndarray:
    """
    Scale a vector to unit length.

    The zero vector has no direction and is returned unchanged.
    """
    v = _as_vector(vector)
    mag = magnitude(v)
    return v if mag == 0 else scale(v, 1 / mag)


def polar_to_cartesian(r: float, theta: float) -> np.ndarray:
    """
    Convert polar coordinates to Cartesian coordinates.

    Args:
        r: Distance from origin
        theta: Angle in radians

    Returns:
        [x, y] coordinates
    """
    return np.array([r * math.cos(theta), r * math.sin(theta)])


def point_along(vector1: ArrayLike, vector2: ArrayLike, proportion: float) -> np.ndarray:
    """
    Find a point on the line through two vectors.

    Args:
        vector1: Start point (proportion 0)
        vector2: End point (proportion 1)
        proportion: Position along the line; values outside [0, 1] extrapolate

    Returns:
        Interpolated point
    """
    return add(vector1, scale(subtract(vector2, vector1), proportion))
