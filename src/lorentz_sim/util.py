# MIT License (see LICENSE)
"""
Utility functions for 3D vector math.

All particle state lives in float64 numpy arrays of shape (3,). Inputs coming
from the presentation side are frequently 2D (click positions, E field), so
the helpers here pad missing components with zero.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Allows tuple/list inputs for positions, velocities and field vectors.
    """
    return np.array(x, dtype=np.float64)


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Build a float64 3-vector from components."""
    return np.array([x, y, z], dtype=np.float64)


def as_vec3(v) -> np.ndarray:
    """
    Convert a 2- or 3-component array-like to a float64 3-vector.

    2D input is treated as lying in the z = 0 plane.
    """
    a = f64(v).reshape(-1)
    if a.shape[0] == 3:
        return a
    if a.shape[0] == 2:
        return np.array([a[0], a[1], 0.0], dtype=np.float64)
    raise ValueError(f"Expected 2 or 3 components, got {a.shape[0]}")


def cross3(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    3D cross product a × b.

    (ay*bz - az*by, az*bx - ax*bz, ax*by - ay*bx)

    Written out per component; for a single pair this is faster than
    np.cross and keeps the Lorentz term readable.
    """
    return np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ], dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a vector. Avoids sqrt."""
    return float(np.dot(v, v))


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a vector."""
    return float(np.sqrt(norm2(v)))
