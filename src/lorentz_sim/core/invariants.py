# MIT License (see LICENSE)
"""
Diagnostics over a particle population.

Used by tests and examples to check integration behaviour. With no fields
every quantity here is constant. A pure magnetic field does no work, so speed
is ideally preserved; the explicit Euler step inflates it slightly each tick
by a factor sqrt(1 + (q B dt / m)^2).
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from ..types import Particle


def kinetic_energy(particles: Iterable["Particle"]) -> float:
    """
    Total kinetic energy T = Σ ½ m v² of the live particles.

    Particles flagged for removal are ignored.
    """
    ke = 0.0
    for p in particles:
        if p.removed:
            continue
        ke += 0.5 * p.mass * float(np.dot(p.velocity, p.velocity))
    return ke


def linear_momentum(particles: Iterable["Particle"]) -> np.ndarray:
    """Total momentum P = Σ m v as a 3-vector."""
    total = np.zeros(3, dtype=np.float64)
    for p in particles:
        if p.removed:
            continue
        total += p.mass * p.velocity
    return total


def speeds(particles: Iterable["Particle"]) -> np.ndarray:
    """Array of |v| for each live particle, in collection order."""
    return np.array(
        [float(np.linalg.norm(p.velocity)) for p in particles if not p.removed],
        dtype=np.float64,
    )
