# MIT License (see LICENSE)
"""
Force generators for charged particles.

Both functions add into particle.force in-place and are called during the
force accumulation phase of Particle.update(), after the force has been
cleared. Together they implement the Lorentz force

    F = q E + q (v × B)

with the simulation's unit scaling applied. Neutral particles (q == 0) are
skipped, so they feel no force at all.
"""
from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from ..constants import ELECTRIC_FIELD_GAIN, FIELD_SCALE
from ..util import cross3

if TYPE_CHECKING:
    from ..types import Particle


def apply_electric(particle: "Particle", Ex: float, Ey: float, field_scale: float = FIELD_SCALE) -> None:
    """
    Apply the electric force F = q (Ex, Ey, 0) * field_scale * ELECTRIC_FIELD_GAIN.

    The E field is uniform and lies in the xy-plane.

    Args:
        particle: Particle to push. No effect if charge == 0.
        Ex: Electric field x-component.
        Ey: Electric field y-component (+y up).
        field_scale: Unit-system multiplier.
    """
    if particle.charge == 0.0:
        return
    k = particle.charge * field_scale * ELECTRIC_FIELD_GAIN
    particle.force[0] += k * Ex
    particle.force[1] += k * Ey


def apply_magnetic(particle: "Particle", B: np.ndarray, field_scale: float = FIELD_SCALE) -> None:
    """
    Apply the magnetic part of the Lorentz force, F = q (v × B) * field_scale.

    Uses the full 3D cross product, so a velocity with a z component and an
    in-plane B both produce forces.

    Args:
        particle: Particle to push. No effect if charge == 0.
        B: Instantaneous magnetic field (Bx, By, Bz).
        field_scale: Unit-system multiplier.
    """
    if particle.charge == 0.0:
        return
    particle.force += (particle.charge * field_scale) * cross3(particle.velocity, B)
