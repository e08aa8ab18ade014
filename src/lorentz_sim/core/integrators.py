# MIT License (see LICENSE)
"""
Time integration for particles.

A single explicit Euler step, velocity first:

    a      = F / m
    v(t+dt) = v(t) + a dt
    x(t+dt) = x(t) + v(t+dt) dt * visual_speed_factor

Because the position uses the freshly updated velocity this is the
semi-implicit (symplectic) Euler variant. visual_speed_factor exaggerates
displacement on screen; it is applied to the position increment only and
never folded into the stored velocity.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
from typing import TYPE_CHECKING

from ..constants import VISUAL_SPEED_FACTOR

if TYPE_CHECKING:
    from ..types import Particle


def euler_step(particle: "Particle", dt: float, visual_speed_factor: float = VISUAL_SPEED_FACTOR) -> None:
    """
    Advance particle velocity and position by dt using the accumulated force.

    Args:
        particle: Particle to integrate (modified in-place).
        dt: Timestep in simulation seconds.
        visual_speed_factor: Multiplier on the position increment.
    """
    acceleration = particle.force * particle.inv_mass
    particle.velocity = particle.velocity + acceleration * dt
    particle.position = particle.position + particle.velocity * (dt * visual_speed_factor)
