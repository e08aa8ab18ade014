# MIT License (see LICENSE)
"""
Core type definitions for the charged-particle simulation.

Defines:
- Particle: a point charge with kinematic state, trail history and the
  per-tick update rule.
- ParticleSnapshot: an immutable copy of what a renderer needs.

Equations of motion (explicit Euler, see core/integrators.py):
  F = q E * field_scale * 10 + q (v × B) * field_scale
  v <- v + (F / m) dt
  x <- x + v dt * visual_speed_factor
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field

import numpy as np

from .config import SimulationConfig
from .constants import (
    BASE_RADIUS,
    DEFAULT_TRAIL_LENGTH,
    FIELD_SCALE,
    MIN_MASS,
    NEGATIVE_COLOR,
    NEUTRAL_COLOR,
    POSITIVE_COLOR,
    VISUAL_SPEED_FACTOR,
)
from .core.forces import apply_electric, apply_magnetic
from .core.integrators import euler_step
from .util import as_vec3
from .viewport import Viewport

TrailPoint = tuple[float, float, float]


@dataclass(frozen=True)
class ParticleSnapshot:
    """
    Read-only view of a particle between ticks.

    Renderers receive these instead of live particles so they cannot mutate
    simulation state.
    """
    id: int
    position: TrailPoint
    velocity: TrailPoint
    charge: float
    mass: float
    radius: float
    color: str
    trail: tuple[TrailPoint, ...]


@dataclass(eq=False)
class Particle:
    """
    A charged point particle.

    Attributes:
        position: Position [x, y, z] in physics space (pixels, +y up).
        velocity: Stored velocity [vx, vy, vz] (already velocity-scaled).
        charge: Charge q. Zero for neutral particles.
        mass: Mass m. Clamped to at least MIN_MASS on init.
        max_trail_length: This particle's trail cap.
        id: Unique identifier assigned by Simulation.spawn().
        removed: Set once the particle leaves the region; never cleared.
        force: Accumulated force (cleared at the start of every update).
        trail: Recent positions, oldest first.

    Note:
        inv_mass is computed once in __post_init__ and not refreshed if mass
        is reassigned afterwards.
    """
    position: np.ndarray | tuple[float, ...] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, ...] = (0.0, 0.0, 0.0)
    charge: float = 0.0
    mass: float = 1.0
    max_trail_length: int = DEFAULT_TRAIL_LENGTH
    id: int = -1
    removed: bool = False

    # Runtime state (not user-specified)
    force: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float64))
    inv_mass: float = field(init=False)
    trail: deque = field(init=False)

    def __post_init__(self) -> None:
        """Coerce vectors to float64 3-vectors and enforce the mass floor."""
        self.position = as_vec3(self.position)
        self.velocity = as_vec3(self.velocity)
        self.force = as_vec3(self.force)
        self.charge = float(self.charge)
        self.mass = max(MIN_MASS, float(self.mass))
        self.inv_mass = 1.0 / self.mass
        self.max_trail_length = max(0, int(self.max_trail_length))
        self.trail = deque(maxlen=self.max_trail_length)

    @classmethod
    def from_inputs(
        cls,
        position,
        velocity,
        charge_sign: int,
        mass: float,
        config: SimulationConfig | None = None,
    ) -> "Particle":
        """
        Build a particle from raw user inputs.

        Applies the unit conversions:
            velocity = input_velocity * velocity_scale
            charge   = sign(charge_sign) * base_charge
            mass     = max(MIN_MASS, input_mass * base_mass)

        Args:
            position: Spawn position (2D input lands on z = 0).
            velocity: Input velocity (2D input gets vz = 0).
            charge_sign: Any number; only its sign (-1, 0, +1) is used.
            mass: Input mass. Non-positive values are clamped, not rejected.
            config: Source of the unit constants and trail cap.
        """
        cfg = config or SimulationConfig()
        sign = float(np.sign(charge_sign))
        return cls(
            position=as_vec3(position),
            velocity=as_vec3(velocity) * cfg.velocity_scale,
            charge=sign * cfg.base_charge,
            mass=float(mass) * cfg.base_mass,
            max_trail_length=cfg.max_trail_length,
        )

    @property
    def radius(self) -> float:
        """Display radius, 3 + sqrt(m)."""
        return BASE_RADIUS + float(np.sqrt(self.mass))

    @property
    def color(self) -> str:
        """Display colour keyed by the sign of the charge."""
        if self.charge > 0:
            return POSITIVE_COLOR
        if self.charge < 0:
            return NEGATIVE_COLOR
        return NEUTRAL_COLOR

    def clear_forces(self) -> None:
        self.force[:] = 0.0

    def update(
        self,
        dt: float,
        Ex: float,
        Ey: float,
        B: np.ndarray,
        *,
        field_scale: float = FIELD_SCALE,
        visual_speed_factor: float = VISUAL_SPEED_FACTOR,
        viewport: Viewport | None = None,
    ) -> None:
        """
        Advance this particle by one tick.

        Order: skip if removed -> clear force -> electric + magnetic force
        (charged only) -> Euler step -> record trail -> boundary check.

        Args:
            dt: Timestep in simulation seconds.
            Ex, Ey: Uniform electric field.
            B: Instantaneous magnetic field (Bx, By, Bz).
            field_scale: Force multiplier from the configuration.
            visual_speed_factor: Position-increment multiplier.
            viewport: Removal region. If None, no boundary check is made.
        """
        if self.removed:
            return

        self.clear_forces()
        if self.charge != 0.0:
            apply_electric(self, Ex, Ey, field_scale)
            apply_magnetic(self, B, field_scale)

        euler_step(self, dt, visual_speed_factor)

        # deque(maxlen) evicts from the left on append
        self.trail.append(self._point())

        if viewport is not None and not viewport.contains(self.position):
            self.mark_for_removal()

    def mark_for_removal(self) -> None:
        """Flag the particle for removal. Idempotent."""
        self.removed = True

    def set_trail_cap(self, n: int) -> None:
        """Change the trail cap, dropping the oldest points if over it."""
        n = max(0, int(n))
        self.max_trail_length = n
        self.trail = deque(self.trail, maxlen=n)

    def clear_trail(self) -> None:
        """
        Collapse the trail to a single point.

        Keeps the most recent trail point, or the current position if the
        trail is empty. A cap of 0 still leaves the trail empty.
        """
        last = self.trail[-1] if self.trail else self._point()
        self.trail.clear()
        self.trail.append(last)

    def snapshot(self) -> ParticleSnapshot:
        """Immutable copy of the render-relevant state."""
        return ParticleSnapshot(
            id=self.id,
            position=self._point(),
            velocity=(float(self.velocity[0]), float(self.velocity[1]), float(self.velocity[2])),
            charge=self.charge,
            mass=self.mass,
            radius=self.radius,
            color=self.color,
            trail=tuple(self.trail),
        )

    def _point(self) -> TrailPoint:
        return float(self.position[0]), float(self.position[1]), float(self.position[2])
