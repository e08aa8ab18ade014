# MIT License (see LICENSE)
"""
The simulation engine and its tick loop.

The Simulation class owns the particle collection and the clock. It manages:
- Admission of new particles (hard cap, silent rejection).
- The current SimulationConfig, replaced wholesale by the caller.
- The tick:
    1. Evaluate E and B(t) from the field model.
    2. Update every particle (force, Euler step, trail, boundary check).
    3. Drop particles flagged for removal (stable filter).
    4. Advance the clock.

Structure:
    - Caller creates a Simulation, optionally with a config.
    - Caller spawns particles and calls start().
    - An external frame scheduler calls tick() once per rendered frame and
      reads snapshot() / field_state() between ticks.
"""
from __future__ import annotations
import itertools
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field, replace

from .config import SimulationConfig
from .core.fields import FieldModel, FieldState
from .profiler import Profiler
from .types import Particle, ParticleSnapshot

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    Charged-particle simulation world.

    Attributes:
        config: Current field settings, unit constants and limits.
        profiler: Optional Profiler for per-section tick timings.
        particles: Live particles in spawn order.
        time: Simulation clock in seconds.
        running: Ticks are no-ops while False.
    """
    config: SimulationConfig = field(default_factory=SimulationConfig)
    profiler: Profiler | None = None

    # Internal state
    particles: list[Particle] = field(default_factory=list)
    time: float = 0.0
    running: bool = False

    def __post_init__(self) -> None:
        self._fields = FieldModel.from_config(self.config)
        self._ids = itertools.count(1)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start(self) -> None:
        self.running = True

    def pause(self) -> None:
        self.running = False

    def toggle(self) -> bool:
        """Flip between running and paused. Returns the new running state."""
        self.running = not self.running
        return self.running

    def configure(self, config: SimulationConfig) -> None:
        """
        Replace the configuration.

        Field changes take effect on the next tick. A changed trail cap is
        applied to existing particles immediately.
        """
        fields = FieldModel.from_config(config)
        if config.max_trail_length != self.config.max_trail_length:
            self._apply_trail_cap(config.max_trail_length)
        self.config = config
        self._fields = fields
        logger.debug("configuration replaced: %s", self._fields.describe())

    def update_config(self, **changes) -> SimulationConfig:
        """Derive a new config from the current one and adopt it."""
        self.configure(replace(self.config, **changes))
        return self.config

    def set_trail_cap(self, n: int) -> None:
        """Set the shared trail cap and trim every existing trail now."""
        self.update_config(max_trail_length=n)

    def reset_fields(self) -> None:
        """Zero E, B and the magnetic frequency."""
        self.configure(self.config.reset_fields())

    def spawn(self, position, velocity, charge_sign: int, mass: float) -> int | None:
        """
        Create a particle from raw inputs and add it to the collection.

        Args:
            position: Spawn position in physics space (2D or 3D).
            velocity: Input velocity, scaled by config.velocity_scale.
            charge_sign: Sign of the charge (-1, 0, +1).
            mass: Input mass, clamped to the mass floor.

        Returns:
            The new particle id, or None if the collection is at capacity.
        """
        if len(self.particles) >= self.config.max_particles:
            logger.debug("spawn rejected: %d particles at cap", len(self.particles))
            return None
        p = Particle.from_inputs(position, velocity, charge_sign, mass, self.config)
        p.id = next(self._ids)
        self.particles.append(p)
        return p.id

    def reset(self, reset_frequency: bool = True) -> None:
        """
        Stop, remove every particle and rewind the clock to 0.

        Args:
            reset_frequency: Also zero the magnetic frequency, returning an
                oscillating field to its static amplitude value.
        """
        self.running = False
        self.particles = []
        self.time = 0.0
        if reset_frequency and self.config.magnetic_frequency != 0.0:
            self.configure(replace(self.config, magnetic_frequency=0.0))
        logger.debug("simulation reset")

    def clear_all_trails(self) -> None:
        for p in self.particles:
            p.clear_trail()

    def _apply_trail_cap(self, n: int) -> None:
        for p in self.particles:
            p.set_trail_cap(n)

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self, dt: float | None = None, config: SimulationConfig | None = None) -> None:
        """
        Advance the simulation by one frame.

        Args:
            dt: Timestep; defaults to config.time_step.
            config: If given, adopted before stepping (even when paused).

        Raises:
            ValueError: If the effective timestep is not positive.
        """
        if config is not None and config is not self.config:
            self.configure(config)
        if not self.running:
            return

        cfg = self.config
        dt = float(cfg.time_step if dt is None else dt)
        if dt <= 0.0:
            raise ValueError(f"Timestep must be positive, got {dt}")

        with self._section("fields"):
            Ex, Ey = self._fields.evaluate_electric_field()
            B = self._fields.evaluate_magnetic_field(self.time)

        with self._section("particles"):
            cap = cfg.max_trail_length
            viewport = cfg.viewport
            for p in self.particles:
                if p.max_trail_length != cap:
                    p.set_trail_cap(cap)
                p.update(
                    dt, Ex, Ey, B,
                    field_scale=cfg.field_scale,
                    visual_speed_factor=cfg.visual_speed_factor,
                    viewport=viewport,
                )

        with self._section("prune"):
            self.particles = [p for p in self.particles if not p.removed]

        self.time += dt

    # ------------------------------------------------------------------
    # Outputs
    # ------------------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        return self.time

    @property
    def particle_count(self) -> int:
        return len(self.particles)

    @property
    def fields(self) -> FieldModel:
        return self._fields

    def field_state(self) -> FieldState:
        """Instantaneous E and B at the current clock time."""
        return self._fields.state(self.time)

    def snapshot(self) -> list[ParticleSnapshot]:
        """Immutable copies of all live particles, in collection order."""
        return [p.snapshot() for p in self.particles if not p.removed]

    def get(self, particle_id: int) -> Particle | None:
        for p in self.particles:
            if p.id == particle_id:
                return p
        return None

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)
