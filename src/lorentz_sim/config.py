# MIT License (see LICENSE)
"""
Simulation configuration.

A SimulationConfig is an immutable value. The presentation layer builds a new
one whenever the user moves a slider and hands it to the engine; the engine
never reads UI state behind the caller's back. Use dataclasses.replace (or
Simulation.update_config) to derive a modified copy.
"""
from __future__ import annotations
from dataclasses import dataclass, replace

from .constants import (
    BASE_CHARGE,
    BASE_MASS,
    DEFAULT_BOUNDS,
    DEFAULT_TRAIL_LENGTH,
    DEFAULT_VIEWPORT,
    FIELD_SCALE,
    MAX_PARTICLES,
    TIME_STEP,
    VELOCITY_SCALE,
    VISUAL_SPEED_FACTOR,
)
from .viewport import Viewport


@dataclass(frozen=True)
class SimulationConfig:
    """
    Field settings, unit constants and limits for one simulation.

    Attributes:
        electric_field: Uniform E field (Ex, Ey), physics coordinates (+y up).
        magnetic_field: B field (Bx, By, Bz). Static value when
                        magnetic_frequency <= 0, otherwise the amplitude.
        magnetic_frequency: Oscillation frequency in Hz. Values <= 0 mean static.
        field_scale: Multiplier on electric and magnetic forces.
        velocity_scale: Converts input velocity to stored velocity at spawn.
        visual_speed_factor: Multiplier on the position increment only.
        base_charge: Charge per unit of charge sign.
        base_mass: Mass per unit of input mass.
        max_trail_length: Shared trail cap (clamped to >= 0).
        bounds: Removal margin factor relative to the viewport.
        viewport_size: Visible area (W, H) in pixels.
        time_step: Default tick length.
        max_particles: Admission cap for spawn().
    """
    electric_field: tuple[float, float] = (0.0, 0.0)
    magnetic_field: tuple[float, float, float] = (0.0, 0.0, 0.0)
    magnetic_frequency: float = 0.0
    field_scale: float = FIELD_SCALE
    velocity_scale: float = VELOCITY_SCALE
    visual_speed_factor: float = VISUAL_SPEED_FACTOR
    base_charge: float = BASE_CHARGE
    base_mass: float = BASE_MASS
    max_trail_length: int = DEFAULT_TRAIL_LENGTH
    bounds: float = DEFAULT_BOUNDS
    viewport_size: tuple[float, float] = DEFAULT_VIEWPORT
    time_step: float = TIME_STEP
    max_particles: int = MAX_PARTICLES

    def __post_init__(self) -> None:
        """Normalize vectors to float tuples, scalars to floats, and clamp the caps."""
        ex, ey = self.electric_field
        bx, by, bz = self.magnetic_field
        w, h = self.viewport_size
        object.__setattr__(self, "electric_field", (float(ex), float(ey)))
        object.__setattr__(self, "magnetic_field", (float(bx), float(by), float(bz)))
        object.__setattr__(self, "viewport_size", (float(w), float(h)))
        for name in (
            "magnetic_frequency", "field_scale", "velocity_scale", "visual_speed_factor",
            "base_charge", "base_mass", "bounds", "time_step",
        ):
            object.__setattr__(self, name, float(getattr(self, name)))
        object.__setattr__(self, "max_trail_length", max(0, int(self.max_trail_length)))
        object.__setattr__(self, "max_particles", max(0, int(self.max_particles)))

    @property
    def viewport(self) -> Viewport:
        """Removal region for the current viewport size and bounds."""
        w, h = self.viewport_size
        return Viewport(width=w, height=h, margin=self.bounds)

    def reset_fields(self) -> "SimulationConfig":
        """Copy with E, B and frequency zeroed; units and limits are kept."""
        return replace(
            self,
            electric_field=(0.0, 0.0),
            magnetic_field=(0.0, 0.0, 0.0),
            magnetic_frequency=0.0,
        )
