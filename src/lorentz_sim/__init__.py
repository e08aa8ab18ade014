# MIT License (see LICENSE)
"""
lorentz_sim - Charged particles in uniform electric and magnetic fields.

This package provides the physics core of an interactive Lorentz-force
visualizer: particles with a charge sign, mass and initial velocity move
under a uniform E field and a static or oscillating B field, leaving
bounded trails, and are removed once they leave the viewport margin.

Main entry points:
    - Simulation: Owns the particles and the clock; advanced by tick().
    - SimulationConfig: Immutable field settings, unit constants and limits.
    - Particle: Kinematic state, trail and per-tick update rule.
    - FieldModel: Evaluates E and B(t).
    - Viewport: Removal region and screen/physics/world transforms.

Submodules:
    - core: Field model, force generators, Euler integrator, invariants.
    - io: JSON config presets and frame export.
    - renderer: Optional visualization adapters.

Example:
    from lorentz_sim import Simulation, SimulationConfig

    sim = Simulation(config=SimulationConfig(magnetic_field=(0, 0, 1)))
    sim.spawn(position=(400, 300), velocity=(5, 0), charge_sign=+1, mass=1.0)
    sim.start()
    sim.tick()
"""
import logging

from .config import SimulationConfig
from .core.fields import FieldModel, FieldState
from .simulation import Simulation
from .types import Particle, ParticleSnapshot
from .viewport import Viewport

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core simulation
    "Simulation",
    "SimulationConfig",
    "Particle",
    "ParticleSnapshot",
    # Fields
    "FieldModel",
    "FieldState",
    # Geometry
    "Viewport",
]
