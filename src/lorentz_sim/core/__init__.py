# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Field model: uniform E, static or oscillating B.
    - Force generators: electric and magnetic (Lorentz) forces.
    - Integrator: explicit Euler step.
    - Invariants: kinetic energy, momentum and speed diagnostics.

Typical usage:
    from lorentz_sim.core import FieldModel, apply_magnetic, euler_step

    B = FieldModel(magnetic=(0, 0, 1)).evaluate_magnetic_field(t=0.0)
    apply_magnetic(particle, B)
    euler_step(particle, dt=0.02)
"""
from .fields import FieldModel, FieldState
from .forces import apply_electric, apply_magnetic
from .integrators import euler_step
from .invariants import kinetic_energy, linear_momentum, speeds

__all__ = [
    # Fields
    "FieldModel",
    "FieldState",
    # Forces
    "apply_electric",
    "apply_magnetic",
    # Integrators
    "euler_step",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "speeds",
]
