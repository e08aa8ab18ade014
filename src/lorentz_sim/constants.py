# MIT License (see LICENSE)
"""
Unit-system constants used throughout the simulation.

The simulation does not use SI units. Positions are measured in viewport
pixels, and the scale factors below convert slider-sized inputs (charge sign,
mass, velocity and field strength in the range of roughly -10..10) into
motion that is visible at one tick per rendered frame.
"""
from __future__ import annotations

# Multiplier applied to both electric and magnetic forces.
FIELD_SCALE: float = 0.2

# Applied once, at spawn, to convert input velocity to stored velocity.
VELOCITY_SCALE: float = 0.1

# Multiplies only the position increment. Stored velocity is never scaled.
VISUAL_SPEED_FACTOR: float = 5.0

# Fixed gain on the electric term: F_E = q * E * FIELD_SCALE * 10.
# Part of the unit system, not a tunable.
ELECTRIC_FIELD_GAIN: float = 10.0

BASE_CHARGE: float = 1.0
BASE_MASS: float = 1.0

# Mass floor enforced at particle creation; keeps 1/m finite.
MIN_MASS: float = 0.1

# Hard admission cap on concurrently simulated particles.
MAX_PARTICLES: int = 5000

# Fixed physics step per rendered frame, in simulation seconds.
TIME_STEP: float = 0.02

DEFAULT_TRAIL_LENGTH: int = 100

# Removal region is [-W(b-1), W*b] x [-H(b-1), H*b].
DEFAULT_BOUNDS: float = 1.5
DEFAULT_VIEWPORT: tuple[float, float] = (800.0, 600.0)

# Pixels per world unit in the 3D view.
WORLD_SCALE: float = 50.0

# Display radius is 3 + sqrt(mass).
BASE_RADIUS: float = 3.0

POSITIVE_COLOR: str = "#e74c3c"
NEGATIVE_COLOR: str = "#3498db"
NEUTRAL_COLOR: str = "#95a5a6"
