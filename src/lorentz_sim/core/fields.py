# MIT License (see LICENSE)
"""
Uniform field model.

The electric field is static. The magnetic field is either static or a
sinusoid driven by a single global frequency:

    B(t) = B_amp * cos(2π f t)        (f > 0)
    B(t) = B_static                   (f <= 0)

All three components share the same cosine phase, so the field pulses in
lockstep rather than rotating per axis.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from ..config import SimulationConfig
from ..util import f64, vec3, norm


@dataclass(frozen=True)
class FieldState:
    """
    Instantaneous field values at one moment, for on-screen indicators.

    Attributes:
        time: Simulation time the fields were evaluated at.
        electric: E as a 3-vector (z is always 0).
        magnetic: Instantaneous B as a 3-vector.
        frequency: Configured magnetic frequency (<= 0 means static).
    """
    time: float
    electric: np.ndarray
    magnetic: np.ndarray
    frequency: float = 0.0

    @property
    def is_oscillating(self) -> bool:
        return self.frequency > 0


@dataclass(frozen=True)
class FieldModel:
    """
    Evaluates E and B from configured values.

    Pure: the result depends only on the configuration and the time argument.
    """
    electric: tuple[float, float] = (0.0, 0.0)
    magnetic: tuple[float, float, float] = (0.0, 0.0, 0.0)
    frequency: float = 0.0

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "FieldModel":
        return cls(
            electric=config.electric_field,
            magnetic=config.magnetic_field,
            frequency=config.magnetic_frequency,
        )

    @property
    def is_oscillating(self) -> bool:
        """True when the magnetic field varies in time (frequency > 0)."""
        return self.frequency > 0

    def evaluate_electric_field(self) -> np.ndarray:
        """Return (Ex, Ey). Never time-varying."""
        return f64(self.electric)

    def evaluate_magnetic_field(self, t: float) -> np.ndarray:
        """
        Return the instantaneous magnetic field at time t.

        Args:
            t: Simulation time in seconds.

        Returns:
            (Bx, By, Bz) as a float64 array.
        """
        b = f64(self.magnetic)
        if self.frequency <= 0:
            return b
        return b * np.cos(2.0 * np.pi * self.frequency * t)

    def state(self, t: float) -> FieldState:
        """Both fields at time t, packaged for the renderer."""
        ex, ey = self.electric
        return FieldState(
            time=float(t),
            electric=vec3(ex, ey, 0.0),
            magnetic=self.evaluate_magnetic_field(t),
            frequency=self.frequency,
        )

    @property
    def electric_magnitude(self) -> float:
        return norm(self.evaluate_electric_field())

    @property
    def magnetic_amplitude(self) -> float:
        """|B| of the static vector, or of the amplitude when oscillating."""
        return norm(f64(self.magnetic))

    def describe(self) -> str:
        """
        One-line indicator text, e.g. ``E=2.2 (1, 2) | B amp=1.0 (0, 0, 1) f=0.50Hz``.

        Fields below 0.01 in magnitude are reported as ``none``.
        """
        ex, ey = self.electric
        bx, by, bz = self.magnetic
        e_mag = self.electric_magnitude
        b_mag = self.magnetic_amplitude

        e_text = f"E={e_mag:.1f} ({ex:g}, {ey:g})" if e_mag > 0.01 else "E=none"
        label = "B amp" if self.is_oscillating else "B"
        if b_mag > 0.01:
            b_text = f"{label}={b_mag:.1f} ({bx:g}, {by:g}, {bz:g})"
        elif self.is_oscillating:
            b_text = f"{label}=0"
        else:
            b_text = "B=none"
        if self.is_oscillating:
            b_text += f" f={self.frequency:.2f}Hz"
        return f"{e_text} | {b_text}"
