# MIT License (see LICENSE)
"""
Renderer adapters for simulation visualization.

This module provides an abstract base class for rendering plus a few
backend-free implementations. Renderers only ever see ParticleSnapshot and
FieldState values, never live particles, so drawing cannot disturb the
simulation.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..core.fields import FieldState
from ..io.json_io import frame_to_json
from ..types import ParticleSnapshot
from ..util import norm

if TYPE_CHECKING:
    from ..simulation import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses integrate with a drawing backend (matplotlib, a canvas, a 3D
    scene graph, ...). Positions arrive in physics space; use
    Viewport.physics_to_screen / physics_to_world to place them.

    Usage:
        renderer.begin_frame(sim.time, sim.field_state())
        for snap in sim.snapshot():
            renderer.draw_particle(snap)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float, fields: FieldState) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time in seconds.
            fields: Instantaneous E and B, for field indicators.
        """
        ...

    @abstractmethod
    def draw_particle(self, particle: ParticleSnapshot) -> None:
        """Draw a single particle and its trail."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_simulation(self, sim: "Simulation") -> None:
        """Render every live particle in a simulation."""
        self.begin_frame(sim.time, sim.field_state())
        for snap in sim.snapshot():
            self.draw_particle(snap)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame t=0.0400 | E=0.0 B=(0.00, 0.00, 1.00) ===
        [1] +  @ (400.00, 300.00, 0.00) v=(0.10, 0.00, 0.00) trail=2
        [2] 0  @ (100.00, 100.00, 0.00) v=(0.00, 0.10, 0.00) trail=2
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity and trail length.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float, fields: FieldState) -> None:
        E, B = fields.electric, fields.magnetic
        e_mag = norm(E)
        self.output.write(
            f"=== Frame t={time:.4f} | E={e_mag:.1f} "
            f"B=({B[0]:.2f}, {B[1]:.2f}, {B[2]:.2f}) ===\n"
        )

    def draw_particle(self, particle: ParticleSnapshot) -> None:
        sign = "+" if particle.charge > 0 else "-" if particle.charge < 0 else "0"
        x, y, z = particle.position
        line = f"[{particle.id}] {sign:<2} @ ({x:.2f}, {y:.2f}, {z:.2f})"
        if self.verbose:
            vx, vy, vz = particle.velocity
            line += f" v=({vx:.2f}, {vy:.2f}, {vz:.2f}) trail={len(particle.trail)}"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks and headless runs."""

    def begin_frame(self, time: float, fields: FieldState) -> None:
        pass

    def draw_particle(self, particle: ParticleSnapshot) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records each frame as a JSON-ready dict (see io.json_io.frame_to_json).

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.tick()
            renderer.render_simulation(sim)
        print(len(renderer.frames[-1]["particles"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._time = 0.0
        self._fields: FieldState | None = None
        self._particles: list[ParticleSnapshot] | None = None

    def begin_frame(self, time: float, fields: FieldState) -> None:
        self._time = time
        self._fields = fields
        self._particles = []

    def draw_particle(self, particle: ParticleSnapshot) -> None:
        if self._particles is None:
            return
        self._particles.append(particle)

    def end_frame(self) -> None:
        if self._particles is not None and self._fields is not None:
            self.frames.append(frame_to_json(self._time, self._fields, self._particles))
        self._fields = None
        self._particles = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
