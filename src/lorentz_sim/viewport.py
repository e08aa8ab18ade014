# MIT License (see LICENSE)
"""
Viewport geometry: the removal region and coordinate transforms.

Physics space has its origin at the bottom-left corner of the visible area,
+x to the right, +y up, and z out of the screen, all in pixels. Only the
transforms in this module know that screens count y downwards and that the
3D view is centred on the viewport.

    screen (sx, sy)  <->  physics (x, y, z)  <->  world (wx, wy, wz)
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .constants import DEFAULT_BOUNDS, WORLD_SCALE
from .util import as_vec3


@dataclass(frozen=True)
class Viewport:
    """
    Visible simulation area plus the margin beyond which particles are removed.

    Attributes:
        width: Visible width W in pixels.
        height: Visible height H in pixels.
        margin: Bounds factor b. A particle is kept while
                -W(b-1) <= x <= W*b and -H(b-1) <= y <= H*b.
    """
    width: float
    height: float
    margin: float = DEFAULT_BOUNDS

    @property
    def x_range(self) -> tuple[float, float]:
        return -self.width * (self.margin - 1.0), self.width * self.margin

    @property
    def y_range(self) -> tuple[float, float]:
        return -self.height * (self.margin - 1.0), self.height * self.margin

    def contains(self, position) -> bool:
        """True if the physics-space position lies inside the removal region."""
        x_lo, x_hi = self.x_range
        y_lo, y_hi = self.y_range
        x, y = float(position[0]), float(position[1])
        return x_lo <= x <= x_hi and y_lo <= y <= y_hi

    def screen_to_physics(self, sx: float, sy: float) -> np.ndarray:
        """Map a 2D canvas click (y down) to a physics position on z = 0."""
        return np.array([sx, self.height - sy, 0.0], dtype=np.float64)

    def physics_to_screen(self, position) -> tuple[float, float]:
        """Map a physics position to canvas coordinates. z is dropped."""
        return float(position[0]), float(self.height - position[1])

    def physics_to_world(self, position, world_scale: float = WORLD_SCALE) -> np.ndarray:
        """
        Map a physics position to 3D world units centred on the viewport.

        wx = (x - W/2) / s,  wy = (y - H/2) / s,  wz = z / s
        """
        p = as_vec3(position)
        return np.array([
            (p[0] - 0.5 * self.width) / world_scale,
            (p[1] - 0.5 * self.height) / world_scale,
            p[2] / world_scale,
        ], dtype=np.float64)

    def world_to_physics(self, world_point, world_scale: float = WORLD_SCALE) -> np.ndarray:
        """Inverse of physics_to_world. Used for 3D ray-picked spawn points."""
        w = as_vec3(world_point)
        return np.array([
            w[0] * world_scale + 0.5 * self.width,
            w[1] * world_scale + 0.5 * self.height,
            w[2] * world_scale,
        ], dtype=np.float64)
