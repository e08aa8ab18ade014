import numpy as np
import pytest
from lorentz_sim.config import SimulationConfig
from lorentz_sim.constants import NEGATIVE_COLOR, NEUTRAL_COLOR, POSITIVE_COLOR
from lorentz_sim.types import Particle
from lorentz_sim.viewport import Viewport

ZERO_B = np.zeros(3)


@pytest.mark.parametrize("mass", [0.0, -3.0, 0.05])
def test_mass_floor(mass):
    """Non-positive or tiny masses are clamped to 0.1, never rejected."""
    p = Particle(mass=mass)
    assert p.mass == 0.1
    assert p.inv_mass == pytest.approx(10.0)

    q = Particle.from_inputs((0, 0), (0, 0), charge_sign=1, mass=mass)
    assert q.mass == 0.1


def test_inv_mass_fixed_at_construction():
    """Changing mass afterwards does not refresh inv_mass; the update keeps using it."""
    p = Particle(charge=1.0, mass=2.0)
    p.mass = 100.0
    assert p.inv_mass == 0.5

    # F = 1 * 1 * 0.2 * 10 = 2, a = F * inv_mass = 1, v = 0.02
    p.update(0.02, 1.0, 0.0, np.zeros(3))
    assert p.velocity[0] == pytest.approx(0.02)


def test_from_inputs_applies_units():
    cfg = SimulationConfig(max_trail_length=7)
    p = Particle.from_inputs((10.0, 20.0), (10.0, -5.0), charge_sign=3, mass=4.0, config=cfg)

    assert np.allclose(p.position, [10.0, 20.0, 0.0])
    assert np.allclose(p.velocity, [1.0, -0.5, 0.0])  # velocity_scale = 0.1
    assert p.charge == 1.0  # only the sign counts
    assert p.mass == 4.0
    assert p.radius == pytest.approx(5.0)  # 3 + sqrt(4)
    assert p.max_trail_length == 7


def test_color_follows_charge_sign():
    assert Particle(charge=1.0).color == POSITIVE_COLOR
    assert Particle(charge=-1.0).color == NEGATIVE_COLOR
    assert Particle(charge=0.0).color == NEUTRAL_COLOR


def test_neutral_moves_straight():
    """Neutral particle: velocity unchanged, position linear in dt."""
    p = Particle(velocity=(1.0, 2.0, 0.0), charge=0.0)
    for _ in range(10):
        p.update(0.02, 50.0, 50.0, np.array([0.0, 0.0, 10.0]))

    assert np.allclose(p.velocity, [1.0, 2.0, 0.0])
    # 10 * 0.02 * visual_speed_factor(5) = 1.0 per unit velocity
    assert np.allclose(p.position, [1.0, 2.0, 0.0])


def test_euler_step_with_electric_field():
    """
    q=1, m=2, Ex=1:  F = 1 * 1 * 0.2 * 10 = 2,  a = 1
    v = 0.02, x = v * dt * 5 = 0.002
    """
    p = Particle(charge=1.0, mass=2.0)
    p.update(0.02, 1.0, 0.0, ZERO_B)
    assert np.allclose(p.velocity, [0.02, 0.0, 0.0])
    assert np.allclose(p.position, [0.002, 0.0, 0.0])


def test_visual_speed_factor_only_scales_position():
    p = Particle(velocity=(1.0, 0.0, 0.0))
    p.update(0.1, 0.0, 0.0, ZERO_B, visual_speed_factor=10.0)
    assert p.velocity[0] == 1.0
    assert p.position[0] == pytest.approx(1.0)


def test_positive_charge_curves_clockwise_in_bz():
    """v=(+x), B=(+z): force points -y, so the path bends downward."""
    p = Particle(position=(400.0, 300.0, 0.0), velocity=(1.0, 0.0, 0.0), charge=1.0)
    for _ in range(20):
        p.update(0.02, 0.0, 0.0, np.array([0.0, 0.0, 1.0]))
    assert p.velocity[1] < 0.0
    assert p.position[1] < 300.0


def test_boundary_removal_and_finality():
    """Leaving [-W(b-1), W b] flags the particle; later updates are no-ops."""
    vp = Viewport(100.0, 100.0, margin=1.5)  # x in [-50, 150]
    p = Particle(position=(148.5, 50.0, 0.0), velocity=(10.0, 0.0, 0.0))

    p.update(0.02, 0.0, 0.0, ZERO_B, viewport=vp)  # -> 149.5, still inside
    assert not p.removed

    p.update(0.02, 0.0, 0.0, ZERO_B, viewport=vp)  # -> 150.5, outside
    assert p.removed

    pos = p.position.copy()
    trail_len = len(p.trail)
    p.update(0.02, 0.0, 0.0, ZERO_B, viewport=vp)
    assert np.array_equal(p.position, pos)
    assert len(p.trail) == trail_len
    assert p.removed


def test_mark_for_removal_idempotent():
    p = Particle()
    p.mark_for_removal()
    p.mark_for_removal()
    assert p.removed


def test_no_viewport_no_removal():
    p = Particle(position=(1e6, -1e6, 0.0))
    p.update(0.02, 0.0, 0.0, ZERO_B)
    assert not p.removed


def test_snapshot_is_detached():
    p = Particle(position=(1.0, 2.0, 3.0), charge=-1.0, mass=1.0)
    p.id = 42
    p.update(0.02, 0.0, 0.0, ZERO_B)
    snap = p.snapshot()

    p.update(0.02, 1.0, 1.0, ZERO_B)
    assert snap.id == 42
    assert snap.position == (1.0, 2.0, 3.0)
    assert len(snap.trail) == 1
    assert snap.color == NEGATIVE_COLOR
    assert snap.radius == pytest.approx(4.0)
