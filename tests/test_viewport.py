import numpy as np
import pytest
from lorentz_sim.viewport import Viewport


def test_removal_region_edges():
    vp = Viewport(800.0, 600.0, margin=1.5)
    assert vp.x_range == (-400.0, 1200.0)
    assert vp.y_range == (-300.0, 900.0)

    assert vp.contains((0.0, 0.0, 0.0))
    assert vp.contains((1200.0, 900.0, 0.0))
    assert vp.contains((-400.0, -300.0, 0.0))
    assert not vp.contains((1200.1, 0.0, 0.0))
    assert not vp.contains((0.0, -300.1, 0.0))


def test_z_is_ignored_by_bounds():
    vp = Viewport(100.0, 100.0)
    assert vp.contains((50.0, 50.0, 1e9))


def test_margin_one_is_the_visible_area():
    vp = Viewport(100.0, 50.0, margin=1.0)
    assert vp.contains((0.0, 0.0))
    assert vp.contains((100.0, 50.0))
    assert not vp.contains((-0.5, 10.0))


def test_screen_physics_y_inversion():
    vp = Viewport(800.0, 600.0)
    p = vp.screen_to_physics(100.0, 50.0)
    assert np.array_equal(p, [100.0, 550.0, 0.0])
    assert vp.physics_to_screen(p) == (100.0, 50.0)


def test_world_mapping_round_trip():
    vp = Viewport(800.0, 600.0)
    centre = vp.physics_to_world((400.0, 300.0, 0.0))
    assert np.allclose(centre, [0.0, 0.0, 0.0])

    w = vp.physics_to_world((450.0, 400.0, 25.0), world_scale=50.0)
    assert np.allclose(w, [1.0, 2.0, 0.5])
    assert np.allclose(vp.world_to_physics(w, world_scale=50.0), [450.0, 400.0, 25.0])


def test_world_mapping_accepts_2d():
    vp = Viewport(200.0, 200.0)
    assert np.allclose(vp.physics_to_world((100.0, 150.0)), [0.0, 1.0, 0.0])


def test_bad_vector_length():
    vp = Viewport(10.0, 10.0)
    with pytest.raises(ValueError):
        vp.physics_to_world((1.0, 2.0, 3.0, 4.0))
