import numpy as np
import pytest
from lorentz_sim.config import SimulationConfig
from lorentz_sim.core.fields import FieldModel


def test_static_field_is_time_independent():
    fm = FieldModel(magnetic=(1.0, -2.0, 3.0), frequency=0.0)
    for t in (0.0, 0.13, 7.5, 1e4):
        assert np.array_equal(fm.evaluate_magnetic_field(t), [1.0, -2.0, 3.0])


def test_negative_frequency_means_static():
    fm = FieldModel(magnetic=(0.0, 0.0, 2.0), frequency=-1.0)
    assert not fm.is_oscillating
    assert fm.evaluate_magnetic_field(0.25)[2] == 2.0


def test_oscillating_field_quarter_period():
    """f=1, Bz=2: B(0)=2, B(0.25)≈0, B(0.5)=-2."""
    fm = FieldModel(magnetic=(0.0, 0.0, 2.0), frequency=1.0)
    assert fm.evaluate_magnetic_field(0.0)[2] == pytest.approx(2.0)
    assert abs(fm.evaluate_magnetic_field(0.25)[2]) < 1e-12
    assert fm.evaluate_magnetic_field(0.5)[2] == pytest.approx(-2.0)


def test_components_share_phase():
    fm = FieldModel(magnetic=(1.0, 2.0, -4.0), frequency=0.7)
    t = 0.31
    factor = np.cos(2 * np.pi * 0.7 * t)
    assert np.allclose(fm.evaluate_magnetic_field(t), np.array([1.0, 2.0, -4.0]) * factor)


def test_electric_field_static():
    fm = FieldModel(electric=(3.0, -1.0), frequency=5.0)
    assert np.array_equal(fm.evaluate_electric_field(), [3.0, -1.0])


def test_from_config():
    cfg = SimulationConfig(electric_field=(1, 2), magnetic_field=(0, 0, 5), magnetic_frequency=2)
    fm = FieldModel.from_config(cfg)
    assert fm.electric == (1.0, 2.0)
    assert fm.magnetic == (0.0, 0.0, 5.0)
    assert fm.frequency == 2.0


def test_state_for_indicators():
    fm = FieldModel(electric=(3.0, 4.0), magnetic=(0.0, 0.0, 1.0), frequency=1.0)
    st = fm.state(0.5)
    assert st.time == 0.5
    assert np.array_equal(st.electric, [3.0, 4.0, 0.0])
    assert st.magnetic[2] == pytest.approx(-1.0)
    assert st.is_oscillating
    assert fm.electric_magnitude == pytest.approx(5.0)
    assert fm.magnetic_amplitude == pytest.approx(1.0)


def test_describe():
    assert FieldModel().describe() == "E=none | B=none"

    text = FieldModel(electric=(3.0, 4.0), magnetic=(0.0, 0.0, 2.0), frequency=0.5).describe()
    assert text.startswith("E=5.0 (3, 4)")
    assert "B amp=2.0 (0, 0, 2)" in text
    assert text.endswith("f=0.50Hz")

    # Frequency is still reported with zero amplitude
    assert FieldModel(frequency=1.0).describe().endswith("B amp=0 f=1.00Hz")
