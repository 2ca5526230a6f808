import pytest

from seaprops.config import P_ATM
from seaprops.properties.saturation import SW_BPE, SW_LatentHeat, SW_Psat, reference_pressure


def test_psat_pure_water():
    assert SW_Psat(25, 0) == pytest.approx(3169.2165, rel=1e-6)
    assert SW_Psat(100, 0) == pytest.approx(101418.72, rel=1e-6)


def test_psat_salinity_lowers_vapor_pressure():
    assert SW_Psat(25, 35) == pytest.approx(3110.9988, rel=1e-6)
    assert SW_Psat(60, 70) < SW_Psat(60, 35) < SW_Psat(60, 0)


def test_reference_pressure_below_boiling():
    assert reference_pressure(25, 35) == P_ATM
    assert reference_pressure(99.9, 0) == P_ATM


def test_reference_pressure_above_boiling():
    assert reference_pressure(100, 35) == SW_Psat(100, 35) / 1e6
    assert reference_pressure(150, 70) == SW_Psat(150, 70) / 1e6


def test_bpe():
    assert SW_BPE(100, 0) == 0
    assert SW_BPE(100, 35) == pytest.approx(0.518675, rel=1e-5)


def test_latent_heat():
    assert SW_LatentHeat(0, 0) == pytest.approx(2500899.1412)
    assert SW_LatentHeat(50, 40) == pytest.approx(SW_LatentHeat(50, 0) * 0.96)
