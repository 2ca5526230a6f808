import pytest

from seaprops.config import P_ATM
from seaprops.properties.caloric import SW_Gibbs
from seaprops.properties.potentials import (
    SW_ChemPot_s,
    SW_ChemPot_w,
    SW_OsmCoeff,
    SW_OsmPress,
    _osm_coeff_polynomial,
)
from seaprops.properties.saturation import reference_pressure
from seaprops.properties.volumetric import SW_Density


def test_chemical_potentials_reference_case():
    assert SW_ChemPot_w(25, 35, P_ATM) == pytest.approx(-7149.069452, rel=1e-8)
    assert SW_ChemPot_s(25, 35, P_ATM) == pytest.approx(70455.059716, rel=1e-8)


def test_water_potential_of_pure_water_is_gibbs():
    assert SW_ChemPot_w(50, 0, P_ATM) == SW_Gibbs(50, 0, P_ATM)


@pytest.mark.parametrize('T, S, P', [(25, 35, P_ATM), (60, 100, P_ATM), (30, 40, 5.0)])
def test_gibbs_is_mass_weighted_sum_of_potentials(T, S, P):
    w = S / 1000
    g = (1 - w) * SW_ChemPot_w(T, S, P) + w * SW_ChemPot_s(T, S, P)
    assert g == pytest.approx(SW_Gibbs(T, S, P), rel=1e-10)


def test_water_potential_decreases_with_salinity():
    assert SW_ChemPot_w(25, 70, P_ATM) < SW_ChemPot_w(25, 35, P_ATM) < SW_ChemPot_w(25, 0, P_ATM)


@pytest.mark.parametrize('T', [0, 25, 60, 120])
def test_osmotic_coefficient_continuous_at_anchor(T):
    phi_poly, _ = _osm_coeff_polynomial(T, 10)
    assert SW_OsmCoeff(T, 10) == pytest.approx(phi_poly, rel=1e-12)
    assert SW_OsmCoeff(T, 10 + 1e-9) == pytest.approx(SW_OsmCoeff(T, 10), abs=1e-9)


def test_osmotic_coefficient_slope_continuous_at_anchor():
    _, dphi_dS = _osm_coeff_polynomial(25, 10)

    dS = 1e-6
    left = (SW_OsmCoeff(25, 10) - SW_OsmCoeff(25, 10 - dS)) / dS
    right = (SW_OsmCoeff(25, 10 + dS) - SW_OsmCoeff(25, 10)) / dS

    assert left == pytest.approx(dphi_dS, rel=1e-4)
    assert right == pytest.approx(dphi_dS, rel=1e-4)


def test_osmotic_coefficient_of_pure_water_is_one():
    assert SW_OsmCoeff(25, 0) == 1


def test_osmotic_coefficient_reference_case():
    assert SW_OsmCoeff(25, 35) == pytest.approx(0.90684942, rel=1e-8)


def test_osmotic_pressure():
    assert SW_OsmPress(25, 0) == 0

    T, S = 25, 35
    m = S / (1000 - S) * (1000 / 31.4038218)
    rho_w = SW_Density(T, 0, reference_pressure(T, 0))
    expected = SW_OsmCoeff(T, S) * m * 8.3144598 * (T + 273.15) * rho_w / 1e6
    assert SW_OsmPress(T, S) == pytest.approx(expected, rel=1e-14)
    # about 2.6 MPa for standard seawater
    assert 2.5 < SW_OsmPress(T, S) < 2.9
