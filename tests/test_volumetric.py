import numpy as np
import pytest

from seaprops.config import P_ATM
from seaprops.properties.volumetric import SW_Density, SW_IsobExp, SW_IsothComp, SW_Volume

STATES = [
    (25, 35, 0.1),
    (10, 0, 2.0),
    (60, 70, 5.0),
    (150, 120, 8.0),
]

# above 100 C the reference pressure moves with T, which the analytic
# expansivity holds fixed
STATES_BELOW_BOILING = STATES[:3]


def test_density_reference_case():
    assert SW_Density(25, 35, 0.1) == pytest.approx(1023.58427, rel=1e-8)


def test_density_at_reference_pressure_is_atmospheric_fit():
    # F(P0) = 1, so the pressure factor drops out
    T, S = 20, 40
    s = S / 1000
    rho_w = 9.9992293295e2 + 2.0341179217e-2 * T - 6.1624591598e-3 * T**2 + 2.2614664708e-5 * T**3 - 4.6570659168e-8 * T**4
    D_rho = 8.0200240891e2 * s - 2.0005183488 * s * T + 1.6771024982e-2 * s * T**2 - 3.0600536746e-5 * s * T**3 - 1.6132224742e-5 * s**2 * T**2
    assert SW_Density(T, S, P_ATM) == pytest.approx(rho_w + D_rho, rel=1e-12)


@pytest.mark.parametrize('T, S, P', STATES)
def test_volume_is_inverse_density(T, S, P):
    assert SW_Volume(T, S, P) == pytest.approx(1 / SW_Density(T, S, P), rel=1e-14)


@pytest.mark.parametrize('T, S, P', STATES_BELOW_BOILING)
def test_isobaric_expansivity_matches_density_slope(T, S, P):
    dT = 1e-3
    drho_dT = (SW_Density(T + dT, S, P) - SW_Density(T - dT, S, P)) / (2 * dT)
    expected = -drho_dT / SW_Density(T, S, P)
    assert SW_IsobExp(T, S, P) == pytest.approx(expected, rel=1e-5)


@pytest.mark.parametrize('T, S, P', STATES)
def test_isothermal_compressibility_matches_density_slope(T, S, P):
    dP = 1e-3
    dlnrho_dP = (np.log(SW_Density(T, S, P + dP)) - np.log(SW_Density(T, S, P - dP))) / (2 * dP)
    assert SW_IsothComp(T, S, P) == pytest.approx(dlnrho_dP, rel=1e-6)


def test_density_increases_with_pressure():
    assert SW_Density(25, 35, 10) > SW_Density(25, 35, 1) > SW_Density(25, 35, 0.1)
