import pytest

from seaprops.properties.transport import SW_Conductivity, SW_ConductivityP, SW_SurfaceTension, SW_Viscosity


def test_viscosity():
    assert SW_Viscosity(25, 35) == pytest.approx(9.5881099e-4, rel=1e-6)
    assert SW_Viscosity(25, 0) < SW_Viscosity(25, 35)
    assert SW_Viscosity(80, 35) < SW_Viscosity(25, 35)


def test_conductivity():
    assert SW_Conductivity(25, 35) == pytest.approx(0.60872621, rel=1e-6)


def test_pressure_conductivity_near_atmospheric():
    k_atm = SW_Conductivity(25, 35)
    k_p = SW_ConductivityP(25, 35, 0.101325)
    assert k_p == pytest.approx(k_atm, rel=0.02)


def test_pressure_conductivity_increases_with_pressure():
    assert SW_ConductivityP(30, 35, 10) > SW_ConductivityP(30, 35, 0.1)


def test_surface_tension():
    # pure water at 25 C, IAPWS 2014
    assert SW_SurfaceTension(25, 0) == pytest.approx(71.97, abs=0.01)
    assert SW_SurfaceTension(25, 35) > SW_SurfaceTension(25, 0)
