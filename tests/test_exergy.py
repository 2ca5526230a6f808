import pytest

from seaprops.config import P_ATM
from seaprops.errors import DomainError
from seaprops.properties.exergy import SW_FlowExergy, resolve_dead_state


def test_default_dead_state():
    assert resolve_dead_state() == (25, 35, P_ATM)
    assert resolve_dead_state(30, None, 0.2) == (30, 35, 0.2)


@pytest.mark.parametrize('S0', [0.0, 0.05, 120.5])
def test_dead_state_salinity_bounds(S0):
    with pytest.raises(DomainError) as excinfo:
        resolve_dead_state(S0=S0)
    assert excinfo.value.variable == 'S0'


@pytest.mark.parametrize('T0, S0, P0', [(25, 35, P_ATM), (15, 0.1, P_ATM), (40, 42, 1.0), (60, 100, P_ATM)])
def test_exergy_vanishes_at_dead_state(T0, S0, P0):
    assert SW_FlowExergy(T0, S0, P0, T0, S0, P0) == pytest.approx(0, abs=1e-9)


def test_defaults_match_explicit_dead_state():
    assert SW_FlowExergy(60, 50, 1.0) == SW_FlowExergy(60, 50, 1.0, 25, 35, P_ATM)


def test_hot_stream_has_exergy():
    assert SW_FlowExergy(60, 35, P_ATM) > 0


def test_brine_chemical_exergy():
    # at T0 and P0 only the chemical part is left
    assert SW_FlowExergy(25, 70, P_ATM) == pytest.approx(1095.762494, rel=1e-6)


def test_pure_water_stream():
    assert SW_FlowExergy(25, 0, P_ATM) > 0


def test_trace_salinity_stream_needs_salt_potential_range():
    # S * mu_s is only defined from 0.1 g/kg, except for its limit at S = 0
    with pytest.raises(DomainError) as excinfo:
        SW_FlowExergy(25, 0.05, P_ATM)
    assert excinfo.value.variable == 'S'
    assert excinfo.value.subject == 'chemical potential of salt'
