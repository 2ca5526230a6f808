"""Specific flow exergy of seawater after Sharqawy et al., 2011.

The exergy is split at the restricted dead state (T0, S, P0), which keeps the
salinity of the stream: the thermomechanical part is measured against it, the
chemical part compares it with the total dead state (T0, S0, P0).
"""
from ..config import P0_DEAD, S0_DEAD, S0_MAX, S0_MIN, T0_DEAD
from ..utils import check_range
from .caloric import SW_Enthalpy, SW_Entropy
from .potentials import SW_ChemPot_s, SW_ChemPot_w
from .saturation import check_pressure


def resolve_dead_state(T0=None, S0=None, P0=None):
    if T0 is None:
        T0 = T0_DEAD
    if S0 is None:
        S0 = S0_DEAD
    if P0 is None:
        P0 = P0_DEAD

    check_range(S0, S0_MIN, S0_MAX, 'S0', 'flow exergy')

    return T0, S0, P0


def _salt_potential(T, S, P):
    # S * mu_s, which tends to zero with S
    if S == 0:
        return 0.0
    return S * SW_ChemPot_s(T, S, P)


def SW_FlowExergy(T, S, P, T0=None, S0=None, P0=None):
    # specific flow exergy in J/kg relative to the dead state (T0, S0, P0)
    check_range(T, 10, 80, 'T', 'flow exergy')
    check_range(S, 0, 120, 'S', 'flow exergy')
    check_pressure(T, S, P, 'flow exergy')

    T0, S0, P0 = resolve_dead_state(T0, S0, P0)

    h_sw = SW_Enthalpy(T, S, P)
    s_sw = SW_Entropy(T, S, P)

    # restricted dead state
    h_sw_star = SW_Enthalpy(T0, S, P0)
    s_sw_star = SW_Entropy(T0, S, P0)
    mu_w_star = SW_ChemPot_w(T0, S, P0)
    Smu_s_star = _salt_potential(T0, S, P0)

    # total dead state
    mu_w_0 = SW_ChemPot_w(T0, S0, P0)
    Smu_s_0 = _salt_potential(T0, S0, P0) * (S / S0)

    return (
        (h_sw - h_sw_star) -
        (T0 + 273.15) * (s_sw - s_sw_star) +
        (1 - 0.001 * S) * (mu_w_star - mu_w_0) +
        0.001 * (Smu_s_star - Smu_s_0)
    )
