"""Caloric properties of seawater.

Enthalpy, entropy and Gibbs energy share one structure: a pure water
polynomial, a salinity correction at the reference pressure P0 and a term
linear in (P - P0). The correlations are from Sharqawy et al., 2010 at P0
and Nayar et al., 2016 for the pressure terms; each carries its own
coefficients and validity range.
"""
import numpy as np

from ..utils import check_range
from .saturation import check_pressure, reference_pressure
from .volumetric import SW_Density


def SW_SpcHeat(T, S, P):
    # specific heat capacity in J/kg-K
    # P0 term from Jamieson et al., 1969, written for T68 in K and practical salinity
    check_range(T, 0, 180, 'T', 'specific heat capacity')
    check_range(S, 0, 180, 'S', 'specific heat capacity')
    check_pressure(T, S, P, 'specific heat capacity')

    P0 = reference_pressure(T, S)

    T68 = 1.00024 * (T + 273.15)
    SP = S / 1.00472

    A = 5.328 - 9.76e-2 * SP + 4.04e-4 * SP**2
    B = -6.913e-3 + 7.351e-4 * SP - 3.15e-6 * SP**2
    C = 9.6e-6 - 1.927e-6 * SP + 8.23e-9 * SP**2
    D = 2.5e-9 + 1.666e-9 * SP - 7.125e-12 * SP**2

    cp_sw_P0 = 1000 * (A + B * T68 + C * T68**2 + D * T68**3)

    c1 = -3.1118
    c2 = 0.0157
    c3 = 5.1014e-5
    c4 = -1.0302e-6
    c5 = 0.0107
    c6 = -3.9716e-5
    c7 = 3.2088e-8
    c8 = 1.0119e-9

    cp_sw_P = (P - P0) * (
        c1 + c2 * T + c3 * T**2 + c4 * T**3 +
        S * (c5 + c6 * T + c7 * T**2 + c8 * T**3)
    )

    return cp_sw_P0 + cp_sw_P


def SW_Enthalpy(T, S, P):
    # specific enthalpy in J/kg
    check_range(T, 10, 120, 'T', 'enthalpy')
    check_range(S, 0, 120, 'S', 'enthalpy')
    check_pressure(T, S, P, 'enthalpy')

    P0 = reference_pressure(T, S)
    S_kgkg = S / 1000

    h_w = 141.355 + 4202.07 * T - 0.535 * T**2 + 0.004 * T**3

    b1 = -2.34825e4
    b2 = 3.15183e5
    b3 = 2.80269e6
    b4 = -1.44606e7
    b5 = 7.82607e3
    b6 = -4.41733e1
    b7 = 2.1394e-1
    b8 = -1.99108e4
    b9 = 2.77846e4
    b10 = 9.72801e1

    c1 = 996.7767
    c2 = -3.2406
    c3 = 0.0127
    c4 = -4.7723e-5
    c5 = -1.1748
    c6 = 0.01169
    c7 = -2.6185e-5
    c8 = 7.0661e-8

    h_sw_P = (P - P0) * (
        c1 + c2 * T + c3 * T**2 + c4 * T**3 +
        S * (c5 + c6 * T + c7 * T**2 + c8 * T**3)
    )

    return h_w - S_kgkg * (
        b1 + b2 * S_kgkg + b3 * S_kgkg**2 + b4 * S_kgkg**3 +
        b5 * T + b6 * T**2 + b7 * T**3 +
        b8 * S_kgkg * T + b9 * S_kgkg**2 * T + b10 * S_kgkg * T**2
    ) + h_sw_P


def SW_Entropy(T, S, P):
    # specific entropy in J/kg-K
    check_range(T, 10, 120, 'T', 'entropy')
    check_range(S, 0, 120, 'S', 'entropy')
    check_pressure(T, S, P, 'entropy')

    P0 = reference_pressure(T, S)
    S_kgkg = S / 1000

    a1 = 1.543226508e-1
    a2 = 1.5382700241e1
    a3 = -2.9963211781e-2
    a4 = 8.1929151062e-5
    a5 = -1.3699640311e-7

    s_w = a1 + a2 * T + a3 * T**2 + a4 * T**3 + a5 * T**4

    b1 = -4.2307343871e2
    b2 = 1.4630334922e4
    b3 = -9.8796297642e4
    b4 = 3.0946224962e5
    b5 = 2.5623880831e1
    b6 = -1.4432346624e-1
    b7 = 5.8790568541e-4
    b8 = -6.110676427e1
    b9 = 8.0408001971e1
    b10 = 3.0354282687e-1

    c1 = -4.4786e-3
    c2 = -1.1654e-2
    c3 = 6.1154e-5
    c4 = -2.0696e-7
    c5 = -1.5531e-3
    c6 = 4.0054e-5
    c7 = -1.4193e-7
    c8 = 3.3142e-10

    s_sw_P = (P - P0) * (
        c1 + c2 * T + c3 * T**2 + c4 * T**3 +
        S * (c5 + c6 * T + c7 * T**2 + c8 * T**3)
    )

    return s_w - S_kgkg * (
        b1 + b2 * S_kgkg + b3 * S_kgkg**2 + b4 * S_kgkg**3 +
        b5 * T + b6 * T**2 + b7 * T**3 +
        b8 * S_kgkg * T + b9 * S_kgkg**2 * T + b10 * S_kgkg * T**2
    ) + s_sw_P


def SW_Gibbs(T, S, P):
    """Specific Gibbs energy in J/kg.

    The salinity correction is written in g/kg and contains S*ln(S) terms;
    for pure water (S = 0) it is zero and the logarithm is not evaluated.
    """
    check_range(T, 10, 120, 'T', 'Gibbs')
    check_range(S, 0, 120, 'S', 'Gibbs')
    check_pressure(T, S, P, 'Gibbs')

    P0 = reference_pressure(T, S)

    a1 = 1.0677e2
    a2 = -1.4303
    a3 = -7.6139
    a4 = 8.3627e-3
    a5 = -7.8754e-6

    g_w = a1 + a2 * T + a3 * T**2 + a4 * T**3 + a5 * T**4

    b1 = -2.4176e2
    b2 = -6.2462e-1
    b3 = 7.4761e-3
    b4 = 1.3836e-3
    b5 = -6.7157e-6
    b6 = 5.1993e-4
    b7 = 9.9176e-9
    b8 = 6.6448e1
    b9 = 2.0681e-1

    g_sw_P0 = 0
    if S > 0:
        g_sw_P0 = (
            b1 * S + b2 * S * T + b3 * S * T**2 +
            b4 * S**2 * T + b5 * S**2 * T**2 +
            b6 * S**3 + b7 * S**3 * T**2 +
            b8 * S * np.log(S) + b9 * S * T * np.log(S)
        )

    c1 = 996.1978
    c2 = 3.491e-2
    c3 = 4.7231e-3
    c4 = -6.9037e-6
    c5 = -7.2431e-1
    c6 = 1.5712e-3
    c7 = -1.8919e-5
    c8 = 2.5939e-8

    g_sw_P = (P - P0) * (
        c1 + c2 * T + c3 * T**2 + c4 * T**3 +
        S * (c5 + c6 * T + c7 * T**2 + c8 * T**3)
    )

    return g_w + g_sw_P0 + g_sw_P


def SW_IntEnergy(T, S, P):
    # specific internal energy in J/kg, u = h - P v
    check_range(T, 10, 120, 'T', 'internal energy')
    check_range(S, 0, 120, 'S', 'internal energy')
    check_pressure(T, S, P, 'internal energy')

    rho = SW_Density(T, S, P)
    return SW_Enthalpy(T, S, P) - P * 1e6 / rho
