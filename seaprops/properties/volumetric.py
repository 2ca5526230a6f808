"""Density and the volumetric properties derived from it.

The atmospheric density is the Sharqawy et al., 2010 fit. Pressure enters
through an exponential factor obtained by integrating the isothermal
compressibility of Nayar et al., 2016 from the reference pressure P0.
"""
import numpy as np

from ..utils import check_range
from .saturation import check_pressure, reference_pressure


def SW_Density(T, S, P):
    # seawater density in kg/m^3
    check_range(T, 0, 180, 'T', 'density')
    check_range(S, 0, 150, 'S', 'density')

    P0 = reference_pressure(T, S)
    check_pressure(T, S, P, 'density')

    S_kgkg = S / 1000

    a1 = 9.9992293295e2
    a2 = 2.0341179217e-2
    a3 = -6.1624591598e-3
    a4 = 2.2614664708e-5
    a5 = -4.6570659168e-8

    b1 = 8.0200240891e2
    b2 = -2.0005183488
    b3 = 1.6771024982e-2
    b4 = -3.0600536746e-5
    b5 = -1.6132224742e-5

    rho_w = a1 + a2 * T + a3 * T**2 + a4 * T**3 + a5 * T**4
    D_rho = (
        b1 * S_kgkg + b2 * S_kgkg * T + b3 * S_kgkg * T**2 +
        b4 * S_kgkg * T**3 + b5 * S_kgkg**2 * T**2
    )
    rho_sw_sharq = rho_w + D_rho

    c1 = 5.0792e-4
    c2 = -3.4168e-6
    c3 = 5.6931e-8
    c4 = -3.7263e-10
    c5 = 1.4465e-12
    c6 = -1.7058e-15
    c7 = -1.3389e-6
    c8 = 4.8603e-9
    c9 = -6.8039e-13
    d1 = -1.1077e-6
    d2 = 5.5584e-9
    d3 = -4.2539e-11
    d4 = 8.3702e-9

    F_P = np.exp(
        (P - P0) * (
            c1 + c2 * T + c3 * T**2 + c4 * T**3 + c5 * T**4 + c6 * T**5 +
            S * (d1 + d2 * T + d3 * T**2)
        ) +
        0.5 * (P**2 - P0**2) * (c7 + c8 * T + c9 * T**3 + d4 * S)
    )

    return rho_sw_sharq * F_P


def SW_Volume(T, S, P):
    # specific volume in m^3/kg
    check_range(T, 0, 180, 'T', 'specific volume')
    check_range(S, 0, 150, 'S', 'specific volume')

    rho = SW_Density(T, S, P)
    return 1 / rho


def SW_IsothComp(T, S, P):
    # isothermal compressibility in 1/MPa from Nayar et al., 2016
    check_range(T, 0, 180, 'T', 'isothermal compressibility')
    check_range(S, 0, 160, 'S', 'isothermal compressibility')
    check_pressure(T, S, P, 'isothermal compressibility')

    c1 = 5.0792e-4
    c2 = -3.4168e-6
    c3 = 5.6931e-8
    c4 = -3.7263e-10
    c5 = 1.4465e-12
    c6 = -1.7058e-15
    c7 = -1.3389e-6
    c8 = 4.8603e-9
    c9 = -6.8039e-13
    d1 = -1.1077e-6
    d2 = 5.5584e-9
    d3 = -4.2539e-11
    d4 = 8.3702e-9

    return (
        c1 + c2 * T + c3 * T**2 + c4 * T**3 + c5 * T**4 + c6 * T**5 +
        P * (c7 + c8 * T + c9 * T**3) +
        S * (d1 + d2 * T + d3 * T**2 + d4 * P)
    )


def SW_IsobExp(T, S, P):
    """Isobaric thermal expansivity in 1/K.

    Analytic temperature derivative of SW_Density: with rho = rho_sharq * F_P,
    d(rho)/dT = d(rho_sharq)/dT * F_P + rho_sharq * d(F_P)/dT, and the result
    is -d(rho)/dT / rho.
    """
    check_range(T, 0, 180, 'T', 'isobaric expansivity')
    check_range(S, 0, 150, 'S', 'isobaric expansivity')
    check_pressure(T, S, P, 'isobaric expansivity')

    P0 = reference_pressure(T, S)
    S_kgkg = S / 1000

    a1 = 9.9992293295e2
    a2 = 2.0341179217e-2
    a3 = -6.1624591598e-3
    a4 = 2.2614664708e-5
    a5 = -4.6570659168e-8

    b1 = 8.0200240891e2
    b2 = -2.0005183488
    b3 = 1.6771024982e-2
    b4 = -3.0600536746e-5
    b5 = -1.6132224742e-5

    rho_w = a1 + a2 * T + a3 * T**2 + a4 * T**3 + a5 * T**4
    D_rho = (
        b1 * S_kgkg + b2 * S_kgkg * T + b3 * S_kgkg * T**2 +
        b4 * S_kgkg * T**3 + b5 * S_kgkg**2 * T**2
    )
    drho_w_dT = a2 + 2 * a3 * T + 3 * a4 * T**2 + 4 * a5 * T**3
    dD_rho_dT = (
        b2 * S_kgkg + 2 * b3 * S_kgkg * T + 3 * b4 * S_kgkg * T**2 +
        2 * b5 * S_kgkg**2 * T
    )

    rho_sw_sharq = rho_w + D_rho
    drho_sw_sharq_dT = drho_w_dT + dD_rho_dT

    c1 = 5.0792e-4
    c2 = -3.4168e-6
    c3 = 5.6931e-8
    c4 = -3.7263e-10
    c5 = 1.4465e-12
    c6 = -1.7058e-15
    c7 = -1.3389e-6
    c8 = 4.8603e-9
    c9 = -6.8039e-13
    d1 = -1.1077e-6
    d2 = 5.5584e-9
    d3 = -4.2539e-11
    d4 = 8.3702e-9

    F_P = np.exp(
        (P - P0) * (
            c1 + c2 * T + c3 * T**2 + c4 * T**3 + c5 * T**4 + c6 * T**5 +
            S * (d1 + d2 * T + d3 * T**2)
        ) +
        0.5 * (P**2 - P0**2) * (c7 + c8 * T + c9 * T**3 + d4 * S)
    )
    dF_P_dT = F_P * (
        (P - P0) * (
            c2 + 2 * c3 * T + 3 * c4 * T**2 + 4 * c5 * T**3 + 5 * c6 * T**4 +
            S * (d2 + 2 * d3 * T)
        ) +
        0.5 * (P**2 - P0**2) * (c8 + 3 * c9 * T**2)
    )

    rho = rho_sw_sharq * F_P
    drho_dT = drho_sw_sharq_dT * F_P + rho_sw_sharq * dF_P_dT

    return -drho_dT / rho
