import numpy as np

from ..config import P_ATM, P_MAX, T_BOIL
from ..utils import check_range


def SW_Psat(T, S):
    # seawater vapor pressure in Pa from Nayar et al., 2016
    # pure water term is the IAPWS 1997 fit by Hyland and Wexler, 1983
    check_range(T, 0, 180, 'T', 'vapor pressure')
    check_range(S, 0, 160, 'S', 'vapor pressure')

    T_K = T + 273.15

    a1 = -5800.2206
    a2 = 1.3914993
    a3 = -0.048640239
    a4 = 0.000041764768
    a5 = -0.000000014452093
    a6 = 6.5459673

    Pv_w = np.exp(a1 / T_K + a2 + a3 * T_K + a4 * T_K**2 + a5 * T_K**3 + a6 * np.log(T_K))

    b1 = -4.5818e-4
    b2 = -2.0443e-6

    return Pv_w * np.exp(b1 * S + b2 * S**2)


def reference_pressure(T, S):
    """Pressure in MPa at which the P0 part of a correlation is anchored.

    Atmospheric below the normal boiling point, otherwise the saturation
    pressure of the seawater itself.
    """
    if T < T_BOIL:
        return P_ATM
    return SW_Psat(T, S) / 1e6


def check_pressure(T, S, P, subject):
    P_sat = SW_Psat(T, S) / 1e6
    check_range(P, P_sat, P_MAX, 'P', subject)


def SW_BPE(T, S):
    # boiling point elevation in K from Nayar et al., 2016
    check_range(T, 0, 200, 'T', 'boiling point elevation')
    check_range(S, 0, 120, 'S', 'boiling point elevation')

    S = S / 1000

    a1 = -0.00045838530457
    a2 = 0.28230948284
    a3 = 17.945189194
    a4 = 0.00015361752708
    a5 = 0.052669058133
    a6 = 6.5604855793

    A = a1 * T**2 + a2 * T + a3
    B = a4 * T**2 + a5 * T + a6

    return A * S**2 + B * S


def SW_LatentHeat(T, S):
    # latent heat of vaporization in J/kg from Sharqawy et al., 2010
    check_range(T, 0, 200, 'T', 'latent heat')
    check_range(S, 0, 240, 'S', 'latent heat')

    a1 = 2500899.1412
    a2 = -2369.1806479
    a3 = 0.26776439436
    a4 = -0.0081027544602
    a5 = -0.000020799346624

    hfg_w = a1 + a2 * T + a3 * T**2 + a4 * T**3 + a5 * T**4

    return hfg_w * (1 - 0.001 * S)
