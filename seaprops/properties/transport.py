import numpy as np

from ..utils import check_range
from .saturation import check_pressure


def SW_Viscosity(T, S):
    # seawater dynamic viscosity in kg/m-s from Sharqawy et al., 2010
    # pure water term is a fit to IAPWS 2008
    check_range(T, 0, 180, 'T', 'viscosity')
    check_range(S, 0, 150, 'S', 'viscosity')

    S_kgkg = S / 1000

    a1 = 0.15700386464
    a2 = 64.99262005
    a3 = -91.296496657
    a4 = 0.000042844324477

    mu_w = a4 + 1 / (a1 * (T + a2)**2 + a3)

    a5 = 1.540913604
    a6 = 0.019981117208
    a7 = -0.000095203865864
    a8 = 7.9739318223
    a9 = -0.075614568881
    a10 = 0.00047237011074

    A = a5 + a6 * T + a7 * T**2
    B = a8 + a9 * T + a10 * T**2

    return mu_w * (1 + A * S_kgkg + B * S_kgkg**2)


def SW_Conductivity(T, S):
    # seawater thermal conductivity in W/m-K at atmospheric pressure
    # from Jamieson and Tudhope, 1970 (IPTS-68, practical salinity)
    check_range(T, 0, 180, 'T', 'thermal conductivity')
    check_range(S, 0, 160, 'S', 'thermal conductivity')

    T68 = 1.00024 * T
    SP = S / 1.00472

    return 0.001 * 10**(
        np.log10(240 + 0.0002 * SP) +
        0.434 * (2.3 - (343.5 + 0.037 * SP) / (T68 + 273.15)) *
        (1 - (T68 + 273.15) / (647.3 + 0.03 * SP))**(1 / 3)
    )


def SW_ConductivityP(T, S, P):
    # pressure dependent thermal conductivity in W/m-K from Nayar et al., 2016
    check_range(T, 10, 90, 'T', 'pressure-dependent thermal conductivity')
    check_range(S, 0, 120, 'S', 'pressure-dependent thermal conductivity')
    check_pressure(T, S, P, 'pressure-dependent thermal conductivity')

    T_star = (T + 273.15) / 300
    P_star = (P - 0.1) / 139.9

    k_fw0 = (
        0.797015135 * T_star**-0.193823894 -
        0.251242021 * T_star**-4.7166384 +
        0.0964365893 * T_star**-6.38463554 -
        0.0326956491 * T_star**-2.13362102
    )

    A = (
        13.464 * T_star**4 -
        60.727 * T_star**3 +
        102.81 * T_star**2 -
        77.387 * T_star +
        21.942
    )

    k_fw = k_fw0 * (1 + A * P_star)
    B = 0.00022

    return k_fw / (B * S + 1)


def SW_SurfaceTension(T, S):
    # surface tension in mN/m from Nayar et al., 2014
    # pure water term is the IAPWS 2014 release
    check_range(T, 0, 100, 'T', 'surface tension')
    check_range(S, 0, 131, 'S', 'surface tension')

    T_K = T + 273.15
    tau = 1 - T_K / 647.096

    gamma_w = 235.8 * tau**1.256 * (1 - 0.625 * tau)

    return gamma_w * (1 + 3.766e-4 * S + 2.347e-6 * S * T)
